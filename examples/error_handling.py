"""Error handling — catching NotFound, NotADirectory, InvalidPath.

Demonstrates the error hierarchy and how to handle errors
programmatically using structured attributes.
"""

from __future__ import annotations

from inmemfs import FileSystem, FileSystemError, InvalidPath, NotADirectory, NotFound

if __name__ == "__main__":
    with FileSystem() as fs:
        fs.add("docs\\readme.txt", b"read me")

        # --- Silent deletes ---
        fs.delete("does_not_exist")
        print("Deleting a missing path is a no-op by default")

        # --- NotFound ---
        try:
            fs.delete("does_not_exist", missing_ok=False)
        except NotFound as exc:
            print(f"NotFound: {exc}")
            print(f"  path={exc.path}")

        try:
            fs.read_bytes("docs\\missing.txt")
        except NotFound as exc:
            print(f"NotFound: {exc}")

        # --- NotADirectory ---
        try:
            fs.add("docs\\readme.txt\\nested.txt", b"x")
        except NotADirectory as exc:
            print(f"NotADirectory: {exc}")

        # --- InvalidPath ---
        try:
            fs.add("bad\0name", b"x")
        except InvalidPath as exc:
            print(f"InvalidPath: {exc}")

        # --- Catch-all ---
        try:
            fs.get_folder_info("docs\\readme.txt")
        except FileSystemError as exc:
            print(f"Caught via base class: {type(exc).__name__}: {exc}")
