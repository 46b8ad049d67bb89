"""Configuration — custom separator, root name and listing order.

Demonstrates building a FileSystemConfig directly and from a plain dict
(e.g. parsed TOML/JSON).
"""

from __future__ import annotations

from inmemfs import FileSystem, FileSystemConfig

if __name__ == "__main__":
    config = FileSystemConfig(separator="/", root_name="root")
    with FileSystem(config) as fs:
        fs.add("etc/hosts", b"127.0.0.1 localhost\n")
        fs.add("var/log/app.log", b"started\n")
        print(fs.listing(), end="")
        info = fs.get_folder_info("var")
        print(f"{info.name}: {info.file_count} file(s), {info.total_size} bytes")

    # Insertion order instead of lexicographic listing
    config = FileSystemConfig.from_dict({"separator": ":", "sorted_listing": False})
    with FileSystem(config) as fs:
        fs.add("zeta:b.txt", b"bb")
        fs.add("alpha:a.txt", b"a")
        fs.list()
