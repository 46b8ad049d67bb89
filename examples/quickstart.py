"""Quickstart — build a small tree through the shared instance and print it.

Demonstrates:
- Getting the process-wide FileSystem
- Adding files at nested paths (directories are created on the way)
- Overwriting a file and deleting files and directories
- Printing the final listing
"""

from __future__ import annotations

import logging

from inmemfs import get_instance

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    fs = get_instance()

    # Create root files and dirs
    fs.add("file1.txt", b"hello", 5)
    fs.add("file2.txt", b"world!", 6)

    # Create nested directory structure
    fs.add("dir1\\file1.txt", b"data123", 7)
    fs.add("dir1\\file2.txt", b"foo", 3)
    fs.add("dir1\\dir2\\file3.txt", b"barbaz", 6)
    fs.add("dir3\\file4.txt", b"abcdefgh", 8)

    # Overwrite a file
    fs.add("dir3\\file4.txt", b"overwrite", 9)

    # Add more nested structure
    fs.add("dir3\\sub1\\sub2\\file5.txt", b"deep", 4)

    # Delete a single file, then a directory (recursively)
    fs.delete("file2.txt")
    fs.delete("dir1")

    print("[Final FileSystem Structure]:")
    fs.list()
    print(f"Total size: {fs.total_size()} bytes")
