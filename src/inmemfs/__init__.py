"""In-memory hierarchical namespace of directories and files."""

from inmemfs._config import FileSystemConfig
from inmemfs._errors import FileSystemError, InvalidPath, NotADirectory, NotFound
from inmemfs._filesystem import FileSystem, get_instance, reset_instance
from inmemfs._models import FileInfo, FolderInfo
from inmemfs._nodes import Directory, File, Node
from inmemfs._path import iter_segments, split_path

__version__ = "0.1.0"

__all__ = [
    # Core
    "FileSystem",
    "get_instance",
    "reset_instance",
    # Nodes
    "Node",
    "File",
    "Directory",
    # Paths & Models
    "split_path",
    "iter_segments",
    "FileInfo",
    "FolderInfo",
    # Config
    "FileSystemConfig",
    # Errors
    "FileSystemError",
    "NotFound",
    "NotADirectory",
    "InvalidPath",
    # Version
    "__version__",
]
