"""In-memory hierarchical file system.

The file system is a tree of numbered inodes. Each inode holds either a
directory (a table of named entries) or a plain file (a list of words).
It is navigated with familiar shell commands through an InodeState.

Architecture:

    ```
    /                    # Root directory, inode 1 ("." and ".." -> 1)
    ├── ./               # Self entry
    ├── ../              # Parent entry (the root itself)
    └── a/               # Directory created by `mkdir a`
        ├── ./           # -> a
        ├── ../          # -> /
        └── f            # Plain file created by `make f hello world`
    ```

Node Types:

    - Inode: Numbered node owned by an InodeTable
    - Directory: Name -> inode number table
    - PlainFile: Word sequence, rewritten wholesale

Usage Example:

    ```python
    from ysh.fs import InodeState

    state = InodeState()
    state.mkdir("a")
    state.cd("a")
    state.make(["f", "hello", "world"])
    print(state.cat(["f"]))   # ['hello world']
    print(state.pwd())        # /a
    for line in state.ls():
        print(line)
    ```
"""

from ysh.fs.base import (
    PATH_SEPARATOR,
    Content,
    DirEntry,
    Directory,
    Inode,
    NodeType,
    PlainFile,
)
from ysh.fs.errors import (
    AlreadyExistsError,
    ArgumentError,
    FileSystemError,
    IsADirectoryError,
    NotADirectoryError,
    NotFoundError,
    WrongKindError,
)
from ysh.fs.resolver import PathResolver
from ysh.fs.state import InodeState
from ysh.fs.table import InodeTable

__all__ = [
    # Main entry point
    "InodeState",
    # Core classes
    "Inode",
    "InodeTable",
    "Content",
    "Directory",
    "PlainFile",
    "DirEntry",
    "NodeType",
    "PATH_SEPARATOR",
    # Path resolution
    "PathResolver",
    # Errors
    "FileSystemError",
    "ArgumentError",
    "NotFoundError",
    "AlreadyExistsError",
    "WrongKindError",
    "NotADirectoryError",
    "IsADirectoryError",
]
