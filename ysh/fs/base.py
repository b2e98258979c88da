"""Base classes for the in-memory file system.

Architecture:
    - Inode: A numbered node holding exactly one content object
    - Content: Polymorphic payload (PlainFile or Directory)
    - PlainFile: Ordered list of words, rewritten wholesale
    - Directory: Name -> inode number table, including "." and ".."

Directory entries refer to inodes by number. The owning InodeTable
keeps every inode alive, so the cycles formed by "." and ".." are
plain integer lookups.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, NamedTuple

from ysh.fs.errors import WrongKindError

if TYPE_CHECKING:
    from ysh.fs.table import InodeTable

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "/"


class NodeType(Enum):
    """Kind of content held by an inode."""
    PLAIN = "plain file"
    DIRECTORY = "directory"


class DirEntry(NamedTuple):
    """One line of a directory listing."""
    inode_nr: int
    size: int
    name: str
    suffix: str

    @property
    def display_name(self) -> str:
        return self.name + self.suffix


class Content(ABC):
    """Base class for inode contents.

    Every operation fails with WrongKindError unless the subclass
    supports it, so callers never need to check the kind first.
    """

    node_type: NodeType

    @property
    def file_type(self) -> str:
        return self.node_type.value

    def _wrong_kind(self) -> WrongKindError:
        return WrongKindError(f"is a {self.file_type}")

    @abstractmethod
    def size(self) -> int:
        """Size as shown by ls."""
        pass

    def readfile(self) -> List[str]:
        raise self._wrong_kind()

    def writefile(self, words: List[str]) -> None:
        raise self._wrong_kind()

    def get_dirents(self) -> Dict[str, int]:
        raise self._wrong_kind()

    def file_exists(self, name: str) -> bool:
        raise self._wrong_kind()

    def mkdir(self, name: str, parent_nr: int) -> "Inode":
        raise self._wrong_kind()

    def mkfile(self, name: str) -> "Inode":
        raise self._wrong_kind()

    def list(self) -> List[DirEntry]:
        raise self._wrong_kind()


class PlainFile(Content):
    """A plain file whose content is a sequence of words."""

    node_type = NodeType.PLAIN

    def __init__(self):
        self._data: List[str] = []

    def size(self) -> int:
        """Length of the words joined by single spaces."""
        if not self._data:
            return 0
        return sum(len(word) for word in self._data) + len(self._data) - 1

    def readfile(self) -> List[str]:
        return list(self._data)

    def writefile(self, words: List[str]) -> None:
        logger.debug(f"writefile: {words}")
        self._data = list(words)


class Directory(Content):
    """A directory mapping entry names to inode numbers.

    Args:
        table: Inode table that allocates and owns new entries
    """

    node_type = NodeType.DIRECTORY

    def __init__(self, table: "InodeTable"):
        self._table = table
        self._dirents: Dict[str, int] = {}

    def size(self) -> int:
        """Number of entries, "." and ".." included."""
        return len(self._dirents)

    def get_dirents(self) -> Dict[str, int]:
        return self._dirents

    def file_exists(self, name: str) -> bool:
        return name in self._dirents

    def mkdir(self, name: str, parent_nr: int) -> "Inode":
        """Create a subdirectory under ``name``.

        The caller is responsible for checking that ``name`` is free.

        Args:
            name: Entry name for the new directory
            parent_nr: Inode number the new ".." entry points to

        Returns:
            The new directory inode
        """
        logger.debug(f"mkdir: {name}")
        inode = self._table.allocate(NodeType.DIRECTORY)
        dirents = inode.get_dirents()
        dirents["."] = inode.inode_nr
        dirents[".."] = parent_nr
        self._dirents[name] = inode.inode_nr
        return inode

    def mkfile(self, name: str) -> "Inode":
        logger.debug(f"mkfile: {name}")
        inode = self._table.allocate(NodeType.PLAIN)
        self._dirents[name] = inode.inode_nr
        return inode

    def list(self) -> List[DirEntry]:
        """List entries sorted by name.

        Returns:
            One DirEntry per entry; directories get a trailing separator
        """
        entries = []
        for name in sorted(self._dirents):
            inode = self._table.get(self._dirents[name])
            suffix = PATH_SEPARATOR if inode.is_directory else ""
            entries.append(DirEntry(inode.inode_nr, inode.size(), name, suffix))
        return entries


class Inode:
    """A numbered node of the file tree.

    Attributes:
        inode_nr: Unique number assigned by the owning table
        contents: PlainFile or Directory payload
    """

    def __init__(self, inode_nr: int, contents: Content):
        self._inode_nr = inode_nr
        self.contents = contents

    @property
    def inode_nr(self) -> int:
        return self._inode_nr

    @property
    def node_type(self) -> NodeType:
        return self.contents.node_type

    @property
    def file_type(self) -> str:
        return self.contents.file_type

    @property
    def is_directory(self) -> bool:
        return self.node_type is NodeType.DIRECTORY

    def size(self) -> int:
        return self.contents.size()

    def get_dirents(self) -> Dict[str, int]:
        return self.contents.get_dirents()

    def __repr__(self) -> str:
        return f"Inode(inode_nr={self._inode_nr}, type='{self.file_type}')"
