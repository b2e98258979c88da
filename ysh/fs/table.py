"""Inode table: the arena that owns every node of one file system."""

import logging
from typing import Dict, Iterator

from ysh.fs.base import Content, Directory, Inode, NodeType, PlainFile

logger = logging.getLogger(__name__)


class InodeTable:
    """Allocates inode numbers and keeps every inode alive.

    Numbers start at 1 and increase by one per allocation. They are
    never reused, since nothing is ever removed from the table.
    """

    def __init__(self):
        self._inodes: Dict[int, Inode] = {}
        self._next_inode_nr = 1

    def allocate(self, node_type: NodeType) -> Inode:
        """Create and register a new empty inode.

        Args:
            node_type: Kind of content for the new inode

        Returns:
            The new inode
        """
        contents: Content
        if node_type is NodeType.DIRECTORY:
            contents = Directory(self)
        else:
            contents = PlainFile()

        inode = Inode(self._next_inode_nr, contents)
        self._inodes[inode.inode_nr] = inode
        self._next_inode_nr += 1
        logger.debug(f"inode {inode.inode_nr}, type = {inode.file_type}")
        return inode

    def get(self, inode_nr: int) -> Inode:
        return self._inodes[inode_nr]

    def __contains__(self, inode_nr: int) -> bool:
        return inode_nr in self._inodes

    def __len__(self) -> int:
        return len(self._inodes)

    def __iter__(self) -> Iterator[Inode]:
        return iter(self._inodes.values())
