"""Name resolution for the in-memory file system.

Handles single path components relative to a directory and the
path-stack arithmetic used to render absolute paths (cd, ls, pwd).
"""

from typing import List

from ysh.fs.base import PATH_SEPARATOR, Inode
from ysh.fs.errors import ArgumentError, NotADirectoryError, NotFoundError
from ysh.fs.table import InodeTable

ROOT_SEGMENT = PATH_SEPARATOR


class PathResolver:
    """Resolves entry names and handles navigation.

    Only one path component is accepted per lookup:
    - Root: /
    - Special entries: ., ..
    - Entry names, with at most one trailing separator (a/)
    """

    def __init__(self, table: InodeTable, root: Inode):
        """Initialize path resolver.

        Args:
            table: Inode table owning the tree
            root: Root directory inode
        """
        self.table = table
        self.root = root

    def component(self, path: str) -> str:
        """Reduce a path argument to a single entry name.

        Args:
            path: Path argument as typed

        Returns:
            Entry name without a trailing separator

        Raises:
            ArgumentError: If the path is empty or has several components
        """
        name = path
        if name.endswith(PATH_SEPARATOR) and name != PATH_SEPARATOR:
            name = name[:-1]
        if not name or PATH_SEPARATOR in name:
            raise ArgumentError(f"{path}: only single path components are supported")
        return name

    def resolve(self, path: str, current: Inode) -> Inode:
        """Resolve a path argument to an inode.

        Args:
            path: "/" or a single entry name
            current: Directory to resolve against

        Returns:
            The inode the entry refers to

        Raises:
            NotFoundError: If no such entry exists
        """
        if path == ROOT_SEGMENT:
            return self.root

        name = self.component(path)
        dirents = current.get_dirents()
        if name not in dirents:
            raise NotFoundError(f"{path}: No such file or directory")
        return self.table.get(dirents[name])

    def resolve_directory(self, path: str, current: Inode) -> Inode:
        """Resolve a path argument that must name a directory.

        Raises:
            NotFoundError: If no such entry exists
            NotADirectoryError: If the entry is a plain file
        """
        node = self.resolve(path, current)
        if not node.is_directory:
            raise NotADirectoryError(f"{path}: Not a directory")
        return node

    def descend(self, path_stack: List[str], path: str) -> List[str]:
        """Compute the path stack after moving to ``path``.

        Args:
            path_stack: Current path segments, starting with the root segment
            path: "/" or a single entry name

        Returns:
            New path stack; the input list is not modified
        """
        if path == ROOT_SEGMENT:
            return [ROOT_SEGMENT]

        name = self.component(path)
        if name == "..":
            return path_stack[:-1] if len(path_stack) > 1 else list(path_stack)
        if name == ".":
            return list(path_stack)
        return path_stack + [name]

    def format_path(self, path_stack: List[str]) -> str:
        """Render a path stack as an absolute path.

        Returns:
            "/" for the root, otherwise like /a/b
        """
        segments = path_stack[1:]
        return ROOT_SEGMENT + PATH_SEPARATOR.join(segments)

    def complete_path(self, partial: str, current: Inode) -> List[str]:
        """Get completion candidates for a partial entry name.

        Used for tab completion.

        Args:
            partial: Partial entry name
            current: Current working directory

        Returns:
            Matching names; directories get a trailing separator
        """
        if PATH_SEPARATOR in partial:
            return []

        candidates = []
        for entry in current.contents.list():
            if entry.name.startswith(partial):
                candidates.append(entry.display_name)
        return candidates
