"""InodeState - the session holding one in-memory file system."""

import logging
from typing import List, Optional, Sequence

from ysh.fs.base import PATH_SEPARATOR, DirEntry, NodeType
from ysh.fs.errors import (
    AlreadyExistsError,
    ArgumentError,
    IsADirectoryError,
)
from ysh.fs.resolver import ROOT_SEGMENT, PathResolver
from ysh.fs.table import InodeTable

logger = logging.getLogger(__name__)


def format_entry(entry: DirEntry) -> str:
    """Format one listing line: inode number, size, name."""
    return f"{entry.inode_nr:6}  {entry.size:6}  {entry.display_name}"


class InodeState:
    """Root, current directory, absolute path and prompt of one session.

    This is the entry point for file system access. Operations take the
    operands of a command, validate their shape, then look up or mutate
    the tree. Nothing is mutated until every check has passed.

    Usage:
        >>> state = InodeState()
        >>> a_nr = state.mkdir("a")
        >>> state.cd("a")
        >>> f_nr = state.make(["f", "hello", "world"])
        >>> state.cat(["f"])
        ['hello world']
        >>> state.pwd()
        '/a'
    """

    def __init__(self):
        self.table = InodeTable()
        self.root = self.table.allocate(NodeType.DIRECTORY)
        dirents = self.root.get_dirents()
        dirents["."] = self.root.inode_nr
        dirents[".."] = self.root.inode_nr
        self.cwd = self.root
        self.path_stack: List[str] = [ROOT_SEGMENT]
        self.prompt = ""
        self.resolver = PathResolver(self.table, self.root)
        logger.debug(f"root = {self.root}, cwd = {self.cwd}, prompt = {self.prompt!r}")

    def make(self, words: Sequence[str]) -> int:
        """Create or overwrite a plain file in the current directory.

        Args:
            words: Filename followed by the content words

        Returns:
            The file's inode number

        Raises:
            ArgumentError: If no filename is given
            IsADirectoryError: If the filename ends with a separator
            WrongKindError: If the name refers to an existing directory
        """
        if not words:
            raise ArgumentError("no filename given")

        filename = words[0]
        if filename.endswith(PATH_SEPARATOR):
            raise IsADirectoryError(f"{filename}: cannot make a directory")
        self.resolver.component(filename)

        contents = self.cwd.contents
        if contents.file_exists(filename):
            target = self.table.get(contents.get_dirents()[filename])
        else:
            target = contents.mkfile(filename)

        target.contents.writefile(list(words[1:]))
        return target.inode_nr

    def mkdir(self, path: str) -> int:
        """Create a directory in the current directory.

        Returns:
            The new directory's inode number

        Raises:
            ArgumentError: If the path has more than one component
            AlreadyExistsError: If an entry with that name exists
        """
        if path == ROOT_SEGMENT:
            raise AlreadyExistsError(f"{path}: File exists")
        name = self.resolver.component(path)

        contents = self.cwd.contents
        if contents.file_exists(name):
            raise AlreadyExistsError(f"{path}: File exists")
        return contents.mkdir(name, self.cwd.inode_nr).inode_nr

    def read_file(self, filename: str) -> str:
        """Return a file's words joined by single spaces.

        Raises:
            IsADirectoryError: If the name ends with a separator or is a directory
            NotFoundError: If no such entry exists
        """
        if filename.endswith(PATH_SEPARATOR):
            raise IsADirectoryError(f"{filename}: Is a directory")

        node = self.resolver.resolve(filename, self.cwd)
        if node.is_directory:
            raise IsADirectoryError(f"{filename}: Is a directory")
        return " ".join(node.contents.readfile())

    def cat(self, filenames: Sequence[str]) -> List[str]:
        """Read several files.

        Returns:
            One line per filename

        Raises:
            ArgumentError: If no filename is given
        """
        if not filenames:
            raise ArgumentError("no filename given")
        return [self.read_file(filename) for filename in filenames]

    def cd(self, path: Optional[str] = None) -> None:
        """Change the current directory.

        Args:
            path: Entry name, "/" or None for the root

        Raises:
            NotFoundError: If no such entry exists
            NotADirectoryError: If the entry is a plain file
        """
        if path is None or path == ROOT_SEGMENT:
            self.cwd = self.root
            self.path_stack = [ROOT_SEGMENT]
            return

        target = self.resolver.resolve_directory(path, self.cwd)
        self.path_stack = self.resolver.descend(self.path_stack, path)
        self.cwd = target
        logger.debug(f"cd: cwd = {self.cwd}, path = {self.pwd()}")

    def pwd(self) -> str:
        """Get current working directory path.

        Returns:
            "/" at the root, otherwise like /a/b
        """
        return self.resolver.format_path(self.path_stack)

    def ls(self, path: Optional[str] = None) -> List[str]:
        """List a directory.

        Without a path the current directory is listed with no header.
        With a path, the target's absolute path is printed first as a
        header line ending in a colon.

        Raises:
            NotFoundError: If no such entry exists
            NotADirectoryError: If the entry is a plain file
        """
        if path is None:
            return [format_entry(entry) for entry in self.cwd.contents.list()]

        target = self.resolver.resolve_directory(path, self.cwd)
        header = self.resolver.format_path(self.resolver.descend(self.path_stack, path))
        lines = [f"{header}:"]
        lines.extend(format_entry(entry) for entry in target.contents.list())
        return lines

    def set_prompt(self, words: Sequence[str]) -> str:
        """Set the prompt text.

        Returns:
            The new prompt: a single space without words, otherwise
            each word followed by one space
        """
        if not words:
            self.prompt = " "
        else:
            self.prompt = "".join(f"{word} " for word in words)
        return self.prompt

    def __repr__(self) -> str:
        return f"InodeState(root={self.root}, cwd={self.cwd})"
