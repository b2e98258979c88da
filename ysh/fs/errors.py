"""Errors raised by the in-memory file system.

Every failure carries only the reason; the command layer prefixes the
command name when reporting it (e.g. ``cd: foo: No such file or directory``).
"""


class FileSystemError(Exception):
    """Base class for file system errors."""
    pass


class ArgumentError(FileSystemError):
    """Wrong operand count or shape."""
    pass


class NotFoundError(FileSystemError):
    """Named entry does not exist in the directory."""
    pass


class AlreadyExistsError(FileSystemError):
    """Creation target name is already taken."""
    pass


class WrongKindError(FileSystemError):
    """Operation is not valid for this kind of content."""
    pass


class NotADirectoryError(WrongKindError):
    """Attempted to cd into or list a plain file."""
    pass


class IsADirectoryError(WrongKindError):
    """Attempted to read or write a directory as a file."""
    pass
