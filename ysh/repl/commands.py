"""Shell commands and the command table.

Every handler takes the InodeState and the full word list of the
invocation (word 0 is the command name) and returns the output lines.
Handlers check the operand count before calling into the file system.
"""

import logging
import re
from typing import Callable, Dict, Iterable, List, Optional

from ysh.fs import ArgumentError, InodeState

logger = logging.getLogger(__name__)

CommandFn = Callable[[InodeState, List[str]], Iterable[str]]

NOT_A_NUMBER_STATUS = 127

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


class CommandError(Exception):
    """Unknown or unsupported command."""
    pass


class ShellExit(Exception):
    """Raised by `exit` to stop the shell.

    Attributes:
        status: Requested exit status, or None to keep the current one
    """

    def __init__(self, status: Optional[int] = None):
        super().__init__(f"exit({status})")
        self.status = status


def _max_operands(words: List[str], count: int) -> None:
    if len(words) - 1 > count:
        raise ArgumentError("too many operands")


def fn_comment(state: InodeState, words: List[str]) -> List[str]:
    """Comment line, does nothing.

    Usage: # <text>
    """
    return []


def fn_cat(state: InodeState, words: List[str]) -> Iterable[str]:
    """Print the content of each file, one line per file.

    Files are read one at a time, so the lines of earlier files are
    printed before a failing operand stops the command.

    Usage: cat <file>...
    """
    if len(words) < 2:
        raise ArgumentError("no filename given")
    return (state.read_file(filename) for filename in words[1:])


def fn_cd(state: InodeState, words: List[str]) -> List[str]:
    """Change directory. Without an operand, go to the root.

    Usage: cd [dir]
    """
    _max_operands(words, 1)
    state.cd(words[1] if len(words) > 1 else None)
    return []


def fn_echo(state: InodeState, words: List[str]) -> List[str]:
    """Print the operands separated by spaces.

    Usage: echo [word...]
    """
    return [" ".join(words[1:])]


def fn_exit(state: InodeState, words: List[str]) -> List[str]:
    """Exit the shell.

    The status is the leading integer of the operand (3abc exits with 3);
    an operand without one exits with 127.

    Usage: exit [status]
    """
    _max_operands(words, 1)
    status = None
    if len(words) > 1:
        match = LEADING_INTEGER.match(words[1])
        status = int(match.group(1)) if match else NOT_A_NUMBER_STATUS
    raise ShellExit(status)


def fn_ls(state: InodeState, words: List[str]) -> List[str]:
    """List a directory: inode number, size, name.

    Usage: ls [dir]
    """
    _max_operands(words, 1)
    return state.ls(words[1] if len(words) > 1 else None)


def fn_make(state: InodeState, words: List[str]) -> List[str]:
    """Create a file, or replace the content of an existing one.

    Usage: make <file> [word...]
    """
    state.make(words[1:])
    return []


def fn_mkdir(state: InodeState, words: List[str]) -> List[str]:
    """Create a directory.

    Usage: mkdir <dir>
    """
    if len(words) < 2:
        raise ArgumentError("no operand given")
    _max_operands(words, 1)
    state.mkdir(words[1])
    return []


def fn_prompt(state: InodeState, words: List[str]) -> List[str]:
    """Set the prompt.

    Usage: prompt [word...]
    """
    state.set_prompt(words[1:])
    return []


def fn_pwd(state: InodeState, words: List[str]) -> List[str]:
    """Print the absolute path of the current directory.

    Usage: pwd
    """
    _max_operands(words, 0)
    return [state.pwd()]


def fn_unsupported(state: InodeState, words: List[str]) -> List[str]:
    """Recursive listing and removal are not supported."""
    raise CommandError("operation not supported")


COMMANDS: Dict[str, CommandFn] = {
    "#": fn_comment,
    "cat": fn_cat,
    "cd": fn_cd,
    "echo": fn_echo,
    "exit": fn_exit,
    "ls": fn_ls,
    "lsr": fn_unsupported,
    "make": fn_make,
    "mkdir": fn_mkdir,
    "prompt": fn_prompt,
    "pwd": fn_pwd,
    "rm": fn_unsupported,
    "rmr": fn_unsupported,
}


def find_command_fn(cmd: str) -> CommandFn:
    """Look up a command handler by name.

    Raises:
        CommandError: If there is no such command
    """
    logger.debug(f"[{cmd}]")
    try:
        return COMMANDS[cmd]
    except KeyError:
        raise CommandError(f"{cmd}: no such command") from None
