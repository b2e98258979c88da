"""Shell for interactive use of the in-memory file system.

This module provides the command table and an interactive shell that
also runs script files.
"""

from ysh.repl.commands import COMMANDS, CommandError, ShellExit, find_command_fn
from ysh.repl.shell import YShell

__all__ = ["YShell", "COMMANDS", "CommandError", "ShellExit", "find_command_fn"]
