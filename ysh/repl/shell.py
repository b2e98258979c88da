"""Interactive shell and script runner for the in-memory file system."""

import logging
import shlex
from typing import Iterable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.markup import escape

from ysh.config import YshConfig, get_history_path
from ysh.fs import FileSystemError, InodeState
from ysh.repl.commands import CommandError, ShellExit, find_command_fn

logger = logging.getLogger(__name__)

FAILURE_STATUS = 1


class PathCompleter(Completer):
    """Tab completion for entry names in the current directory."""

    def __init__(self, state: InodeState):
        self.state = state

    def get_completions(self, document, complete_event):
        """Get entry name completion candidates."""
        text = document.text_before_cursor
        words = text.split()

        # Complete the command argument under the cursor, not the command
        if len(words) > 1 and not text.endswith(" "):
            partial = words[-1]
        elif words and text.endswith(" "):
            partial = ""
        else:
            return

        for candidate in self.state.resolver.complete_path(partial, self.state.cwd):
            yield Completion(candidate, start_position=-len(partial))


class YShell:
    """Shell driving one InodeState.

    Commands are looked up in the command table and run against the
    state. A failing command prints ``<command>: <reason>``, sets the
    exit status to 1, and leaves the shell ready for the next command.

    Args:
        config: Configuration; defaults are used when omitted
        console: Console for command output
        error_console: Console for error messages
    """

    def __init__(
        self,
        config: Optional[YshConfig] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.config = config or YshConfig()
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.state = InodeState()
        self.state.prompt = self.config.shell.prompt
        self.status = 0
        self.running = True

    def get_prompt(self) -> str:
        return self.state.prompt

    def print_plain(self, text: str) -> None:
        """Print text as is: no markup, highlighting, emoji or wrapping."""
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def report_error(self, message: str) -> None:
        """Print an error and mark the session as failed."""
        logger.debug(message)
        self.status = FAILURE_STATUS
        self.error_console.print(f"[red]{escape(message)}[/red]")

    def execute(self, line: str) -> None:
        """Parse and execute a command line.

        Args:
            line: Command line to execute
        """
        # Comments are not tokenized, so unbalanced quotes in them are fine
        if line.lstrip().startswith("#"):
            return

        try:
            words = shlex.split(line)
        except ValueError as e:
            self.report_error(f"parse error: {e}")
            return

        if not words:
            return

        self.execute_words(words)

    def execute_words(self, words: List[str]) -> None:
        """Dispatch a tokenized command and print its output."""
        cmd = words[0]
        try:
            command_fn = find_command_fn(cmd)
        except CommandError as e:
            self.report_error(str(e))
            return

        # Lines are printed as they are produced, before any later failure
        try:
            for out_line in command_fn(self.state, words):
                self.print_plain(out_line)
        except ShellExit as e:
            if e.status is not None:
                self.status = e.status
            self.running = False
            logger.debug(f"exit({self.status})")
            return
        except (FileSystemError, CommandError) as e:
            self.report_error(f"{cmd}: {e}")

    def run_script(self, lines: Iterable[str], source: str = "-") -> int:
        """Execute command lines in order.

        Args:
            lines: Command lines, e.g. an open script file
            source: Name shown when echoing commands

        Returns:
            Exit status of the session
        """
        for line in lines:
            line = line.rstrip("\n")
            if self.config.shell.echo:
                self.print_plain(f"{source}: {line}")
            self.execute(line)
            if not self.running:
                break
        return self.status

    def run(self) -> int:
        """Run the interactive shell main loop.

        Returns:
            Exit status of the session
        """
        history_path = get_history_path(self.config)
        history_path.parent.mkdir(parents=True, exist_ok=True)
        session = PromptSession(
            history=FileHistory(str(history_path)),
            completer=PathCompleter(self.state),
            style=Style.from_dict(
                {
                    "prompt": "ansicyan bold",
                }
            ),
        )

        while self.running:
            try:
                line = session.prompt(self.get_prompt())
                self.execute(line.strip())
            except KeyboardInterrupt:
                self.console.print("\nUse 'exit' to exit the shell.")
                continue
            except EOFError:
                break

        return self.status
