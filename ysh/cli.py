import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from .config import load_config
from .decorators import handle_shell_errors

# Initialize Rich Traceback for better error messages
install()

# Initialize Rich Console
console = Console()

# Configure logging to use Rich's RichHandler
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("ysh")

app = typer.Typer(help="ysh - a small shell over an in-memory file system")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose mode"),
):
    """
    ysh - a small shell over an in-memory hierarchical file system.

    Create directories and files, navigate with cd, and inspect them
    with ls, cat and pwd. Nothing is written to disk.
    """
    if verbose or load_config().cli.verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled.")


def _make_shell(prompt: Optional[str] = None, echo: Optional[bool] = None):
    from .repl import YShell

    config = load_config()
    if prompt is not None:
        config.shell.prompt = prompt
    if echo is not None:
        config.shell.echo = echo

    color_system = "auto" if config.cli.color else None
    return YShell(
        config,
        console=Console(color_system=color_system),
        error_console=Console(stderr=True, color_system=color_system),
    )


@app.command()
def about():
    """Display information about ysh."""
    console.print("[bold cyan]ysh - in-memory file system shell[/bold cyan]")
    console.print("")
    console.print("[bold]Shell Commands:[/bold]")
    console.print("  make <file> [words...]   Create or overwrite a file")
    console.print("  mkdir <dir>              Create a directory")
    console.print("  cat <file>...            Print file contents")
    console.print("  cd [dir]                 Change directory (root without operand)")
    console.print("  ls [dir]                 List inode, size and name of entries")
    console.print("  pwd                      Print the current directory")
    console.print("  prompt [words...]        Set the prompt")
    console.print("  echo [words...]          Print words")
    console.print("  exit [status]            Leave the shell")
    console.print("  # <text>                 Comment")
    console.print("")
    console.print("[bold]Getting Started:[/bold]")
    console.print("  ysh shell                Interactive session")
    console.print("  ysh run script.ysh       Run a script file")


@app.command()
@handle_shell_errors
def shell(
    prompt: Optional[str] = typer.Option(None, "--prompt", "-p", help="Initial prompt text"),
):
    """
    Launch an interactive shell.

    Example:
        ysh shell --prompt 'ysh% '
    """
    status = _make_shell(prompt=prompt).run()
    if status:
        raise typer.Exit(code=status)


@app.command()
@handle_shell_errors
def run(
    scripts: List[str] = typer.Argument(..., help="Script files to run, '-' for stdin"),
    echo: Optional[bool] = typer.Option(None, "--echo/--no-echo", help="Echo each command before running it"),
):
    """
    Run script files in one session.

    Each line is one command. The process exits with the session's
    exit status: 1 after a failed command, or the status given to exit.

    Example:
        ysh run setup.ysh checks.ysh
    """
    ysh = _make_shell(echo=echo)

    for script in scripts:
        if script == "-":
            ysh.run_script(sys.stdin, source="-")
        else:
            with open(Path(script), "r") as f:
                ysh.run_script(f, source=script)
        if not ysh.running:
            break

    if ysh.status:
        raise typer.Exit(code=ysh.status)


@app.command()
@handle_shell_errors
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    init: bool = typer.Option(False, "--init", help="Initialize config file with defaults"),
    # Shell settings
    set_prompt: Optional[str] = typer.Option(None, "--prompt", help="Set the initial prompt"),
    set_echo: Optional[bool] = typer.Option(None, "--echo/--no-echo", help="Echo script commands by default"),
    set_history_file: Optional[str] = typer.Option(None, "--history-file", help="Set shell history file"),
    # CLI settings
    set_verbose: Optional[bool] = typer.Option(None, "--cli-verbose/--no-cli-verbose", help="Enable verbose output by default"),
    set_color: Optional[bool] = typer.Option(None, "--cli-color/--no-cli-color", help="Enable colored output by default"),
):
    """
    View or edit ysh configuration.

    Configuration is stored at ~/.config/ysh/config.json (or ~/.ysh/config.json).

    Examples:
        # Show current configuration
        ysh config --show

        # Set the initial prompt
        ysh config --prompt 'ysh% '
    """
    from .config import ensure_config_exists, get_config_path, update_config

    if init:
        config_path = ensure_config_exists()
        console.print(f"[green]Configuration initialized at {config_path}[/green]")
        return

    has_settings = any([
        set_prompt is not None, set_echo is not None, set_history_file is not None,
        set_verbose is not None, set_color is not None,
    ])

    if show or not has_settings:
        current = load_config()
        config_path = get_config_path()

        console.print("\n[bold]ysh Configuration[/bold]")
        console.print(f"[dim]Location: {config_path}[/dim]\n")

        console.print("[bold cyan]Shell Settings:[/bold cyan]")
        console.print(f"  Prompt:       {current.shell.prompt!r}", markup=False)
        console.print(f"  Echo:         {current.shell.echo}")
        if current.shell.history_file:
            console.print(f"  History File: {current.shell.history_file}")
        else:
            console.print("  History File: [dim]default[/dim]")

        console.print("\n[bold cyan]CLI Settings:[/bold cyan]")
        console.print(f"  Verbose:      {current.cli.verbose}")
        console.print(f"  Color:        {current.cli.color}")
        return

    changes = []
    if set_prompt is not None:
        changes.append(f"Prompt: {set_prompt!r}")
    if set_echo is not None:
        changes.append(f"Echo: {set_echo}")
    if set_history_file is not None:
        changes.append(f"History file: {set_history_file}")
    if set_verbose is not None:
        changes.append(f"CLI verbose: {set_verbose}")
    if set_color is not None:
        changes.append(f"CLI color: {set_color}")

    update_config(
        shell_prompt=set_prompt,
        shell_echo=set_echo,
        shell_history_file=set_history_file,
        cli_verbose=set_verbose,
        cli_color=set_color,
    )

    console.print("[green]Configuration updated:[/green]")
    for change in changes:
        console.print(f"  {change}", markup=False)


if __name__ == "__main__":
    app()
