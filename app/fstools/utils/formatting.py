"""Rich console output for the fstools CLI.

Results go to stdout and diagnostics to stderr, both rendered with the
fstools console styles.
"""

import sys

from rich.console import Console
from rich.table import Table

from fstools.core.theme import get_theme
from fstools.filesystem.models import TargetKind


def _make_console(stderr: bool = False) -> Console:
    stream = sys.stderr if stderr else sys.stdout
    # Hex styles need truecolor; leave detection to Rich when not on a terminal
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console()
err_console = _make_console(stderr=True)


def create_entry_table(title: str, target: TargetKind) -> Table:
    """Create a numbered table for scan results of one entry kind."""
    table = Table(title=title, header_style="header", border_style="border")
    table.add_column("#", style="muted", justify="right")
    table.add_column(
        "Folder" if target == TargetKind.FOLDERS else "File",
        style="folder" if target == TargetKind.FOLDERS else "file",
        no_wrap=True,
    )
    return table


def create_settings_table(title: str) -> Table:
    """Create a two-column setting/value table."""
    table = Table(title=title, header_style="header", border_style="border")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    return table


def print_info(message: str) -> None:
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/]")


def print_warning(message: str) -> None:
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    err_console.print(f"[error]Error:[/] {message}")
