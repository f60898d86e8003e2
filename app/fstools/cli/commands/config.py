"""Configuration commands.

Provides commands to show the effective configuration and to write a
default configuration file.
"""

from typing import Annotated

import typer
from rich.markup import escape

from fstools.cli.types import load_cli_config
from fstools.core.config import ConfigError, get_default_config, save_config
from fstools.core.paths import get_config_path
from fstools.utils.formatting import (
    console,
    create_settings_table,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Show or initialize the fstools configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = load_cli_config()
    config_path = get_config_path()

    table = create_settings_table("fstools configuration")

    table.add_row("root_path", escape(config.root_path) or "[muted](empty)[/muted]")
    table.add_row("separator", escape(config.separator))
    table.add_row("default_message", escape(config.default_message or "-"))
    table.add_row("translations", str(len(config.translations)))
    table.add_row("scan.exclude", escape(", ".join(config.scan.exclude)))
    table.add_row("scan.file_exclude_patterns", escape(", ".join(config.scan.file_exclude_patterns)))
    table.add_row(
        "scan.folder_exclude_patterns", escape(", ".join(config.scan.folder_exclude_patterns))
    )
    table.add_row("scan.natural_sort", str(config.scan.natural_sort))

    console.print(table)
    source = config_path if config_path.exists() else "defaults (no config file)"
    console.print(f"\n[muted]Source: {escape(str(source))}[/muted]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing configuration file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        print_info(f"Config already exists: {escape(str(config_path))} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {escape(str(saved))}")
