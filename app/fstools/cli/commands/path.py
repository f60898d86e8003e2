"""Path normalization commands."""

from typing import Annotated

import typer

from fstools.cli.types import load_cli_config
from fstools.filesystem.normalizer import PathNormalizer

app = typer.Typer(
    help="Normalize path strings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def clean(
    path: Annotated[str, typer.Argument(help="Path to clean.")],
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Target separator ('/' or '\\')."),
    ] = None,
    root: Annotated[
        str | None,
        typer.Option("--root", help="Path substituted for empty input."),
    ] = None,
) -> None:
    """Print PATH with separator runs collapsed to one canonical separator."""
    config = load_cli_config()
    normalizer = PathNormalizer(
        root_path=root if root is not None else config.root_path,
        separator=config.separator,
    )
    # Plain echo: cleaned paths must not be touched by Rich markup
    typer.echo(normalizer.clean(path, separator))
