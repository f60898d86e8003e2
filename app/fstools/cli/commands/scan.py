"""Directory scanning commands.

Provides commands to list the files or folders below a directory,
with name filters, exclusions, recursion depth and ordering options.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape

from fstools.cli.types import OutputFormat, load_cli_config
from fstools.core.config import FsToolsConfig
from fstools.filesystem.context import FilesystemContext
from fstools.filesystem.errors import FilesystemError
from fstools.filesystem.models import ScanFilter, TargetKind
from fstools.filesystem.scanner import DirectoryScanner
from fstools.utils.formatting import console, create_entry_table, print_error, print_info

app = typer.Typer(
    help="List files and folders below a directory.",
    invoke_without_command=True,
    no_args_is_help=True,
)

RootArgument = Annotated[str, typer.Argument(help="Directory to scan.")]
PatternOption = Annotated[
    str,
    typer.Option("--filter", "-F", help="Regular expression searched in entry names."),
]
RecurseOption = Annotated[
    bool,
    typer.Option("--recurse", "-r", help="Descend into subfolders without limit."),
]
DepthOption = Annotated[
    int | None,
    typer.Option("--depth", "-d", min=0, help="Descend at most this many levels."),
]
FullOption = Annotated[
    bool,
    typer.Option("--full", help="Show full paths instead of bare names."),
]
ExcludeOption = Annotated[
    list[str] | None,
    typer.Option("--exclude", "-x", help="Entry name to skip (repeatable)."),
]
ExcludePatternOption = Annotated[
    list[str] | None,
    typer.Option("--exclude-pattern", "-X", help="Regular expression to skip (repeatable)."),
]
NaturalOption = Annotated[
    bool | None,
    typer.Option("--natural/--lexical", help="Natural or lexicographic ordering."),
]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
]


@app.command()
def files(
    root: RootArgument,
    pattern: PatternOption = ".",
    recurse: RecurseOption = False,
    depth: DepthOption = None,
    full: FullOption = False,
    exclude: ExcludeOption = None,
    exclude_pattern: ExcludePatternOption = None,
    natural: NaturalOption = None,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List files below ROOT."""
    config = load_cli_config()
    scan_filter = _build_filter(
        config,
        TargetKind.FILES,
        pattern=pattern,
        recurse=recurse,
        depth=depth,
        full=full,
        exclude=exclude,
        exclude_pattern=exclude_pattern,
        natural=natural,
    )
    _run_scan(config, root, scan_filter, output_format)


@app.command()
def folders(
    root: RootArgument,
    pattern: PatternOption = ".",
    recurse: RecurseOption = False,
    depth: DepthOption = None,
    full: FullOption = False,
    exclude: ExcludeOption = None,
    exclude_pattern: ExcludePatternOption = None,
    natural: NaturalOption = None,
    output_format: FormatOption = OutputFormat.TABLE,
) -> None:
    """List folders below ROOT."""
    config = load_cli_config()
    scan_filter = _build_filter(
        config,
        TargetKind.FOLDERS,
        pattern=pattern,
        recurse=recurse,
        depth=depth,
        full=full,
        exclude=exclude,
        exclude_pattern=exclude_pattern,
        natural=natural,
    )
    _run_scan(config, root, scan_filter, output_format)


# === Private helper functions ===


def _build_filter(
    config: FsToolsConfig,
    target: TargetKind,
    *,
    pattern: str,
    recurse: bool,
    depth: int | None,
    full: bool,
    exclude: list[str] | None,
    exclude_pattern: list[str] | None,
    natural: bool | None,
) -> ScanFilter:
    """Combine command options with the configured scan defaults.

    Options given on the command line replace (not extend) the
    configured exclusion lists.
    """
    defaults = config.scan
    if exclude_pattern is None:
        if target == TargetKind.FILES:
            exclude_pattern = defaults.file_exclude_patterns
        else:
            exclude_pattern = defaults.folder_exclude_patterns
    if natural is None:
        # Folders keep lexicographic order unless asked otherwise
        natural = defaults.natural_sort if target == TargetKind.FILES else False

    try:
        return ScanFilter(
            pattern=pattern,
            recurse=depth if depth is not None else recurse,
            full_path=full,
            exclude=tuple(exclude if exclude is not None else defaults.exclude),
            exclude_patterns=tuple(exclude_pattern),
            natural_sort=natural,
            target=target,
        )
    except ValueError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def _run_scan(
    config: FsToolsConfig,
    root: str,
    scan_filter: ScanFilter,
    output_format: OutputFormat,
) -> None:
    """Run the scan and print its results."""
    scanner = DirectoryScanner(FilesystemContext.from_config(config))

    try:
        entries = scanner.scan(root, scan_filter)
    except FilesystemError as e:
        print_error(escape(e.message))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(entries))
        return

    label = "Files" if scan_filter.target == TargetKind.FILES else "Folders"
    if not entries:
        print_info(f"No {label.lower()} found.")
        return

    table = create_entry_table(f"{label} in {escape(root)}", scan_filter.target)
    for index, entry in enumerate(entries, start=1):
        table.add_row(str(index), escape(entry))

    console.print(table)
    console.print(f"\n[muted]Found {len(entries)} {label.lower()}[/muted]")
