"""
dmark CLI - Entry point.

Commands:

- parse: parse a document and print its tree (or JSON)
- check: parse a document and report only success or the first error
"""

import logging
import platform
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from dmark._version import get_version
from dmark.core.config import OUTPUT_FORMATS, DMarkConfig, load_config
from dmark.core.errors import ConfigError, ParseError
from dmark.core.nodes import ElementNode
from dmark.core.parser_impl import parse_document
from dmark.core.reporter import ErrorReporter
from dmark.render import render_tree, to_json

logger = logging.getLogger(__name__)

STDIN = "-"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"dmark version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


app = typer.Typer(
    help="""dmark – parser for D-Mark documents

Reads a document from a file (or stdin when INPUT is '-') and prints
the parsed tree, or the first parse error with its source location.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """dmark CLI main callback for global options."""
    pass


# =============================================================================
# Helpers
# =============================================================================


def _load_settings(config_path: Path | None, verbose: bool) -> DMarkConfig:
    """Load dmark.toml and configure logging. Exits with code 1 on bad config."""
    try:
        settings = load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)

    level = logging.DEBUG if verbose else settings.logging.level_number
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if settings.source:
        logger.debug("Loaded config from %s", settings.source)
    return settings


def _read_source(input: str) -> tuple[str, Path | None]:
    """Read the whole document from ``input`` (a path, or '-' for stdin)."""
    if input == STDIN:
        return sys.stdin.read(), None

    path = Path(input)
    if not path.is_file():
        typer.echo(f"File not found: {path}", err=True)
        raise typer.Exit(code=1)

    try:
        return path.read_text(encoding="utf-8"), path
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(code=1)


def _parse_or_exit(text: str, path: Path | None) -> list[ElementNode]:
    """Parse ``text``, printing the error report and exiting with code 1 on failure."""
    try:
        return parse_document(text, path)
    except ParseError as e:
        typer.echo(ErrorReporter(text, path).report(e), err=True)
        raise typer.Exit(code=1)


# =============================================================================
# Commands
# =============================================================================


InputArgument = Annotated[
    str, typer.Argument(help="Document to read ('-' for stdin)")
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to dmark.toml (default: ./dmark.toml if present)"),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-V", help="Enable debug logging")
]


@app.command()
def parse(
    input: InputArgument = STDIN,
    format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: 'tree' or 'json'"),
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Parse a D-Mark document and print the resulting tree.
    """
    settings = _load_settings(config, verbose)
    output_format = format or settings.output.format
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format {output_format!r} (expected one of: {', '.join(OUTPUT_FORMATS)})",
            err=True,
        )
        raise typer.Exit(code=2)

    text, path = _read_source(input)
    nodes = _parse_or_exit(text, path)

    if output_format == "json":
        typer.echo(to_json(nodes, indent=settings.output.indent))
    else:
        console = Console(no_color=not settings.output.color, highlight=False)
        console.print(render_tree(nodes, title=str(path or "<stdin>")))


@app.command()
def check(
    input: InputArgument = STDIN,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """
    Check that a D-Mark document parses, reporting the first error if not.
    """
    _load_settings(config, verbose)
    text, path = _read_source(input)
    nodes = _parse_or_exit(text, path)
    typer.echo(f"✓ {path or '<stdin>'}: {len(nodes)} top-level blocks")


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
