"""Main CLI entry point and application setup."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookscan import __version__
from bookscan.cli.config import OUTPUT_FORMATS, load_config
from bookscan.engine import SearchEngine
from bookscan.exceptions import BookscanError, MalformedInputError
from bookscan.fixtures import FIXTURES
from bookscan.loader import dump_result, load_books
from bookscan.models import Book, ContentLine, SearchResult

LOG_FORMAT = "%(levelname)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


@dataclass
class Context:
    """CLI context that holds shared resources."""

    engine: SearchEngine
    console: Console
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging for the loader and commands.

    ``--quiet`` keeps warnings only, ``--verbose`` and ``--debug`` show the
    loader's debug records, and ``--debug`` adds timestamps and logger names.
    """
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    logging.getLogger("bookscan").setLevel(level)


def create_console(config: dict[str, Any], no_color: bool = False) -> Console:
    """Create the Rich console, honouring ``no_color`` from flags or config."""
    no_color = no_color or bool(config.get("no_color"))
    return Console(
        no_color=no_color,
        width=120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


def describe_error(error: Exception) -> str:
    """Message for an error, with the element position for malformed books."""
    message = str(error)
    if isinstance(error, MalformedInputError) and error.location:
        message += f" (at {error.location})"
    return message


class BookscanGroup(click.Group):
    """Command group that turns bookscan errors into a one-line report."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except KeyboardInterrupt:
            ctx.exit(130)
        except Exception as e:
            obj = ctx.obj if isinstance(ctx.obj, Context) else None
            if obj is not None and obj.debug:
                raise
            if not isinstance(e, BookscanError):
                logging.getLogger(__name__).debug("Unexpected error", exc_info=e)

            message = describe_error(e)
            if obj is None:
                click.echo(f"Error: {message}", err=True)
            else:
                # Load errors carry full paths; print them unwrapped.
                obj.console.print(
                    f"[red]Error:[/red] {escape(message)}", soft_wrap=True
                )
            ctx.exit(1)


@click.group(cls=BookscanGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="bookscan", message="bookscan version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Scanned book search tool.

    Finds every page and line of a set of scanned books that contains a
    search term, matched literally and case-sensitively.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        config_data = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    console = create_console(config_data, no_color=no_color)

    ctx.obj = Context(
        engine=SearchEngine(),
        console=console,
        config=config_data,
        debug=debug,
    )


format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default from config, else table)",
)


@cli.command()
@click.argument("term")
@click.argument("books_file", type=click.Path(exists=True, path_type=Path))
@format_option
@click.pass_context
def search(
    ctx: click.Context, term: str, books_file: Path, output_format: str | None
) -> None:
    """Search a JSON or YAML books file for TERM."""
    books = load_books(books_file)
    _run_search(ctx.obj, term, books, output_format)


@cli.command()
@click.argument("term")
@click.option(
    "--fixture",
    type=click.Choice(sorted(FIXTURES)),
    default="twenty-leagues",
    help="Bundled book collection to search",
)
@format_option
@click.pass_context
def demo(
    ctx: click.Context, term: str, fixture: str, output_format: str | None
) -> None:
    """Search a bundled book collection for TERM."""
    _run_search(ctx.obj, term, list(FIXTURES[fixture]), output_format)


def _run_search(
    obj: Context, term: str, books: list[Any], output_format: str | None
) -> None:
    """Search and print the result in the requested format."""
    hits = obj.engine.locate(term, books)
    result = SearchResult.from_hits(term, hits)

    output_format = output_format or obj.config.get("format", "table")
    if output_format == "json":
        click.echo(dump_result(result).decode())
    else:
        _display_table(obj.console, result, hits)


def _display_table(
    console: Console, result: SearchResult, hits: list[tuple[Book, ContentLine]]
) -> None:
    """Display one row per matching line, titled from the book it came from."""
    if result.is_empty:
        console.print(
            f"No matches for '{escape(result.search_term)}'", soft_wrap=True
        )
        return

    table = Table(title=f"Matches for '{escape(result.search_term)}'")
    table.add_column("ISBN", style="cyan", no_wrap=True)
    table.add_column("Page", justify="right")
    table.add_column("Line", justify="right")
    table.add_column("Title")

    for book, line in hits:
        table.add_row(
            "" if book.isbn is None else escape(str(book.isbn)),
            "" if line.page is None else str(line.page),
            "" if line.line is None else str(line.line),
            escape(str(book.title or "")),
        )

    console.print(table)
    console.print(f"\n{result.total_found} matching line(s)")
