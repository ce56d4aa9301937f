"""
Cryptic Resolver CLI - explain acronyms and jargon from local term sheets.

Usage:
    cr emacs              => Edit macros: a feature-rich editor
    cr --list             => list installed sheets
    cr --version          => print version
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cryptic_resolver.cli.commands import list_sheets, resolve_term
from cryptic_resolver.runtime.config import ConfigError, load_config
from cryptic_resolver.sheets.registry import SheetRegistry

__version__ = "1.0.0"

console = Console()

app = typer.Typer(
    name="cr",
    help="Cryptic Resolver: explain cryptic commands, acronyms and jargon.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def cr(
    ctx: typer.Context,
    term: Optional[str] = typer.Argument(
        None,
        help="Term to explain, e.g. 'xdg' or 'ack'",
        show_default=False,
    ),
    list_flag: bool = typer.Option(
        False,
        "--list",
        "-l",
        help="List installed sheets in search order",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Print version and exit",
    ),
    home: Optional[Path] = typer.Option(
        None,
        "--home",
        help="Sheet directory (defaults to $CRYPTIC_RESOLVER_HOME or ~/.cryptic-resolver)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON (machine-parseable)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging on stderr",
    ),
) -> None:
    """Explain TERM using every installed sheet, primary sheet first."""
    if version:
        console.print(f"cr: Cryptic Resolver version {__version__} in Python")
        raise typer.Exit(0)

    _configure_logging(verbose)

    try:
        config = load_config(home)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    registry = SheetRegistry.discover(config.home, primary=config.primary_sheet)

    if list_flag:
        list_sheets(console, registry, config)
        raise typer.Exit(0)

    if term is None or not term.strip():
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    resolve_term(console, term, registry, config, json_output=json_output)


def main():
    app()


if __name__ == "__main__":
    main()
