"""``cr --list``: show installed sheets."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cryptic_resolver.runtime.config import ResolverConfig
from cryptic_resolver.sheets.registry import SheetRegistry


def list_sheets(console: Console, registry: SheetRegistry, config: ResolverConfig) -> None:
    """Print a table of installed sheets in search order."""
    if registry.is_empty:
        console.print(f"[yellow]No sheets installed under {escape(str(registry.root))}[/yellow]")
        console.print("[dim]Clone a sheet repository into that directory, e.g.:[/dim]")
        for url in config.sources.values():
            console.print(
                f"[dim]  git -C {escape(str(registry.root))} clone {escape(url)}[/dim]",
                highlight=False,
                soft_wrap=True,
            )
        return

    table = Table(title=f"Sheets in {escape(str(registry.root))}", show_lines=False)
    table.add_column("#", style="cyan", width=3)
    table.add_column("Sheet", style="bold")
    table.add_column("Files", justify="right")
    table.add_column("Role", style="magenta")

    for index, sheet in enumerate(registry.search_order(), start=1):
        role = "primary" if sheet == registry.primary else ""
        table.add_row(str(index), sheet, str(len(registry.bucket_files(sheet))), role)

    console.print(table)
