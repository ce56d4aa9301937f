"""Rich rendering of lookup results.

Implements the Presenter collaborator used by Sheet Search, plus the
diagnostic and "not found" output used by the CLI.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.text import Text

from .models import (
    Diagnostic,
    DiagnosticKind,
    Entry,
    RedirectEntry,
    SimpleEntry,
)

logger = logging.getLogger(__name__)

DIAGNOSTIC_LABELS: dict[DiagnosticKind, str] = {
    DiagnosticKind.MALFORMED_ENTRY: "Malformed entry",
    DiagnosticKind.BROKEN_REDIRECT: "Broken synonym jump",
    DiagnosticKind.LOADER_FAILURE: "Unreadable sheet file",
}


def render_entry(entry: Entry) -> Text:
    """Render a single meaning.

    Layout::

        XDG: X Desktop Group
          Full explanation...
        SEE ALSO freedesktop wayland
    """
    text = Text("\n  ")
    if entry.display:
        text.append(entry.display, style="bold")
    else:
        text.append(entry.title, style="red")

    if isinstance(entry, SimpleEntry):
        text.append(f": {entry.description}")
    elif isinstance(entry, RedirectEntry):
        text.append(f": see {entry.same_as}", style="dim")

    if entry.full:
        text.append(f"\n\n  {entry.full}")

    if entry.see_also:
        text.append("\n\n")
        text.append("SEE ALSO ", style="magenta")
        for index, name in enumerate(entry.see_also):
            if index:
                text.append(" ")
            text.append(name, style="underline")
    text.append("\n")
    return text


class RichPresenter:
    """Presenter producing a Rich renderable per sheet match."""

    def render(self, sheet: str, entries: Sequence[Entry]) -> Group:
        """Label the originating sheet, then each meaning in the given order."""
        parts: list[Text] = [Text(f"From: {sheet}", style="green")]
        parts.extend(render_entry(entry) for entry in entries)
        return Group(*parts)


def _get_diagnostic_label(kind: DiagnosticKind) -> str:
    label = DIAGNOSTIC_LABELS.get(kind)
    if label is None:
        logger.warning("Unknown diagnostic kind: %s", kind)
        return "Warning"
    return label


def render_diagnostic(console: Console, diagnostic: Diagnostic) -> None:
    """Print one per-sheet defect in red."""
    label = _get_diagnostic_label(diagnostic.kind)
    console.print(
        f"[red]WARN ({label}):[/red] {escape(diagnostic.message)}",
        highlight=False,
        soft_wrap=True,
    )


def render_not_found(console: Console, sources: Mapping[str, str]) -> None:
    """Print the "nothing found, please contribute" fallback."""
    console.print()
    console.print("  cr: Not found anything.")
    console.print()
    console.print("  You may add more sheets under the resolver home directory.")
    console.print("  Or you could contribute to our sheets: Thanks!")
    console.print()
    width = max((len(name) for name in sources), default=0) + 1
    for index, (name, url) in enumerate(sources.items(), start=1):
        console.print(f"    {index}. {(name + ':').ljust(width)}  {url}", highlight=False)
    console.print()
