"""Tests for Rich rendering of entries, diagnostics and the not-found fallback."""

from __future__ import annotations

from rich.console import Console

from cryptic_resolver.lookup.models import (
    Diagnostic,
    DiagnosticKind,
    RedirectEntry,
    SimpleEntry,
)
from cryptic_resolver.lookup.rendering import (
    RichPresenter,
    render_diagnostic,
    render_entry,
    render_not_found,
)


def _console() -> Console:
    return Console(record=True, width=120, color_system=None)


def test_render_entry_simple() -> None:
    entry = SimpleEntry(
        key="xdg",
        display="XDG",
        description="X Desktop Group",
        full="Freedesktop.org",
        see_also=("wayland", "x11"),
    )
    text = render_entry(entry).plain
    assert "XDG: X Desktop Group" in text
    assert "Freedesktop.org" in text
    assert "SEE ALSO wayland x11" in text


def test_render_entry_without_display_uses_placeholder() -> None:
    text = render_entry(SimpleEntry(key="xdg", description="X Desktop Group")).plain
    assert "No name!: X Desktop Group" in text


def test_render_redirect_category() -> None:
    text = render_entry(RedirectEntry(key="alias", display="Alias", same_as="xdg")).plain
    assert "Alias: see xdg" in text


def test_presenter_labels_sheet_and_keeps_order() -> None:
    console = _console()
    entries = [
        SimpleEntry(key="network", display="ACK", description="acknowledgement packet"),
        SimpleEntry(key="medicine", display="a.c.", description="before meals"),
    ]
    console.print(RichPresenter().render("computer", entries))
    output = console.export_text()

    assert output.index("From: computer") < output.index("acknowledgement packet")
    assert output.index("acknowledgement packet") < output.index("before meals")


def test_render_diagnostic() -> None:
    console = _console()
    render_diagnostic(
        console,
        Diagnostic(
            kind=DiagnosticKind.BROKEN_REDIRECT,
            sheet="computer",
            term="blah",
            file_key="x",
            message="Synonym jumps to a wrong place at `xdg`",
            target="xdg",
        ),
    )
    output = console.export_text()
    assert "WARN (Broken synonym jump)" in output
    assert "wrong place at `xdg`" in output


def test_render_not_found_lists_sources() -> None:
    console = _console()
    render_not_found(console, {"computer": "https://example.com/computer.git"})
    output = console.export_text()
    assert "Not found anything" in output
    assert "1. computer:" in output
    assert "https://example.com/computer.git" in output
