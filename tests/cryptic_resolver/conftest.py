"""Pytest fixtures for cryptic-resolver tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from cryptic_resolver.sheets.loader import SheetLoader
from cryptic_resolver.sheets.registry import SheetRegistry


@pytest.fixture
def sheet_root(tmp_path: Path) -> Path:
    """Empty resolver home directory."""
    root = tmp_path / "sheets"
    root.mkdir()
    return root


@pytest.fixture
def write_bucket(sheet_root: Path) -> Callable[[str, str, str], Path]:
    """Factory writing ``<sheet_root>/<sheet>/<file_key>.toml``."""

    def _write(sheet: str, file_key: str, content: str) -> Path:
        path = sheet_root / sheet / f"{file_key}.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_sheets(sheet_root: Path, write_bucket) -> Path:
    """Two sheets, ``computer`` and ``medicine``, sharing the term ``ack``."""
    write_bucket(
        "computer",
        "a",
        """
        [ack]
        disp = "ACK"
        desc = "acknowledgement packet"
        see = ["syn", "tcp"]
        """,
    )
    write_bucket(
        "computer",
        "x",
        """
        [xdg]
        disp = "XDG"
        desc = "X Desktop Group"
        full = "Freedesktop.org, formerly known as X Desktop Group"

        [xdm]
        disp = "XDM"
        desc = "X Display Manager"
        """,
    )
    write_bucket(
        "computer",
        "b",
        """
        [blah]
        same = "XDG"
        """,
    )
    write_bucket(
        "computer",
        "0123456789",
        """
        [3d]
        disp = "3D"
        desc = "three-dimensional"
        """,
    )
    write_bucket(
        "medicine",
        "a",
        """
        [ack]
        disp = "a.c."
        desc = "before meals, from Latin"
        """,
    )
    return sheet_root


@pytest.fixture
def sample_registry(sample_sheets: Path) -> SheetRegistry:
    return SheetRegistry.discover(sample_sheets, primary="computer")


@pytest.fixture
def loader(sheet_root: Path) -> SheetLoader:
    return SheetLoader(sheet_root)


class RecordingLoader:
    """Loader wrapper remembering every (sheet, file_key) it was asked for."""

    def __init__(self, inner: SheetLoader):
        self.inner = inner
        self.calls: list[tuple[str, str]] = []

    def load(self, sheet: str, file_key: str):
        self.calls.append((sheet, file_key))
        return self.inner.load(sheet, file_key)


@pytest.fixture
def recording_loader(loader: SheetLoader) -> RecordingLoader:
    return RecordingLoader(loader)
