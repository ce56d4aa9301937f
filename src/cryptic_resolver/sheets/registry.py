"""Sheet registry: which sheets are installed and in which order to search them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from cryptic_resolver.core.constants import SHEET_FILE_SUFFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetRegistry:
    """Ordered, read-only list of installed sheets with one primary sheet."""

    root: Path
    sheets: Tuple[str, ...] = ()
    primary: Optional[str] = None

    @classmethod
    def discover(cls, root: Path, primary: Optional[str] = None) -> "SheetRegistry":
        """Scan *root* for sheet directories.

        Hidden directories are skipped. Sheets are sorted by name so that the
        order of non-primary sheets is stable across runs.
        """
        if not root.is_dir():
            logger.debug("Sheet root %s does not exist", root)
            return cls(root=root, sheets=(), primary=primary)

        sheets = tuple(
            sorted(
                entry.name
                for entry in root.iterdir()
                if entry.is_dir() and not entry.name.startswith(".")
            )
        )
        if primary and primary not in sheets:
            logger.debug("Primary sheet %s is not installed under %s", primary, root)
        return cls(root=root, sheets=sheets, primary=primary)

    @property
    def is_empty(self) -> bool:
        return not self.sheets

    def search_order(self) -> Tuple[str, ...]:
        """Primary sheet first (when installed), then the rest in registry order."""
        if self.primary and self.primary in self.sheets:
            rest = tuple(sheet for sheet in self.sheets if sheet != self.primary)
            return (self.primary, *rest)
        return self.sheets

    def bucket_files(self, sheet: str) -> Tuple[Path, ...]:
        """Return the bucket files of *sheet*, sorted by name."""
        sheet_dir = self.root / sheet
        if not sheet_dir.is_dir():
            return ()
        return tuple(sorted(sheet_dir.glob(f"*{SHEET_FILE_SUFFIX}")))
