"""TOML loader for sheet bucket files.

A sheet is a directory under the resolver home; each bucket is a TOML file
named after its file key, e.g. ``cryptic_computer/x.toml`` or
``cryptic_computer/0123456789.toml``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Tuple

from cryptic_resolver.core.constants import SHEET_FILE_SUFFIX
from cryptic_resolver.lookup.exceptions import LoaderFailure
from cryptic_resolver.lookup.store import EntryStore

logger = logging.getLogger(__name__)


class SheetLoader:
    """Load bucket files from a sheet root directory."""

    def __init__(self, root: Path):
        self.root = root

    def path_for(self, sheet: str, file_key: str) -> Path:
        return self.root / sheet / f"{file_key}{SHEET_FILE_SUFFIX}"

    def load(self, sheet: str, file_key: str) -> Tuple[EntryStore, bool]:
        """Load one bucket file.

        Args:
            sheet: Sheet directory name
            file_key: Bucket key (``"x"`` or the digit bucket)

        Returns:
            ``(store, exists)``. A missing file is the normal "this sheet does
            not cover the letter" case and yields an empty store with
            ``exists=False``.

        Raises:
            LoaderFailure: If the file exists but cannot be read or parsed.
        """
        path = self.path_for(sheet, file_key)
        if path.parent != self.root / sheet:
            # keys such as "/" must not leave the sheet directory
            logger.debug("Bucket key %r does not name a file in sheet %s", file_key, sheet)
            return EntryStore(), False
        if not path.is_file():
            logger.debug("No bucket file %s in sheet %s", path.name, sheet)
            return EntryStore(), False

        try:
            with open(path, "rb") as handle:
                document = tomllib.load(handle)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            raise LoaderFailure(path, exc, sheet=sheet, file_key=file_key) from exc

        logger.debug("Loaded %d entries from %s", len(document), path)
        return EntryStore.from_document(document), True
