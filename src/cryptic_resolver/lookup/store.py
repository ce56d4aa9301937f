"""In-memory entry store for one sheet bucket file."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from cryptic_resolver.core.constants import (
    DIGIT_BUCKET,
    FIELD_DESCRIPTION,
    FIELD_DISPLAY,
    FIELD_FULL,
    FIELD_SAME_AS,
    FIELD_SEE_ALSO,
    FIXED_FIELDS,
)

from .models import CategorizedEntry, EmptyEntry, Entry, RedirectEntry, SimpleEntry

logger = logging.getLogger(__name__)


def normalize_term(term: str) -> str:
    """Normalize a query or redirect term for store lookup."""
    return term.strip().lower()


def file_key(term: str) -> str:
    """Return the bucket file key holding *term*.

    The key is the lowercase first character of the term; the ASCII digits
    map to the shared digit bucket.

    Raises:
        ValueError: If the term is empty.
    """
    normalized = normalize_term(term)
    if not normalized:
        raise ValueError("Cannot compute a file key for an empty term")
    first = normalized[0]
    if first in DIGIT_BUCKET:
        return DIGIT_BUCKET
    return first


def _optional_str(raw: Mapping[str, Any], name: str, key: str) -> Optional[str]:
    value = raw.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.debug("Ignoring non-string %r field on %s: %r", name, key, value)
        return None
    return value


def _see_also(raw: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    value = raw.get(FIELD_SEE_ALSO)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list):
        return tuple(str(item) for item in value)
    logger.debug("Ignoring malformed %r field on %s: %r", FIELD_SEE_ALSO, key, value)
    return ()


def decode_entry(key: str, raw: Any) -> Entry:
    """Decode one raw table from a sheet file into a tagged Entry.

    Precedence: a redirect wins over categories, which win over a plain
    description. Only keys that are not fixed field names and whose values
    are tables count as categories.

    Args:
        key: Term (or category name) the table was stored under
        raw: Parsed TOML value

    Returns:
        SimpleEntry, RedirectEntry, CategorizedEntry, or EmptyEntry
    """
    if not isinstance(raw, Mapping):
        logger.debug("Entry %s is not a table: %r", key, raw)
        return EmptyEntry(key=key)

    common: Dict[str, Any] = {
        "key": key,
        "display": _optional_str(raw, FIELD_DISPLAY, key),
        "full": _optional_str(raw, FIELD_FULL, key),
        "see_also": _see_also(raw, key),
    }

    same_as = _optional_str(raw, FIELD_SAME_AS, key)
    if same_as and same_as.strip():
        return RedirectEntry(same_as=same_as.strip(), **common)

    categories = {
        name: decode_entry(name, value)
        for name, value in raw.items()
        if name not in FIXED_FIELDS and isinstance(value, Mapping)
    }
    if categories:
        return CategorizedEntry(categories=categories, **common)

    description = _optional_str(raw, FIELD_DESCRIPTION, key)
    if description and description.strip():
        return SimpleEntry(description=description, **common)

    return EmptyEntry(**common)


class EntryStore:
    """Mapping from lowercase term to decoded Entry for one bucket file."""

    def __init__(self, entries: Optional[Mapping[str, Entry]] = None):
        self._entries: Dict[str, Entry] = {}
        for term, entry in (entries or {}).items():
            self._entries[normalize_term(term)] = entry

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "EntryStore":
        """Build a store from a parsed sheet document.

        Top-level keys are terms; they are case-normalized here while each
        entry's ``display`` keeps the authored casing. When two keys differ
        only in case (``[XDG]`` and ``[xdg]``) the later one wins and a
        warning is logged.
        """
        entries: Dict[str, Entry] = {}
        authored: Dict[str, str] = {}
        for term, raw in document.items():
            key = normalize_term(term)
            if key in entries:
                logger.warning(
                    "Duplicate term %r: [%s] overrides [%s]", key, term, authored[key]
                )
            entries[key] = decode_entry(key, raw)
            authored[key] = term
        return cls(entries)

    def get(self, term: str) -> Optional[Entry]:
        return self._entries.get(normalize_term(term))

    def __contains__(self, term: object) -> bool:
        return isinstance(term, str) and normalize_term(term) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def terms(self) -> Tuple[str, ...]:
        return tuple(self._entries)
