"""Core data models for term lookup.

Entries are decoded once, at load time, into one of four shapes:

- ``SimpleEntry``       -- a single description
- ``RedirectEntry``     -- a synonym jump (``same = "XDG"`` / ``"XDG.Download"``)
- ``CategorizedEntry``  -- several unrelated meanings keyed by category
- ``EmptyEntry``        -- present in the file but defines nothing
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from cryptic_resolver.core.constants import NO_NAME_PLACEHOLDER


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Entry:
    """Fields shared by every entry shape."""

    key: str  # lowercase term, or the category name for nested entries
    display: Optional[str] = None
    full: Optional[str] = None
    see_also: Tuple[str, ...] = ()

    @property
    def title(self) -> str:
        """Display name, falling back to a placeholder."""
        return self.display or NO_NAME_PLACEHOLDER


@dataclass(frozen=True)
class SimpleEntry(Entry):
    description: str = ""


@dataclass(frozen=True)
class RedirectEntry(Entry):
    same_as: str = ""


@dataclass(frozen=True)
class CategorizedEntry(Entry):
    # Insertion order is the order the meanings were authored in.
    categories: Dict[str, Entry] = field(default_factory=dict, hash=False)

    def category(self, name: str) -> Optional[Entry]:
        """Look up a category by name, case-insensitively."""
        if name in self.categories:
            return self.categories[name]
        wanted = name.lower()
        for category_name, entry in self.categories.items():
            if category_name.lower() == wanted:
                return entry
        return None


@dataclass(frozen=True)
class EmptyEntry(Entry):
    """An entry with no description, categories or redirect."""


# ---------------------------------------------------------------------------
# Resolver outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NotFound:
    term: str


@dataclass(frozen=True)
class Redirect:
    target: str  # raw ``same`` value, not yet split into term/category
    entry: RedirectEntry


@dataclass(frozen=True)
class Single:
    entry: SimpleEntry


@dataclass(frozen=True)
class Multiple:
    entries: Tuple[Entry, ...]


@dataclass(frozen=True)
class Malformed:
    entry: Entry


Outcome = Union[NotFound, Redirect, Single, Multiple, Malformed]


# ---------------------------------------------------------------------------
# Search results
# ---------------------------------------------------------------------------

class DiagnosticKind(Enum):
    """Kind of per-sheet authoring or loading defect."""
    MALFORMED_ENTRY = "malformed_entry"
    BROKEN_REDIRECT = "broken_redirect"
    LOADER_FAILURE = "loader_failure"


@dataclass(frozen=True)
class Diagnostic:
    """A per-sheet defect, reported to the user but never fatal."""
    kind: DiagnosticKind
    sheet: str
    term: str
    file_key: str
    message: str
    target: Optional[str] = None  # redirect target, for BROKEN_REDIRECT


@dataclass(frozen=True)
class SearchResult:
    """Outcome of searching one sheet for one term."""
    sheet: str
    term: str
    entries: Tuple[Entry, ...] = ()
    rendered: Any = None  # whatever the presenter produced
    diagnostic: Optional[Diagnostic] = None

    @property
    def found(self) -> bool:
        return bool(self.entries)


@dataclass(frozen=True)
class AggregateResult:
    """Combined outcome of searching every sheet, in search order."""
    term: str
    results: Tuple[SearchResult, ...] = ()

    @property
    def any_found(self) -> bool:
        return any(result.found for result in self.results)

    @property
    def exhausted(self) -> bool:
        """True when no sheet knows the term; triggers the contribute fallback."""
        return not self.any_found

    @property
    def matches(self) -> Tuple[SearchResult, ...]:
        return tuple(result for result in self.results if result.found)

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return tuple(
            result.diagnostic for result in self.results if result.diagnostic is not None
        )


# Serialization helpers for --json style output and logging

def entry_to_dict(entry: Entry) -> dict[str, Any]:
    """Serialize an Entry to a plain dict."""
    payload: dict[str, Any] = {"key": entry.key, "display": entry.display}
    if entry.full is not None:
        payload["full"] = entry.full
    if entry.see_also:
        payload["see_also"] = list(entry.see_also)
    if isinstance(entry, SimpleEntry):
        payload["description"] = entry.description
    elif isinstance(entry, RedirectEntry):
        payload["same_as"] = entry.same_as
    elif isinstance(entry, CategorizedEntry):
        payload["categories"] = {
            name: entry_to_dict(category) for name, category in entry.categories.items()
        }
    return payload


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    """Serialize a Diagnostic to a plain dict."""
    return {
        "kind": diagnostic.kind.value,
        "sheet": diagnostic.sheet,
        "term": diagnostic.term,
        "file_key": diagnostic.file_key,
        "message": diagnostic.message,
        "target": diagnostic.target,
    }
