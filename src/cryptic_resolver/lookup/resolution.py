"""Entry resolution within a single loaded bucket file.

Maps the decoded entry shape onto a resolver Outcome. Redirects are only
reported here; following them across buckets is Sheet Search's job.
"""

from __future__ import annotations

from .models import (
    CategorizedEntry,
    EmptyEntry,
    Malformed,
    Multiple,
    NotFound,
    Outcome,
    RedirectEntry,
    Redirect,
    Single,
    SimpleEntry,
)
from .store import EntryStore, normalize_term


def resolve_entry(store: EntryStore, term: str) -> Outcome:
    """Resolve *term* against one entry store.

    Args:
        store: Loaded bucket file
        term: Query term (any casing)

    Returns:
        NotFound, Redirect, Single, Multiple (categories in authored order)
        or Malformed.

    Example:
        >>> outcome = resolve_entry(store, "XDG")
        >>> isinstance(outcome, Single)
        True
    """
    normalized = normalize_term(term)
    entry = store.get(normalized)

    if entry is None:
        return NotFound(term=normalized)
    if isinstance(entry, RedirectEntry):
        return Redirect(target=entry.same_as, entry=entry)
    if isinstance(entry, CategorizedEntry):
        return Multiple(entries=tuple(entry.categories.values()))
    if isinstance(entry, SimpleEntry):
        return Single(entry=entry)
    if isinstance(entry, EmptyEntry):
        return Malformed(entry=entry)
    raise TypeError(f"Unknown entry shape: {type(entry).__name__}")
