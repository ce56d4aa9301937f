"""Search one sheet for one term.

Picks the bucket file for the term, resolves the entry, follows at most one
synonym jump, and hands found entries to the presenter. Every per-sheet
defect is caught here and turned into a Diagnostic on the SearchResult.

Synonym jumps must name a specific entry. If the target has several
meanings the category is required::

    [blah]
    same = "XDG"           # wrong when xdg has categories
    same = "XDG.Download"  # right
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence, Tuple

from cryptic_resolver.core.constants import SHEET_FILE_SUFFIX

from .exceptions import (
    BrokenRedirectError,
    LoaderFailure,
    MalformedEntryError,
    ResolverError,
)
from .models import (
    CategorizedEntry,
    EmptyEntry,
    Entry,
    Malformed,
    Multiple,
    Redirect,
    RedirectEntry,
    SearchResult,
    SimpleEntry,
    Single,
)
from .resolution import resolve_entry
from .store import EntryStore, file_key, normalize_term

logger = logging.getLogger(__name__)


class Loader(Protocol):
    """Loads one bucket file of one sheet."""

    def load(self, sheet: str, file_key: str) -> Tuple[EntryStore, bool]: ...


class Presenter(Protocol):
    """Renders found entries, labelled with their sheet."""

    def render(self, sheet: str, entries: Sequence[Entry]) -> Any: ...


@dataclass(frozen=True)
class RedirectTarget:
    """Parsed ``CANONICAL[.CATEGORY]`` redirect value."""
    term: str
    category: Optional[str] = None


def parse_redirect(target: str) -> RedirectTarget:
    """Split a raw redirect at its first dot.

    Example:
        >>> parse_redirect("XDG.Download")
        RedirectTarget(term='xdg', category='Download')
    """
    canonical, _, category = target.strip().partition(".")
    return RedirectTarget(term=normalize_term(canonical), category=category.strip() or None)


class SheetSearch:
    """Search a single sheet, one bucket file per term."""

    def __init__(self, loader: Loader, presenter: Optional[Presenter] = None):
        self.loader = loader
        self.presenter = presenter

    def search(self, sheet: str, term: str) -> SearchResult:
        """Search *sheet* for *term*.

        Args:
            sheet: Sheet name
            term: Query term (any casing)

        Returns:
            SearchResult; ``found`` is False for absent buckets, absent
            terms and any per-sheet defect (which is attached as a
            diagnostic).

        Raises:
            ValueError: If the term is empty.
        """
        normalized = normalize_term(term)
        key = file_key(normalized)

        try:
            entries = self._lookup(sheet, normalized, key)
        except ResolverError as exc:
            logger.warning("%s", exc)
            diagnostic = replace(exc.to_diagnostic(), term=normalized)
            return SearchResult(sheet=sheet, term=normalized, diagnostic=diagnostic)

        if not entries:
            return SearchResult(sheet=sheet, term=normalized)

        rendered = self.presenter.render(sheet, entries) if self.presenter else None
        return SearchResult(sheet=sheet, term=normalized, entries=entries, rendered=rendered)

    def _load(self, sheet: str, key: str) -> Tuple[EntryStore, bool]:
        try:
            return self.loader.load(sheet, key)
        except ResolverError:
            raise
        except Exception as exc:
            bucket = Path(sheet) / f"{key}{SHEET_FILE_SUFFIX}"
            raise LoaderFailure(bucket, exc, sheet=sheet, file_key=key) from exc

    def _lookup(self, sheet: str, term: str, key: str) -> Tuple[Entry, ...]:
        store, exists = self._load(sheet, key)
        if not exists:
            return ()

        outcome = resolve_entry(store, term)

        if isinstance(outcome, Single):
            return (outcome.entry,)
        if isinstance(outcome, Multiple):
            return tuple(
                self._check_category(sheet, term, key, store, category)
                for category in outcome.entries
            )
        if isinstance(outcome, Redirect):
            return (self._follow_redirect(sheet, term, key, store, outcome.target),)
        if isinstance(outcome, Malformed):
            raise MalformedEntryError(sheet=sheet, term=term, file_key=key)
        return ()

    def _check_category(
        self,
        sheet: str,
        term: str,
        key: str,
        store: EntryStore,
        category: Entry,
    ) -> Entry:
        """Return the meaning a category stands for.

        A category is either a plain description or a synonym jump, which is
        followed with the same one-hop rule as a top-level jump. Anything
        else (no description, or categories nested inside a category) makes
        the whole term malformed.
        """
        qualified = f"{term}.{category.key}"
        if isinstance(category, SimpleEntry):
            return category
        if isinstance(category, RedirectEntry):
            return self._follow_redirect(sheet, qualified, key, store, category.same_as)
        raise MalformedEntryError(sheet=sheet, term=qualified, file_key=key)

    def _follow_redirect(
        self,
        sheet: str,
        term: str,
        current_key: str,
        store: EntryStore,
        target: str,
    ) -> Entry:
        """Follow exactly one synonym jump within *sheet*."""
        redirect = parse_redirect(target)

        def broken(reason: str, expected_key: str) -> BrokenRedirectError:
            return BrokenRedirectError(
                reason, sheet=sheet, term=term, target=target, file_key=expected_key
            )

        if not redirect.term:
            raise broken("empty target term", current_key)

        target_key = file_key(redirect.term)
        if target_key == current_key:
            target_store = store
        else:
            target_store, exists = self._load(sheet, target_key)
            if not exists:
                raise broken("target bucket file does not exist", target_key)

        entry: Optional[Entry] = target_store.get(redirect.term)
        if entry is None:
            raise broken("target term is missing", target_key)

        if redirect.category is not None:
            if not isinstance(entry, CategorizedEntry):
                raise broken(f"`{redirect.term}` has no categories", target_key)
            entry = entry.category(redirect.category)
            if entry is None:
                raise broken(f"category `{redirect.category}` is missing", target_key)

        if isinstance(entry, RedirectEntry):
            raise broken("target is itself a synonym jump", target_key)
        if isinstance(entry, CategorizedEntry):
            raise broken("target has several meanings, name one as TERM.CATEGORY", target_key)
        if isinstance(entry, EmptyEntry):
            raise broken("target entry is empty", target_key)

        logger.debug("Followed %s -> %s in sheet %s", term, target, sheet)
        return entry
