"""Term lookup engine: entry stores, resolution, sheet search and aggregation."""

from .models import (
    AggregateResult,
    CategorizedEntry,
    Diagnostic,
    DiagnosticKind,
    EmptyEntry,
    Entry,
    Malformed,
    Multiple,
    NotFound,
    Outcome,
    Redirect,
    RedirectEntry,
    SearchResult,
    Single,
    SimpleEntry,
)
from .exceptions import (
    BrokenRedirectError,
    LoaderFailure,
    MalformedEntryError,
    ResolverError,
)
from .store import EntryStore, decode_entry, file_key, normalize_term
from .resolution import resolve_entry
from .search import Loader, Presenter, RedirectTarget, SheetSearch, parse_redirect
from .aggregate import CrossSheetAggregator, resolve_across_sheets
from .rendering import RichPresenter, render_diagnostic, render_entry, render_not_found

__all__ = [
    "AggregateResult",
    "CategorizedEntry",
    "Diagnostic",
    "DiagnosticKind",
    "EmptyEntry",
    "Entry",
    "Malformed",
    "Multiple",
    "NotFound",
    "Outcome",
    "Redirect",
    "RedirectEntry",
    "SearchResult",
    "Single",
    "SimpleEntry",
    "BrokenRedirectError",
    "LoaderFailure",
    "MalformedEntryError",
    "ResolverError",
    "EntryStore",
    "decode_entry",
    "file_key",
    "normalize_term",
    "resolve_entry",
    "Loader",
    "Presenter",
    "RedirectTarget",
    "SheetSearch",
    "parse_redirect",
    "CrossSheetAggregator",
    "resolve_across_sheets",
    "RichPresenter",
    "render_diagnostic",
    "render_entry",
    "render_not_found",
]
