"""Cross-sheet aggregation.

Searches the primary sheet first, then every other installed sheet. The same
term may carry independent meanings in different domains (ACK in networking
and in medicine), so the search never stops at the first match.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from cryptic_resolver.core.constants import DEFAULT_WORKERS
from cryptic_resolver.sheets.registry import SheetRegistry

from .models import AggregateResult, SearchResult
from .search import Loader, Presenter, SheetSearch
from .store import normalize_term

logger = logging.getLogger(__name__)


class CrossSheetAggregator:
    """Run Sheet Search over a registry and combine the results.

    Attributes:
        registry: Installed sheets with the primary marked
        search: Sheet Search used for every sheet
        max_workers: Thread pool size; 1 searches sequentially
    """

    def __init__(
        self,
        registry: SheetRegistry,
        search: SheetSearch,
        max_workers: int = DEFAULT_WORKERS,
    ):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.registry = registry
        self.search = search
        self.max_workers = max_workers

    def resolve(self, term: str) -> AggregateResult:
        """Resolve *term* across every sheet.

        Sheets share no state, so they may be searched in parallel. Results
        are always joined back in search order (primary first), so parallel
        and sequential runs produce the same AggregateResult.

        Raises:
            ValueError: If the term is empty.
        """
        normalized = normalize_term(term)
        if not normalized:
            raise ValueError("Cannot resolve an empty term")

        sheets = self.registry.search_order()
        logger.debug("Resolving %r across %d sheet(s): %s", normalized, len(sheets), sheets)

        def search_one(sheet: str) -> SearchResult:
            return self.search.search(sheet, normalized)

        if self.max_workers > 1 and len(sheets) > 1:
            workers = min(self.max_workers, len(sheets))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="cr-sheet") as pool:
                # map() yields in submission order; the with-block joins every task
                results = tuple(pool.map(search_one, sheets))
        else:
            results = tuple(search_one(sheet) for sheet in sheets)

        aggregate = AggregateResult(term=normalized, results=results)
        if aggregate.exhausted:
            logger.debug("No sheet knows %r", normalized)
        return aggregate


def resolve_across_sheets(
    registry: SheetRegistry,
    term: str,
    *,
    loader: Optional[Loader] = None,
    presenter: Optional[Presenter] = None,
    max_workers: int = 1,
) -> AggregateResult:
    """Resolve *term* across *registry* in one call.

    Args:
        registry: Installed sheets
        term: Query term
        loader: Bucket loader; defaults to a TOML loader rooted at the registry
        presenter: Optional presenter for found entries
        max_workers: Thread pool size (1 = sequential)

    Returns:
        AggregateResult in search order.
    """
    if loader is None:
        from cryptic_resolver.sheets.loader import SheetLoader

        loader = SheetLoader(registry.root)

    aggregator = CrossSheetAggregator(
        registry, SheetSearch(loader, presenter), max_workers=max_workers
    )
    return aggregator.resolve(term)
