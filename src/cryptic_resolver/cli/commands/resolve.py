"""``cr TERM``: resolve a term across installed sheets and print it."""

from __future__ import annotations

import json as json_lib
import logging

from rich.console import Console

from cryptic_resolver.lookup.aggregate import CrossSheetAggregator
from cryptic_resolver.lookup.models import (
    AggregateResult,
    diagnostic_to_dict,
    entry_to_dict,
)
from cryptic_resolver.lookup.rendering import (
    RichPresenter,
    render_diagnostic,
    render_not_found,
)
from cryptic_resolver.lookup.search import SheetSearch
from cryptic_resolver.runtime.config import ResolverConfig
from cryptic_resolver.sheets.loader import SheetLoader
from cryptic_resolver.sheets.registry import SheetRegistry

logger = logging.getLogger(__name__)


def aggregate_to_dict(result: AggregateResult) -> dict:
    """Serialize an AggregateResult for ``--json`` output."""
    return {
        "term": result.term,
        "any_found": result.any_found,
        "matches": [
            {
                "sheet": match.sheet,
                "entries": [entry_to_dict(entry) for entry in match.entries],
            }
            for match in result.matches
        ],
        "diagnostics": [diagnostic_to_dict(d) for d in result.diagnostics],
    }


def resolve_term(
    console: Console,
    term: str,
    registry: SheetRegistry,
    config: ResolverConfig,
    json_output: bool = False,
) -> AggregateResult:
    """Resolve *term* and print matches, diagnostics and the fallback."""
    presenter = None if json_output else RichPresenter()
    search = SheetSearch(SheetLoader(registry.root), presenter)
    aggregator = CrossSheetAggregator(registry, search, max_workers=config.workers)
    result = aggregator.resolve(term)

    if json_output:
        print(json_lib.dumps(aggregate_to_dict(result), indent=2))
        return result

    for diagnostic in result.diagnostics:
        render_diagnostic(console, diagnostic)

    for match in result.matches:
        console.print(match.rendered)

    if result.exhausted:
        render_not_found(console, config.sources)

    return result
