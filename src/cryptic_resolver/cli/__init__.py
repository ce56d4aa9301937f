"""CLI helpers exposed for other modules."""

from .commands import list_sheets, resolve_term

__all__ = ["list_sheets", "resolve_term"]
