"""Command implementations for the ``cr`` CLI."""

from .resolve import aggregate_to_dict, resolve_term
from .sheets import list_sheets

__all__ = ["aggregate_to_dict", "list_sheets", "resolve_term"]
