"""Installed sheets: discovery and bucket file loading."""

from .loader import SheetLoader
from .registry import SheetRegistry

__all__ = ["SheetLoader", "SheetRegistry"]
