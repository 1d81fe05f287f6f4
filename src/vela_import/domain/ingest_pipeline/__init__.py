"""Region-rule engine turning tagged row groups into records."""

from __future__ import annotations

from .catalog import build_default_catalog
from .context import CompletionHandler, RowContext
from .dispatcher import RegionDispatcher, validate_catalog

__all__ = [
    "CompletionHandler",
    "RegionDispatcher",
    "RowContext",
    "build_default_catalog",
    "validate_catalog",
]
