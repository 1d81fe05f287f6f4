"""JSON-lines region file adapter."""

from __future__ import annotations

from .reader import JsonLinesRegionSource, iter_row_groups, parse_row_group
from .schema import CellPayload, RegionPayload, RowGroupPayload

__all__ = [
    "CellPayload",
    "JsonLinesRegionSource",
    "RegionPayload",
    "RowGroupPayload",
    "iter_row_groups",
    "parse_row_group",
]
