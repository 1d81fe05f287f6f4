"""Region rules: the contract and the rule kinds the catalog is built from."""

from __future__ import annotations

from .base import ColumnRule, RegionRule, display_name
from .chronology import (
    CenturyRule,
    ChronologyFallbackRule,
    DatingRule,
    TerminusAnteRule,
    TerminusPostRule,
    YearRule,
)
from .columns import (
    BooleanCategoryRule,
    BooleanFieldRule,
    FlagRule,
    LanguageRule,
    MetadataRule,
    PresenceFieldRule,
    TextFieldRule,
    ValueMapRule,
    VocabularyFieldRule,
)
from .measures import RowCountRule, SizeRule
from .places import DistrictNameRule, PlaceNameRule
from .row import IdRule, RowStartRule
from .states import ConservationStateRule

__all__ = [
    "BooleanCategoryRule",
    "BooleanFieldRule",
    "CenturyRule",
    "ChronologyFallbackRule",
    "ColumnRule",
    "ConservationStateRule",
    "DatingRule",
    "DistrictNameRule",
    "FlagRule",
    "IdRule",
    "LanguageRule",
    "MetadataRule",
    "PlaceNameRule",
    "PresenceFieldRule",
    "RegionRule",
    "RowCountRule",
    "RowStartRule",
    "SizeRule",
    "TerminusAnteRule",
    "TerminusPostRule",
    "TextFieldRule",
    "ValueMapRule",
    "VocabularyFieldRule",
    "YearRule",
    "display_name",
]
