"""Public domain model surface."""

from __future__ import annotations

from vela_import.domain.model.dates import DateEvidence
from vela_import.domain.model.enums import DateKind, DateSignal, PartType, RecordFlag
from vela_import.domain.model.parts import (
    CategoriesPart,
    DistrictLocationPart,
    EpiSupportPart,
    FigurativePart,
    FramePart,
    HistoricalDatePart,
    LocalizationPart,
    MetadataPart,
    Part,
    PartKey,
    StatesPart,
    SupportPart,
    TechniquePart,
    WritingPart,
)
from vela_import.domain.model.primitives import (
    DEFAULT_SIZE_UNIT,
    ConservationState,
    Datation,
    DecoratedCount,
    Metadatum,
    PhysicalDimension,
    PhysicalSize,
    ProperName,
    ProperNamePiece,
)
from vela_import.domain.model.record import Record

__all__ = [  # noqa: RUF022
    # record
    "Record",
    "RecordFlag",
    # parts
    "Part",
    "PartKey",
    "PartType",
    "CategoriesPart",
    "DistrictLocationPart",
    "EpiSupportPart",
    "FigurativePart",
    "FramePart",
    "HistoricalDatePart",
    "LocalizationPart",
    "MetadataPart",
    "StatesPart",
    "SupportPart",
    "TechniquePart",
    "WritingPart",
    # chronology
    "Datation",
    "DateEvidence",
    "DateKind",
    "DateSignal",
    # primitives
    "DEFAULT_SIZE_UNIT",
    "ConservationState",
    "DecoratedCount",
    "Metadatum",
    "PhysicalDimension",
    "PhysicalSize",
    "ProperName",
    "ProperNamePiece",
]
