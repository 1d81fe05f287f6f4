"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, IntFlag, StrEnum


class RecordFlag(IntFlag):
    """Bit signals accumulated on a record (workflow state, provenance, project)."""

    NONE = 0
    IN_PROGRESS = 0x01
    IMPORTED = 0x02
    WORKED = 0x04
    SURVEYED = 0x08
    VALIDATED = 0x10

    PROJECT_URBAN = 0x40
    PROJECT_MONASTIC = 0x80
    PROJECT_DUCAL_PALACE = 0x100
    PROJECT_IMAI = 0x200


class PartType(StrEnum):
    """Discriminator of the structured sub-documents attached to a record."""

    METADATA = "metadata"
    CATEGORIES = "categories"
    HISTORICAL_DATE = "historical-date"
    LOCALIZATION = "localization"
    DISTRICT_LOCATION = "district-location"
    SUPPORT = "support"
    EPI_SUPPORT = "epi-support"
    TECHNIQUE = "technique"
    WRITING = "writing"
    FRAME = "frame"
    FIGURATIVE = "figurative"
    STATES = "states"


class DateKind(StrEnum):
    UNDEFINED = "undefined"
    POINT = "point"
    RANGE = "range"
    CENTURY_POINT = "century-point"
    CENTURY_RANGE = "century-range"


class DateSignal(IntEnum):
    """Chronology columns ranked by how much their value can be trusted."""

    NONE = -1
    FALLBACK = 0
    CENTURY = 1
    YEAR = 2
    TERMINUS = 3
