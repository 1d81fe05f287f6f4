"""Structured sub-documents attached to a record.

Every part class declares its ``PART_TYPE``; together with the optional
``role`` it forms the key under which a record stores the part.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from vela_import.domain.model.dates import DateEvidence
from vela_import.domain.model.enums import DateSignal, PartType
from vela_import.domain.model.primitives import (
    ConservationState,
    DecoratedCount,
    Metadatum,
    PhysicalSize,
    ProperName,
)

type PartKey = tuple[PartType, str | None]


@dataclass(eq=False, kw_only=True)
class Part:
    role: str | None = None

    # class-level discriminator; subclasses must override
    PART_TYPE: ClassVar[PartType]

    @property
    def part_type(self) -> PartType:
        return self.PART_TYPE

    @property
    def key(self) -> PartKey:
        return (self.PART_TYPE, self.role)


def _add_unique(values: list[str], value: str) -> bool:
    if value in values:
        return False
    values.append(value)
    return True


@dataclass(eq=False, kw_only=True)
class MetadataPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.METADATA

    metadata: list[Metadatum] = field(default_factory=list[Metadatum])

    def add(self, name: str, value: str) -> Metadatum:
        metadatum = Metadatum(name=name, value=value)
        self.metadata.append(metadatum)
        return metadatum

    def values_of(self, name: str) -> list[str]:
        return [m.value for m in self.metadata if m.name == name]


@dataclass(eq=False, kw_only=True)
class CategoriesPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.CATEGORIES

    categories: list[str] = field(default_factory=list[str])

    def add(self, category: str) -> bool:
        return _add_unique(self.categories, category)


@dataclass(eq=False, kw_only=True)
class HistoricalDatePart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.HISTORICAL_DATE

    date: DateEvidence = field(default_factory=DateEvidence.undefined)
    signal: DateSignal = DateSignal.NONE


@dataclass(eq=False, kw_only=True)
class LocalizationPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.LOCALIZATION

    place: ProperName | None = None
    object_type: str | None = None
    function: str | None = None
    damnatio: str | None = None

    def ensure_place(self) -> ProperName:
        if self.place is None:
            self.place = ProperName()
        return self.place


@dataclass(eq=False, kw_only=True)
class DistrictLocationPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.DISTRICT_LOCATION

    place: ProperName | None = None

    def ensure_place(self, language: str) -> ProperName:
        if self.place is None:
            self.place = ProperName()
        self.place.language = language
        return self.place


@dataclass(eq=False, kw_only=True)
class SupportPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.SUPPORT

    type: str | None = None
    material: str | None = None


@dataclass(eq=False, kw_only=True)
class EpiSupportPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.EPI_SUPPORT

    material: str | None = None
    original_fn: str | None = None
    indoor: bool = False
    features: list[str] = field(default_factory=list[str])
    counts: list[DecoratedCount] = field(default_factory=list[DecoratedCount])
    note: str | None = None
    has_field: bool = False
    has_mirror: bool = False
    has_frame: bool = False
    has_damnatio: bool = False
    frame: str | None = None
    field_size: PhysicalSize | None = None
    support_size: PhysicalSize | None = None
    mirror_size: PhysicalSize | None = None


@dataclass(eq=False, kw_only=True)
class TechniquePart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.TECHNIQUE

    techniques: list[str] = field(default_factory=list[str])
    tools: list[str] = field(default_factory=list[str])


@dataclass(eq=False, kw_only=True)
class WritingPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.WRITING

    casing: str | None = None
    script: str | None = None
    features: list[str] = field(default_factory=list[str])


@dataclass(eq=False, kw_only=True)
class FramePart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.FRAME

    figure: str | None = None
    frame: str | None = None


@dataclass(eq=False, kw_only=True)
class FigurativePart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.FIGURATIVE

    types: list[str] = field(default_factory=list[str])


@dataclass(eq=False, kw_only=True)
class StatesPart(Part):
    PART_TYPE: ClassVar[PartType] = PartType.STATES

    states: list[ConservationState] = field(default_factory=list[ConservationState])

    def current(self) -> ConservationState:
        """Return the latest state, opening the first one if none exists."""
        if not self.states:
            self.states.append(ConservationState())
        return self.states[-1]

    def open_state(self) -> ConservationState:
        state = ConservationState()
        self.states.append(state)
        return state
