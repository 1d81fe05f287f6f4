"""Domain primitives: small value objects shared by the parts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from datetime import date

DEFAULT_SIZE_UNIT: Final[str] = "cm"


@dataclass(frozen=True, slots=True)
class PhysicalDimension:
    value: float
    unit: str = DEFAULT_SIZE_UNIT


@dataclass(frozen=True, slots=True)
class PhysicalSize:
    width: PhysicalDimension
    height: PhysicalDimension


@dataclass(frozen=True, slots=True)
class DecoratedCount:
    id: str
    value: int


@dataclass(frozen=True, slots=True)
class Metadatum:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class ProperNamePiece:
    type: str
    value: str


@dataclass(slots=True)
class ProperName:
    """A place name assembled from typed pieces, one per source column."""

    language: str | None = None
    pieces: list[ProperNamePiece] = field(default_factory=list[ProperNamePiece])

    def add_piece(self, piece_type: str, value: str) -> ProperNamePiece:
        piece = ProperNamePiece(type=piece_type, value=value)
        self.pieces.append(piece)
        return piece


@dataclass(slots=True)
class ConservationState:
    date: date | None = None
    note: str | None = None


@dataclass(frozen=True, slots=True)
class Datation:
    """One chronological value: a year, or a century ordinal when ``is_century``.

    Negative values are BC. A year and a century ordinal never compare equal
    because the flag takes part in equality.
    """

    value: int
    is_century: bool = False
    is_approximate: bool = False

    def __str__(self) -> str:
        text = f"{self.value}"
        if self.is_century:
            text = f"{text} c."
        if self.is_approximate:
            text = f"ca. {text}"
        return text
