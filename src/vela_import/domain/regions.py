"""Tagged regions over the decoded cells of one row group."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

ROW_TAG = "row"
ROW_START_COMMAND = "row-start"


class CellKind(StrEnum):
    TEXT = "text"
    COMMAND = "command"


@dataclass(frozen=True, slots=True)
class DecodedCell:
    """Atomic unit of the entry stream.

    Text cells carry the cell text in ``value``; command cells carry the command
    name in ``value`` and its parameters in ``arguments``.
    """

    kind: CellKind
    value: str | None = None
    arguments: Mapping[str, str] = field(default_factory=dict[str, str])

    @classmethod
    def text(cls, value: str | None) -> DecodedCell:
        return cls(kind=CellKind.TEXT, value=value)

    @classmethod
    def command(cls, name: str, **arguments: str) -> DecodedCell:
        return cls(kind=CellKind.COMMAND, value=name, arguments=dict(arguments))

    def argument(self, name: str) -> str | None:
        return self.arguments.get(name)


@dataclass(frozen=True, slots=True)
class Region:
    """Half-open span ``[start, end)`` of cells representing one column."""

    tag: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid region span {self.start}-{self.end} for {self.tag!r}")

    def __str__(self) -> str:
        return f"{self.tag}@{self.start}-{self.end}"


@dataclass(frozen=True, slots=True)
class EntrySet:
    """One row group: the decoded cells and the ordered regions tagging them."""

    cells: Sequence[DecodedCell]
    regions: Sequence[Region]

    def cells_of(self, region: Region) -> Sequence[DecodedCell]:
        return self.cells[region.start : region.end]

    def text_of(self, region: Region) -> str | None:
        """Return the value of the first text cell inside ``region``, if any."""

        for cell in self.cells_of(region):
            if cell.kind is CellKind.TEXT:
                return cell.value
        return None

    def find_command(self, region: Region, name: str) -> DecodedCell | None:
        for cell in self.cells_of(region):
            if cell.kind is CellKind.COMMAND and cell.value == name:
                return cell
        return None
