"""Recoverable problems found while applying column rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vela_import.domain.regions import Region


class DiagnosticKind(StrEnum):
    UNRESOLVED_CONTROLLED_VALUE = "unresolved-controlled-value"
    MALFORMED_NUMERIC_OR_DATE = "malformed-numeric-or-date"
    MALFORMED_CENTURY = "malformed-century"
    EMPTY_VALUE = "empty-value"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Enough context to find the offending cell for manual correction."""

    kind: DiagnosticKind
    tag: str
    region: Region
    raw_value: str | None
    message: str
    row: int | None = None

    def __str__(self) -> str:
        row = "?" if self.row is None else str(self.row)
        return (
            f"[{self.kind}] row {row}, {self.tag} at {self.region}: "
            f"{self.message} ({self.raw_value!r})"
        )
