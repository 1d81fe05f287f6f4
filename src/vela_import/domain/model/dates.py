"""Accumulated chronological evidence of a record."""

from __future__ import annotations

from dataclasses import dataclass

from vela_import.domain.model.enums import DateKind
from vela_import.domain.model.primitives import Datation


@dataclass(frozen=True, slots=True)
class DateEvidence:
    """A point, range or century value.

    ``a`` holds the point value or the lower bound, ``b`` the upper bound. In a
    ``RANGE`` a missing bound is open (``a=None`` is -inf, ``b=None`` is +inf).
    """

    kind: DateKind = DateKind.UNDEFINED
    a: Datation | None = None
    b: Datation | None = None

    def __post_init__(self) -> None:
        match self.kind:
            case DateKind.UNDEFINED:
                if self.a is not None or self.b is not None:
                    raise ValueError("undefined evidence cannot carry values")
            case DateKind.POINT | DateKind.CENTURY_POINT:
                if self.a is None or self.b is not None:
                    raise ValueError(f"{self.kind} evidence needs exactly one value")
            case DateKind.RANGE:
                if self.a is None and self.b is None:
                    raise ValueError("range evidence needs at least one bound")
            case DateKind.CENTURY_RANGE:
                if self.a is None or self.b is None:
                    raise ValueError("century range evidence needs both bounds")

    @classmethod
    def undefined(cls) -> DateEvidence:
        return cls()

    @classmethod
    def point(cls, year: int, *, approximate: bool = False) -> DateEvidence:
        return cls(DateKind.POINT, Datation(year, is_approximate=approximate))

    @classmethod
    def century(cls, ordinal: int) -> DateEvidence:
        return cls(DateKind.CENTURY_POINT, Datation(ordinal, is_century=True))

    @classmethod
    def century_range(cls, first: int, last: int) -> DateEvidence:
        return cls(
            DateKind.CENTURY_RANGE,
            Datation(first, is_century=True),
            Datation(last, is_century=True),
        )

    @classmethod
    def range(cls, a: Datation | None, b: Datation | None) -> DateEvidence:
        return cls(DateKind.RANGE, a, b)

    @property
    def is_defined(self) -> bool:
        return self.kind is not DateKind.UNDEFINED

    @property
    def is_century_only(self) -> bool:
        return self.kind in (DateKind.CENTURY_POINT, DateKind.CENTURY_RANGE)

    def __str__(self) -> str:
        match self.kind:
            case DateKind.UNDEFINED:
                return "undefined"
            case DateKind.POINT | DateKind.CENTURY_POINT:
                return str(self.a)
            case _:
                lower = "-inf" if self.a is None else str(self.a)
                upper = "+inf" if self.b is None else str(self.b)
                return f"{lower} - {upper}"
