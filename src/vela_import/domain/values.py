"""Normalization of raw cell text into typed values.

All functions are pure. Parsers that can fail return a ``Parsed`` so callers
can tell an absent value (empty cell, ``n/d``) from an invalid one and report
only the latter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Final

from vela_import.domain.model import DEFAULT_SIZE_UNIT, PhysicalDimension, PhysicalSize

_WS_RE: Final = re.compile(r"\s+")
_EMPTY_VALUES: Final[frozenset[str]] = frozenset({"n/d", "n\\d"})
_DECIMAL_RE: Final = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
_INTEGER_RE: Final = re.compile(r"^[+-]?\d+$")
_DATE_RE: Final = re.compile(r"^(\d{1,2})[/\\](\d{1,2})[/\\](\d{4})$")


@dataclass(frozen=True, slots=True)
class Parsed[T]:
    """Outcome of parsing one cell: a value, nothing, or an invalid input."""

    value: T | None = None
    raw: str | None = None
    error: str | None = None

    @classmethod
    def of(cls, value: T, raw: str | None = None) -> Parsed[T]:
        return cls(value=value, raw=raw)

    @classmethod
    def absent(cls) -> Parsed[T]:
        return cls()

    @classmethod
    def invalid(cls, raw: str, error: str) -> Parsed[T]:
        return cls(raw=raw, error=error)

    @property
    def is_present(self) -> bool:
        return self.value is not None

    @property
    def is_absent(self) -> bool:
        return self.value is None and self.error is None

    @property
    def is_invalid(self) -> bool:
        return self.error is not None


def filter_value(value: str | None, *, lowercase: bool = False) -> str | None:
    """Trim, collapse whitespace runs and drop the "no data" sentinels.

    Returns ``None`` for empty cells and for ``n/d`` in any case.
    """

    if value is None:
        return None
    value = _WS_RE.sub(" ", value.strip())
    if not value or value.lower() in _EMPTY_VALUES:
        return None
    return value.lower() if lowercase else value


def parse_bool(value: str | None) -> bool:
    """Only ``si`` (any case, any padding) is true; everything else is false."""

    filtered = filter_value(value, lowercase=True)
    return filtered == "si"


def parse_int(value: str | None) -> Parsed[int]:
    filtered = filter_value(value)
    if filtered is None:
        return Parsed.absent()
    if not _INTEGER_RE.match(filtered):
        return Parsed.invalid(filtered, "not an integer")
    return Parsed.of(int(filtered), filtered)


def _parse_decimal(value: str) -> float | None:
    value = value.strip()
    if not _DECIMAL_RE.match(value):
        return None
    return float(value)


def parse_size(value: str | None, *, unit: str = DEFAULT_SIZE_UNIT) -> Parsed[PhysicalSize]:
    """Parse ``"<width>x<height>"`` (``x`` in either case, ``.`` as decimal point)."""

    filtered = filter_value(value, lowercase=True)
    if filtered is None:
        return Parsed.absent()

    width_text, sep, height_text = filtered.partition("x")
    if not sep:
        return Parsed.invalid(filtered, "missing 'x' separator in size")
    width = _parse_decimal(width_text)
    if width is None:
        return Parsed.invalid(filtered, "invalid width in size")
    height = _parse_decimal(height_text)
    if height is None:
        return Parsed.invalid(filtered, "invalid height in size")

    return Parsed.of(
        PhysicalSize(
            width=PhysicalDimension(value=width, unit=unit),
            height=PhysicalDimension(value=height, unit=unit),
        ),
        filtered,
    )


def parse_date(value: str | None) -> Parsed[date]:
    """Parse a ``day/month/year`` date; ``\\`` is accepted in place of ``/``."""

    filtered = filter_value(value)
    if filtered is None:
        return Parsed.absent()
    match = _DATE_RE.match(filtered)
    if match is None:
        return Parsed.invalid(filtered, "expected day/month/year")
    day, month, year = (int(group) for group in match.groups())
    try:
        return Parsed.of(date(year, month, day), filtered)
    except ValueError as exc:
        return Parsed.invalid(filtered, str(exc))


def split_values(value: str | None, *, lowercase: bool = False) -> list[str]:
    """Split a comma-separated cell into its distinct, non-empty items."""

    filtered = filter_value(value, lowercase=lowercase)
    if filtered is None:
        return []
    items: list[str] = []
    for piece in filtered.split(","):
        item = piece.strip()
        if item and item not in items:
            items.append(item)
    return items
