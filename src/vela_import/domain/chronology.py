"""Parsing of chronological cell values and merging of the dating columns.

A survey row can date its artifact through several columns: a lower bound
(terminus post quem), an upper bound (terminus ante quem), a century, an
explicit year and a free "cronologia" text. They arrive in column order,
which says nothing about how reliable they are, so every write to a
``HistoricalDatePart`` remembers the ``DateSignal`` that produced it and a new
signal is accepted only when it ranks high enough:

============  =====================================================
signal        accepted when the current evidence comes from
============  =====================================================
TERMINUS      anything
YEAR          nothing, the fallback column or a century column
CENTURY       nothing or the fallback column; a century *range*
              also replaces a single century
FALLBACK      nothing
============  =====================================================

The outcome is the same whatever the column order.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from vela_import.domain.model import Datation, DateEvidence, DateKind, DateSignal
from vela_import.domain.values import Parsed, filter_value

if TYPE_CHECKING:
    from vela_import.domain.model import HistoricalDatePart

log = logging.getLogger(__name__)

_ROMAN_RE: Final = re.compile(r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$")
_ROMAN_VALUES: Final[dict[str, int]] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}
_APPROX_RE: Final = re.compile(r"^(?:circa|ca\.?|c\.)\s*", re.IGNORECASE)
_BC_RE: Final = re.compile(r"\s*(?:a\.\s?c\.?|b\.\s?c\.?|ac|bc)$", re.IGNORECASE)
_AD_RE: Final = re.compile(r"\s*(?:d\.\s?c\.?|a\.\s?d\.?|dc|ad)$", re.IGNORECASE)
_CENTURY_WORD_RE: Final = re.compile(r"(?:^|\s)(?:secolo|sec\.?)(?=\s|$)", re.IGNORECASE)
_YEAR_RE: Final = re.compile(r"^\d{1,4}$")


def roman_to_int(token: str) -> int | None:
    """Decode a classical roman numeral (``"XV"`` -> 15); ``None`` if malformed."""

    token = token.strip().upper()
    if not token or not _ROMAN_RE.match(token):
        return None
    total = 0
    highest = 0
    for char in reversed(token):
        value = _ROMAN_VALUES[char]
        if value < highest:
            total -= value
        else:
            total += value
            highest = value
    return total


@dataclass(frozen=True, slots=True)
class _Markers:
    body: str
    approximate: bool
    before_christ: bool
    century: bool


def _strip_markers(text: str) -> _Markers:
    body = text.strip()
    approximate = False
    match = _APPROX_RE.match(body)
    if match:
        approximate = True
        body = body[match.end() :]

    before_christ = False
    match = _BC_RE.search(body)
    if match:
        before_christ = True
        body = body[: match.start()]
    else:
        match = _AD_RE.search(body)
        if match:
            body = body[: match.start()]

    century = bool(_CENTURY_WORD_RE.search(body))
    body = _CENTURY_WORD_RE.sub(" ", body).strip()
    return _Markers(body, approximate, before_christ, century)


def _datation_from_markers(markers: _Markers) -> Datation | None:
    body = markers.body
    sign = -1 if markers.before_christ else 1
    if _YEAR_RE.match(body):
        return Datation(
            sign * int(body),
            is_century=markers.century,
            is_approximate=markers.approximate,
        )
    ordinal = roman_to_int(body)
    if ordinal is None:
        return None
    return Datation(sign * ordinal, is_century=True, is_approximate=markers.approximate)


def parse_datation(value: str | None) -> Parsed[Datation]:
    """Parse one bound: a year (``"1452"``, ``"ca. 1200"``) or a century (``"XV secolo"``)."""

    filtered = filter_value(value)
    if filtered is None:
        return Parsed.absent()
    datation = _datation_from_markers(_strip_markers(filtered))
    if datation is None:
        return Parsed.invalid(filtered, "not a year or a century")
    return Parsed.of(datation, filtered)


def parse_year(value: str | None) -> Parsed[Datation]:
    parsed = parse_datation(value)
    if parsed.value is not None and parsed.value.is_century:
        return Parsed.invalid(parsed.raw or "", "expected a year, not a century")
    return parsed


def parse_century(value: str | None) -> Parsed[DateEvidence]:
    """Parse ``"XV"`` or ``"XV-XVI"`` into century evidence."""

    filtered = filter_value(value)
    if filtered is None:
        return Parsed.absent()

    markers = _strip_markers(filtered)
    tokens = [token.strip() for token in markers.body.split("-")]
    if len(tokens) > 2:  # noqa: PLR2004
        return Parsed.invalid(filtered, "too many century tokens")

    sign = -1 if markers.before_christ else 1
    ordinals: list[int] = []
    for token in tokens:
        ordinal = roman_to_int(token)
        if ordinal is None:
            return Parsed.invalid(filtered, f"malformed century token {token!r}")
        ordinals.append(sign * ordinal)

    if len(ordinals) == 1:
        return Parsed.of(
            DateEvidence(
                DateKind.CENTURY_POINT,
                Datation(ordinals[0], is_century=True, is_approximate=markers.approximate),
            ),
            filtered,
        )

    first, last = ordinals
    if first > last:
        return Parsed.invalid(filtered, "century range is inverted")
    return Parsed.of(DateEvidence.century_range(first, last), filtered)


def parse_historical_date(value: str | None) -> Parsed[DateEvidence]:
    """Parse the free chronology text: a point, a century, or a (half-open) range.

    Accepted shapes: ``"1452"``, ``"XV"``, ``"1200 - 1250"``, ``"XV-XVI"``,
    ``"1200 -"`` and ``"- 1250"``; each bound may carry ``ca.``, ``secolo`` and
    ``a.C.`` markers.
    """

    filtered = filter_value(value)
    if filtered is None:
        return Parsed.absent()

    left, dash, right = filtered.partition("-")
    if not dash:
        datation = _datation_from_markers(_strip_markers(filtered))
        if datation is None:
            return Parsed.invalid(filtered, "not a year or a century")
        kind = DateKind.CENTURY_POINT if datation.is_century else DateKind.POINT
        return Parsed.of(DateEvidence(kind, datation), filtered)

    bounds: list[Datation | None] = []
    for part in (left.strip(), right.strip()):
        if not part:
            bounds.append(None)
            continue
        datation = _datation_from_markers(_strip_markers(part))
        if datation is None:
            return Parsed.invalid(filtered, f"invalid bound {part!r}")
        bounds.append(datation)

    a, b = bounds
    if a is None and b is None:
        return Parsed.invalid(filtered, "range without bounds")
    if a is not None and b is not None:
        if a.is_century and b.is_century and not (a.is_approximate or b.is_approximate):
            if a.value > b.value:
                return Parsed.invalid(filtered, "century range is inverted")
            return Parsed.of(DateEvidence.century_range(a.value, b.value), filtered)
        if a.is_century == b.is_century and a.value > b.value:
            return Parsed.invalid(filtered, "range is inverted")
    return Parsed.of(DateEvidence.range(a, b), filtered)


def _accepts(part: HistoricalDatePart, evidence: DateEvidence, signal: DateSignal) -> bool:
    current = part.signal
    match signal:
        case DateSignal.TERMINUS:
            return True
        case DateSignal.YEAR:
            return current < DateSignal.YEAR
        case DateSignal.CENTURY:
            if evidence.kind is DateKind.CENTURY_RANGE:
                return current <= DateSignal.CENTURY
            return current < DateSignal.CENTURY
        case DateSignal.FALLBACK:
            return not part.date.is_defined
        case _:
            return False


def merge(part: HistoricalDatePart, evidence: DateEvidence, signal: DateSignal) -> bool:
    """Store ``evidence`` on ``part`` if ``signal`` may replace what is there.

    Returns whether the evidence was applied.
    """

    if not evidence.is_defined or not _accepts(part, evidence, signal):
        log.debug(
            "Ignoring %s evidence %s: already dated by %s",
            signal.name,
            evidence,
            part.signal.name,
        )
        return False
    part.date = evidence
    part.signal = signal
    return True


def apply_terminus_post(part: HistoricalDatePart, lower: Datation) -> bool:
    """Open a range at ``lower``, keeping an upper bound set by a terminus ante."""

    upper: Datation | None = None
    if part.signal is DateSignal.TERMINUS and part.date.kind is DateKind.RANGE:
        upper = part.date.b
    return merge(part, DateEvidence.range(lower, upper), DateSignal.TERMINUS)


def apply_terminus_ante(part: HistoricalDatePart, upper: Datation) -> bool:
    """Close the range opened by a terminus post at ``upper``, or open ``(-inf, upper]``."""

    lower: Datation | None = None
    if part.signal is DateSignal.TERMINUS and part.date.kind is DateKind.RANGE:
        lower = part.date.a
    return merge(part, DateEvidence.range(lower, upper), DateSignal.TERMINUS)


def apply_century(part: HistoricalDatePart, evidence: DateEvidence) -> bool:
    if not evidence.is_century_only:
        raise ValueError(f"not century evidence: {evidence}")
    return merge(part, evidence, DateSignal.CENTURY)


def apply_year(part: HistoricalDatePart, year: Datation) -> bool:
    if year.is_century:
        raise ValueError(f"not a year: {year}")
    return merge(part, DateEvidence(DateKind.POINT, year), DateSignal.YEAR)


def apply_fallback(part: HistoricalDatePart, evidence: DateEvidence) -> bool:
    return merge(part, evidence, DateSignal.FALLBACK)
