from __future__ import annotations

import pytest

from vela_import.domain.model import Datation, DateEvidence, DateKind


@pytest.mark.parametrize(
    ("kind", "a", "b"),
    [
        (DateKind.UNDEFINED, Datation(1200), None),
        (DateKind.POINT, None, None),
        (DateKind.POINT, Datation(1200), Datation(1300)),
        (DateKind.CENTURY_POINT, None, None),
        (DateKind.RANGE, None, None),
        (DateKind.CENTURY_RANGE, Datation(12, is_century=True), None),
    ],
)
def test_evidence_shape_is_validated(
    kind: DateKind, a: Datation | None, b: Datation | None
) -> None:
    with pytest.raises(ValueError, match="evidence"):
        DateEvidence(kind, a, b)


def test_open_ranges_are_allowed() -> None:
    assert DateEvidence.range(Datation(1200), None).is_defined
    assert DateEvidence.range(None, Datation(1300)).is_defined


def test_century_and_year_never_compare_equal() -> None:
    assert Datation(15, is_century=True) != Datation(15)


def test_is_century_only() -> None:
    assert DateEvidence.century(15).is_century_only
    assert DateEvidence.century_range(15, 16).is_century_only
    assert not DateEvidence.point(1500).is_century_only
    assert not DateEvidence.undefined().is_century_only


@pytest.mark.parametrize(
    ("evidence", "text"),
    [
        (DateEvidence.undefined(), "undefined"),
        (DateEvidence.point(1452, approximate=True), "ca. 1452"),
        (DateEvidence.century(-3), "-3 c."),
        (DateEvidence.range(None, Datation(1250)), "-inf - 1250"),
        (DateEvidence.century_range(15, 16), "15 c. - 16 c."),
    ],
)
def test_evidence_str(evidence: DateEvidence, text: str) -> None:
    assert str(evidence) == text
