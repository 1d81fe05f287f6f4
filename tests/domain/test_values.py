from __future__ import annotations

from datetime import date

import pytest

from vela_import.domain.model import PhysicalDimension, PhysicalSize
from vela_import.domain.values import (
    Parsed,
    filter_value,
    parse_bool,
    parse_date,
    parse_int,
    parse_size,
    split_values,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  Muro   di  cinta ", "Muro di cinta"),
        ("a\tb\nc", "a b c"),
        ("", None),
        ("   ", None),
        (None, None),
        ("n/d", None),
        ("N/D", None),
        ("n\\d", None),
        (" N\\D ", None),
    ],
)
def test_filter_value(raw: str | None, expected: str | None) -> None:
    assert filter_value(raw) == expected


def test_filter_value_lowercase() -> None:
    assert filter_value("  Pietra D'Istria ", lowercase=True) == "pietra d'istria"


@pytest.mark.parametrize("raw", ["SI", " si ", "Si", "sI"])
def test_parse_bool_true(raw: str) -> None:
    assert parse_bool(raw) is True


@pytest.mark.parametrize("raw", ["", "no", "maybe", None, "n/d", "yes", "sì"])
def test_parse_bool_false(raw: str | None) -> None:
    assert parse_bool(raw) is False


def test_parse_int() -> None:
    assert parse_int(" 12 ").value == 12
    assert parse_int("-3").value == -3
    assert parse_int("").is_absent
    invalid = parse_int("dodici")
    assert invalid.is_invalid
    assert invalid.raw == "dodici"
    assert invalid.value is None


def test_parse_size_lowercase_separator() -> None:
    parsed = parse_size("10x20.5")

    assert parsed.value == PhysicalSize(
        width=PhysicalDimension(10.0, "cm"),
        height=PhysicalDimension(20.5, "cm"),
    )


@pytest.mark.parametrize(
    ("raw", "width", "height"), [(".5x2", 0.5, 2.0), ("5.x2", 5.0, 2.0), ("0.25x.75", 0.25, 0.75)]
)
def test_parse_size_accepts_bare_decimal_points(raw: str, width: float, height: float) -> None:
    parsed = parse_size(raw)

    assert parsed.is_present
    assert parsed.value is not None
    assert (parsed.value.width.value, parsed.value.height.value) == (width, height)


def test_parse_size_uppercase_separator() -> None:
    parsed = parse_size("10X20")

    assert parsed.value is not None
    assert parsed.value.width.value == 10.0
    assert parsed.value.height.value == 20.0


@pytest.mark.parametrize(
    "raw", ["bad", "10x", "x20", "10,5x20", "10x20x30", "ax b", ".x2", "1..5x2"]
)
def test_parse_size_rejects_malformed_input(raw: str) -> None:
    parsed = parse_size(raw)

    assert parsed.is_invalid
    assert parsed.value is None
    assert parsed.error


def test_parse_size_absent() -> None:
    assert parse_size("n/d") == Parsed.absent()


def test_parse_size_custom_unit() -> None:
    parsed = parse_size("1 x 2", unit="mm")

    assert parsed.value is not None
    assert parsed.value.width.unit == "mm"


@pytest.mark.parametrize("raw", ["3/4/2021", "03\\04\\2021", " 3/04/2021 "])
def test_parse_date_accepts_both_separators(raw: str) -> None:
    assert parse_date(raw).value == date(2021, 4, 3)


@pytest.mark.parametrize("raw", ["2021-04-03", "31/02/2021", "3/4/21"])
def test_parse_date_invalid(raw: str) -> None:
    assert parse_date(raw).is_invalid


def test_split_values_deduplicates_and_keeps_order() -> None:
    assert split_values("Rossi, Bianchi,Rossi, , Verdi") == ["Rossi", "Bianchi", "Verdi"]
    assert split_values("n/d") == []
    assert split_values("A, a", lowercase=True) == ["a"]
