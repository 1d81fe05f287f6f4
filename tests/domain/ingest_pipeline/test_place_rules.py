from __future__ import annotations

from typing import TYPE_CHECKING

from tests.helpers.regions import run_row
from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.model import DistrictLocationPart, LocalizationPart, ProperNamePiece

if TYPE_CHECKING:
    from vela_import.domain.ingest_pipeline import RegionDispatcher, RowContext


def test_localization_place_pieces(dispatcher: RegionDispatcher, context: RowContext) -> None:
    record = run_row(
        dispatcher,
        context,
        ("col-sestiere", "San Marco"),
        ("col-denominazione", "Calle dei Fabbri"),
    )

    part = record.get_part(LocalizationPart)
    assert part is not None
    assert part.place is not None
    assert part.place.pieces == [
        ProperNamePiece("sestiere", "San Marco"),
        ProperNamePiece("location", "Calle dei Fabbri"),
    ]


def test_district_place_resolves_province(
    dispatcher: RegionDispatcher, context: RowContext
) -> None:
    record = run_row(
        dispatcher,
        context,
        ("col-provincia", "venezia"),
        ("col-citta'", "Venezia"),
        ("col-centri/località", "Burano"),
        ("col-localizzazione", "Fondamenta"),
        ("col-denominazione_struttura", "Chiesa di San Martino"),
    )

    part = record.get_part(DistrictLocationPart)
    assert part is not None
    assert part.place is not None
    assert part.place.language == "ita"
    assert [(piece.type, piece.value) for piece in part.place.pieces] == [
        ("p*", "ve"),
        ("c*", "Venezia"),
        ("e*", "Burano"),
        ("l*", "Fondamenta"),
        ("s*", "Chiesa di San Martino"),
    ]
    assert context.diagnostics == []


def test_both_centri_spellings_are_accepted(
    dispatcher: RegionDispatcher, context: RowContext
) -> None:
    record = run_row(dispatcher, context, ("col-centri/localita'", "Murano"))

    part = record.get_part(DistrictLocationPart)
    assert part is not None
    assert part.place is not None
    assert part.place.pieces == [ProperNamePiece("e*", "Murano")]


def test_unknown_province_is_kept(dispatcher: RegionDispatcher, context: RowContext) -> None:
    record = run_row(dispatcher, context, ("col-provincia", "Padova"))

    part = record.get_part(DistrictLocationPart)
    assert part is not None
    assert part.place is not None
    assert part.place.pieces == [ProperNamePiece("p*", "Padova")]
    assert [d.kind for d in context.diagnostics] == [DiagnosticKind.UNRESOLVED_CONTROLLED_VALUE]


def test_empty_place_column_is_reported(
    dispatcher: RegionDispatcher, context: RowContext
) -> None:
    record = run_row(dispatcher, context, ("col-sestiere", "n/d"), ("col-citta'", ""))

    assert record.parts == ()
    assert [d.kind for d in context.diagnostics] == [
        DiagnosticKind.EMPTY_VALUE,
        DiagnosticKind.EMPTY_VALUE,
    ]
