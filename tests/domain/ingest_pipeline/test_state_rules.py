from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from tests.helpers.regions import run_row
from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.model import ConservationState, StatesPart

if TYPE_CHECKING:
    from vela_import.domain.ingest_pipeline import RegionDispatcher, RowContext

NOTE = "col-osservazioni_sullo_stato_di_conservazione"
FIRST_SURVEY = "col-data_primo_rilievo"
LAST_INSPECTION = "col-data_ultima_ricognizione"


def test_note_and_dates_build_state_history(
    dispatcher: RegionDispatcher, context: RowContext
) -> None:
    record = run_row(
        dispatcher,
        context,
        (NOTE, "abraso"),
        (FIRST_SURVEY, "12/3/2015"),
        (LAST_INSPECTION, "1\\6\\2021"),
    )

    part = record.get_part(StatesPart)
    assert part is not None
    assert part.states == [
        ConservationState(date=date(2015, 3, 12), note="abraso"),
        ConservationState(date=date(2021, 6, 1)),
    ]


def test_last_inspection_alone_opens_one_state(
    dispatcher: RegionDispatcher, context: RowContext
) -> None:
    record = run_row(dispatcher, context, (LAST_INSPECTION, "1/6/2021"))

    part = record.get_part(StatesPart)
    assert part is not None
    assert part.states == [ConservationState(date=date(2021, 6, 1))]


def test_invalid_date_is_reported_without_state(
    dispatcher: RegionDispatcher, context: RowContext
) -> None:
    record = run_row(dispatcher, context, (LAST_INSPECTION, "giugno 2021"))

    assert record.get_part(StatesPart) is None
    [diagnostic] = context.diagnostics
    assert diagnostic.kind is DiagnosticKind.MALFORMED_NUMERIC_OR_DATE
    assert diagnostic.raw_value == "giugno 2021"


def test_empty_state_columns_are_ignored(
    dispatcher: RegionDispatcher, context: RowContext
) -> None:
    record = run_row(dispatcher, context, (NOTE, "n/d"), (FIRST_SURVEY, ""))

    assert record.parts == ()
    assert context.diagnostics == []
