"""Conservation states: a note and the dates of successive inspections."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.model import StatesPart
from vela_import.domain.values import filter_value, parse_date

from .base import ColumnRule

if TYPE_CHECKING:
    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.regions import Region

NOTE_TAG = "col-osservazioni_sullo_stato_di_conservazione"
FIRST_SURVEY_TAG = "col-data_primo_rilievo"
LAST_INSPECTION_TAG = "col-data_ultima_ricognizione"


class ConservationStateRule(ColumnRule):
    """The note and the first survey date go to the current state; the last
    inspection date always opens a new one.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__((NOTE_TAG, FIRST_SURVEY_TAG, LAST_INSPECTION_TAG))

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw)
        if value is None:
            return

        if region.tag == NOTE_TAG:
            context.ensure_part(StatesPart, region).current().note = value
            return

        parsed = parse_date(raw)
        if parsed.value is None:
            context.report(
                DiagnosticKind.MALFORMED_NUMERIC_OR_DATE,
                region,
                parsed.raw,
                parsed.error or "invalid date",
            )
            return
        part = context.ensure_part(StatesPart, region)
        state = part.open_state() if region.tag == LAST_INSPECTION_TAG else part.current()
        state.date = parsed.value
