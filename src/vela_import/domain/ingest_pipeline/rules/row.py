"""Rules delimiting and identifying records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.errors import RowMarkerNotFoundError
from vela_import.domain.model import MetadataPart, Record, RecordFlag
from vela_import.domain.regions import ROW_START_COMMAND, ROW_TAG
from vela_import.domain.values import filter_value, parse_int

from .base import ColumnRule

if TYPE_CHECKING:
    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.regions import EntrySet, Region

log = logging.getLogger(__name__)

ROW_ARGUMENT = "y"


class RowStartRule:
    """Start a new record at each ``row`` region.

    The row ordinal comes from the ``y`` argument of the region's
    ``row-start`` command. Installing the new record completes the previous
    one.
    """

    __slots__ = ("creator_id", "facet_id", "name", "tags")

    def __init__(self, *, facet_id: str, creator_id: str) -> None:
        self.name = "RowStartRule"
        self.tags = frozenset({ROW_TAG})
        self.facet_id = facet_id
        self.creator_id = creator_id

    def __repr__(self) -> str:
        return self.name

    def applicable(self, tag: str) -> bool:
        return tag == ROW_TAG

    def new_record(self, row: int | None = None) -> Record:
        return Record(
            flags=RecordFlag.IMPORTED,
            facet_id=self.facet_id,
            creator_id=self.creator_id,
            user_id=self.creator_id,
            row=row,
        )

    def apply(self, entries: EntrySet, cursor: int, context: RowContext) -> int:
        region = entries.regions[cursor]
        command = entries.find_command(region, ROW_START_COMMAND)
        if command is None:
            log.error("Row command not found in region %s", region)
            raise RowMarkerNotFoundError(region)

        raw = command.argument(ROW_ARGUMENT)
        parsed = parse_int(raw)
        context.reset(self.new_record(parsed.value))
        if not parsed.is_present:
            context.report(
                DiagnosticKind.MALFORMED_NUMERIC_OR_DATE,
                region,
                raw,
                "row-start command without a valid row number",
            )
        log.info("-- ROW: %s", parsed.value)
        return cursor + 1


class IdRule(ColumnRule):
    """Use the survey id as record title and keep it as ``id`` metadatum."""

    __slots__ = ()

    def __init__(self, tag: str = "col-id") -> None:
        super().__init__((tag,))

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw)
        if value is None:
            context.report(DiagnosticKind.EMPTY_VALUE, region, raw, "record without id")
            return
        context.require_record(region).title = value
        context.ensure_part(MetadataPart, region).add("id", value)
        log.info("-- ID: %s", value)
