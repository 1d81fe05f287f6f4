"""Dating columns, merged into the record's ``HistoricalDatePart``."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from vela_import.domain import chronology
from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.model import HistoricalDatePart

from .base import ColumnRule

if TYPE_CHECKING:
    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.regions import Region
    from vela_import.domain.values import Parsed

TERMINUS_POST_TAG = "col-terminus_post"
TERMINUS_ANTE_TAG = "col-terminus_ante"
CENTURY_TAG = "col-secolo"
YEAR_TAG = "col-data"
CHRONOLOGY_TAG = "col-cronologia"


class DatingRule(ColumnRule):
    """Parse one dating column and hand the value to the chronology merger."""

    __slots__ = ()

    DEFAULT_TAG: ClassVar[str]
    MALFORMED: ClassVar[DiagnosticKind] = DiagnosticKind.MALFORMED_NUMERIC_OR_DATE

    def __init__(self, tag: str | None = None) -> None:
        super().__init__((tag or self.DEFAULT_TAG,))

    @abstractmethod
    def parse(self, raw: str | None) -> Parsed[Any]: ...

    @abstractmethod
    def merge(self, part: HistoricalDatePart, value: Any) -> bool: ...

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        parsed = self.parse(raw)
        if parsed.is_invalid:
            context.report(self.MALFORMED, region, parsed.raw, parsed.error or "invalid value")
        if parsed.value is None:
            return
        self.merge(context.ensure_part(HistoricalDatePart, region), parsed.value)


class TerminusPostRule(DatingRule):
    __slots__ = ()
    DEFAULT_TAG = TERMINUS_POST_TAG

    def parse(self, raw: str | None) -> Parsed[Any]:
        return chronology.parse_datation(raw)

    def merge(self, part: HistoricalDatePart, value: Any) -> bool:
        return chronology.apply_terminus_post(part, value)


class TerminusAnteRule(DatingRule):
    __slots__ = ()
    DEFAULT_TAG = TERMINUS_ANTE_TAG

    def parse(self, raw: str | None) -> Parsed[Any]:
        return chronology.parse_datation(raw)

    def merge(self, part: HistoricalDatePart, value: Any) -> bool:
        return chronology.apply_terminus_ante(part, value)


class CenturyRule(DatingRule):
    """Roman century (``XV``) or century span (``XV-XVI``)."""

    __slots__ = ()
    DEFAULT_TAG = CENTURY_TAG
    MALFORMED = DiagnosticKind.MALFORMED_CENTURY

    def parse(self, raw: str | None) -> Parsed[Any]:
        return chronology.parse_century(raw)

    def merge(self, part: HistoricalDatePart, value: Any) -> bool:
        return chronology.apply_century(part, value)


class YearRule(DatingRule):
    __slots__ = ()
    DEFAULT_TAG = YEAR_TAG

    def parse(self, raw: str | None) -> Parsed[Any]:
        return chronology.parse_year(raw)

    def merge(self, part: HistoricalDatePart, value: Any) -> bool:
        return chronology.apply_year(part, value)


class ChronologyFallbackRule(DatingRule):
    """Free chronology text, used only while nothing else dated the record."""

    __slots__ = ()
    DEFAULT_TAG = CHRONOLOGY_TAG

    def parse(self, raw: str | None) -> Parsed[Any]:
        return chronology.parse_historical_date(raw)

    def merge(self, part: HistoricalDatePart, value: Any) -> bool:
        return chronology.apply_fallback(part, value)
