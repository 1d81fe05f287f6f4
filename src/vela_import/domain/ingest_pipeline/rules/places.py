"""Place names assembled piece by piece from several columns."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.model import DistrictLocationPart, LocalizationPart
from vela_import.domain.values import filter_value

from .base import ColumnRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.regions import Region

PLACE_PIECES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "col-sestiere": "sestiere",
        "col-denominazione": "location",
    }
)

PROVINCE_TAG = "col-provincia"
DISTRICT_PIECES: Final[Mapping[str, str]] = MappingProxyType(
    {
        PROVINCE_TAG: "p*",
        "col-citta'": "c*",
        "col-centri/localita'": "e*",
        "col-centri/località": "e*",
        "col-localizzazione": "l*",
        "col-denominazione_struttura": "s*",
    }
)
DISTRICT_LANGUAGE = "ita"


class PlaceNameRule(ColumnRule):
    """Add a typed piece to the place of the ``LocalizationPart``."""

    __slots__ = ("pieces",)

    def __init__(self, pieces: Mapping[str, str] = PLACE_PIECES) -> None:
        super().__init__(pieces)
        self.pieces = pieces

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw)
        if value is None:
            context.report(DiagnosticKind.EMPTY_VALUE, region, raw, "place column without value")
            return
        part = context.ensure_part(LocalizationPart, region)
        part.ensure_place().add_piece(self.pieces[region.tag], value)


class DistrictNameRule(ColumnRule):
    """Add a typed piece to the Italian place name of the ``DistrictLocationPart``.

    Free-text pieces are copied; the province goes through the district piece
    vocabulary.
    """

    __slots__ = ("pieces", "vocabulary_id")

    def __init__(
        self, vocabulary_id: str, pieces: Mapping[str, str] = DISTRICT_PIECES
    ) -> None:
        super().__init__(pieces)
        self.pieces = pieces
        self.vocabulary_id = vocabulary_id

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw)
        if value is None:
            context.report(DiagnosticKind.EMPTY_VALUE, region, raw, "place column without value")
            return
        if region.tag == PROVINCE_TAG:
            value = context.resolve(self.vocabulary_id, value, region)
        part = context.ensure_part(DistrictLocationPart, region)
        part.ensure_place(DISTRICT_LANGUAGE).add_piece(self.pieces[region.tag], value)
