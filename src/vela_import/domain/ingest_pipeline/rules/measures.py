"""Sizes and counts of the epigraphic support."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.model import DEFAULT_SIZE_UNIT, DecoratedCount, EpiSupportPart
from vela_import.domain.values import parse_int, parse_size

from .base import ColumnRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.regions import Region

FIELD_SIZE_TAG = "col-misure"
SUPPORT_SIZE_TAG = "col-misure_supporto"
MIRROR_SIZE_TAG = "col-misure_specchio"
ROW_COUNT_TAG = "col-numero_righe"

SIZE_TARGETS: Final[Mapping[str, str]] = MappingProxyType(
    {
        FIELD_SIZE_TAG: "field_size",
        SUPPORT_SIZE_TAG: "support_size",
        MIRROR_SIZE_TAG: "mirror_size",
    }
)


class SizeRule(ColumnRule):
    """Parse ``<width>x<height>`` into one of the support sizes.

    A field or mirror size also implies the support has a field or mirror.
    """

    __slots__ = ("targets", "unit")

    def __init__(
        self, targets: Mapping[str, str] = SIZE_TARGETS, *, unit: str = DEFAULT_SIZE_UNIT
    ) -> None:
        super().__init__(targets)
        self.targets = targets
        self.unit = unit

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        parsed = parse_size(raw, unit=self.unit)
        if parsed.is_invalid:
            context.report(
                DiagnosticKind.MALFORMED_NUMERIC_OR_DATE,
                region,
                parsed.raw,
                parsed.error or "invalid size",
            )
            return
        if parsed.value is None:
            return

        part = context.ensure_part(EpiSupportPart, region)
        attribute = self.targets[region.tag]
        setattr(part, attribute, parsed.value)
        if attribute == "field_size":
            part.has_field = True
        elif attribute == "mirror_size":
            part.has_mirror = True


class RowCountRule(ColumnRule):
    """Number of written lines, kept as the ``rows`` count."""

    __slots__ = ("count_id",)

    def __init__(self, tag: str = ROW_COUNT_TAG, *, count_id: str = "rows") -> None:
        super().__init__((tag,))
        self.count_id = count_id

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        parsed = parse_int(raw)
        if parsed.is_invalid:
            context.report(
                DiagnosticKind.MALFORMED_NUMERIC_OR_DATE,
                region,
                parsed.raw,
                parsed.error or "invalid count",
            )
            return
        if parsed.value is None:
            return
        part = context.ensure_part(EpiSupportPart, region)
        part.counts.append(DecoratedCount(id=self.count_id, value=parsed.value))
