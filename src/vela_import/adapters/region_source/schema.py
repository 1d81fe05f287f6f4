"""Pydantic models for the JSON-lines region file.

Each line holds one row group::

    {"cells": [{"kind": "command", "value": "row-start", "arguments": {"y": "3"}},
               {"kind": "text", "value": "VE-0001"}],
     "regions": [{"tag": "row", "start": 0, "end": 1},
                 {"tag": "col-id", "start": 1, "end": 2}]}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, Self, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vela_import.domain.regions import CellKind, DecodedCell, EntrySet, Region


class RegionFileBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class CellPayload(RegionFileBaseModel):
    kind: Literal["text", "command"] = "text"
    value: str | None = None
    arguments: dict[str, str] = Field(default_factory=dict[str, str])

    @field_validator("arguments", mode="before")
    @classmethod
    def _stringify_arguments(cls, value: object) -> object:
        # spreadsheet decoders emit numeric arguments (row numbers) as numbers
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[object, object], value)
            return {str(key): str(item) for key, item in mapping_value.items()}
        return value

    def to_domain(self) -> DecodedCell:
        return DecodedCell(kind=CellKind(self.kind), value=self.value, arguments=self.arguments)


class RegionPayload(RegionFileBaseModel):
    tag: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_span(self) -> Self:
        if self.end < self.start:
            raise ValueError(f"region {self.tag!r} ends before it starts")
        return self


class RowGroupPayload(RegionFileBaseModel):
    cells: list[CellPayload] = Field(default_factory=list[CellPayload])
    regions: list[RegionPayload] = Field(default_factory=list[RegionPayload])

    @model_validator(mode="after")
    def _check_regions_within_cells(self) -> Self:
        for region in self.regions:
            if region.end > len(self.cells):
                raise ValueError(
                    f"region {region.tag!r} ends at {region.end} "
                    f"beyond the {len(self.cells)} cells of the row group"
                )
        return self

    def to_domain(self) -> EntrySet:
        return EntrySet(
            cells=tuple(cell.to_domain() for cell in self.cells),
            regions=tuple(Region(r.tag, r.start, r.end) for r in self.regions),
        )
