from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from vela_import.adapters.region_source import (
    JsonLinesRegionSource,
    iter_row_groups,
    parse_row_group,
)
from vela_import.domain.errors import RegionSourceError
from vela_import.domain.ports import RegionSource
from vela_import.domain.regions import ROW_START_COMMAND, CellKind, Region

if TYPE_CHECKING:
    from pathlib import Path

LINE = json.dumps(
    {
        "cells": [
            {"kind": "command", "value": ROW_START_COMMAND, "arguments": {"y": 3}},
            {"kind": "text", "value": "VE-0001"},
        ],
        "regions": [
            {"tag": "row", "start": 0, "end": 1},
            {"tag": "col-id", "start": 1, "end": 2},
        ],
    }
)


def test_parse_row_group() -> None:
    entries = parse_row_group(LINE, line_number=1)

    command, text = entries.cells
    assert command.kind is CellKind.COMMAND
    assert command.argument("y") == "3"
    assert text.kind is CellKind.TEXT
    assert entries.regions == (Region("row", 0, 1), Region("col-id", 1, 2))
    assert entries.text_of(entries.regions[1]) == "VE-0001"


def test_cells_default_to_text() -> None:
    entries = parse_row_group('{"cells": [{"value": "x"}], "regions": []}', line_number=1)

    assert entries.cells[0].kind is CellKind.TEXT


@pytest.mark.parametrize(
    ("line", "message"),
    [
        ('{"cells": [], "regions": [{"tag": "row", "start": 0, "end": 1}]}', "beyond the 0 cells"),
        ('{"cells": [{}, {}], "regions": [{"tag": "row", "start": 2, "end": 1}]}', "ends before"),
        ('{"cells": [{}], "regions": [{"tag": "row", "start": -1, "end": 1}]}', "start"),
        ('{"cells": [{"kind": "formula"}], "regions": []}', "kind"),
        ("not json", "line 7"),
    ],
)
def test_invalid_row_group(line: str, message: str) -> None:
    with pytest.raises(RegionSourceError, match=message):
        parse_row_group(line, line_number=7)


def test_iter_row_groups_skips_blank_lines_and_counts_them() -> None:
    lines = [LINE, "", "   \n", "oops"]
    groups = iter_row_groups(lines)

    assert len(next(groups).regions) == 2
    with pytest.raises(RegionSourceError, match="line 4"):
        next(groups)


def test_json_lines_source_reads_lazily(tmp_path: Path) -> None:
    path = tmp_path / "regions.jsonl"
    path.write_text(f"{LINE}\n\n{LINE}\n", encoding="utf-8")

    source = JsonLinesRegionSource(path)
    groups = list(source)

    assert isinstance(source, RegionSource)
    assert len(groups) == 2
    assert groups[0] == groups[1]


def test_json_lines_source_missing_file(tmp_path: Path) -> None:
    source = JsonLinesRegionSource(tmp_path / "missing.jsonl")

    with pytest.raises(RegionSourceError, match="Cannot read region file"):
        list(source)
