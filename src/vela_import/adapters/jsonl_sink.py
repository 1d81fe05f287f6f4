"""Write completed records as JSON lines."""

from __future__ import annotations

import json
from contextlib import contextmanager
from dataclasses import asdict
from logging import getLogger
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from vela_import.domain.model import Part, Record

log = getLogger(__name__)


def part_to_payload(part: Part) -> dict[str, object]:
    return {"type": part.part_type.value, **asdict(part)}


def record_to_payload(record: Record) -> dict[str, object]:
    return {
        "id": str(record.id),
        "title": record.title,
        "flags": int(record.flags),
        "facet_id": record.facet_id,
        "creator_id": record.creator_id,
        "user_id": record.user_id,
        "row": record.row,
        "parts": [part_to_payload(part) for part in record],
    }


class JsonLinesRecordSink:
    """One JSON object per line; dates and ids are written as strings."""

    __slots__ = ("_stream", "written")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.written = 0

    def write(self, record: Record) -> None:
        line = json.dumps(record_to_payload(record), default=str, ensure_ascii=False)
        self._stream.write(line + "\n")
        self.written += 1


@contextmanager
def open_jsonl_sink(path: Path) -> Iterator[JsonLinesRecordSink]:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        sink = JsonLinesRecordSink(handle)
        yield sink
    log.info("Wrote %d records to %s", sink.written, path)
