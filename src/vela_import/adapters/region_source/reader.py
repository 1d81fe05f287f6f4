"""Read row groups from a JSON-lines file."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from vela_import.domain.errors import RegionSourceError

from .schema import RowGroupPayload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from vela_import.domain.regions import EntrySet

log = getLogger(__name__)


def parse_row_group(line: str, *, line_number: int) -> EntrySet:
    try:
        payload = RowGroupPayload.model_validate_json(line)
    except ValidationError as exc:
        raise RegionSourceError(f"Invalid row group at line {line_number}: {exc}") from exc
    return payload.to_domain()


def iter_row_groups(lines: Iterable[str]) -> Iterator[EntrySet]:
    """Yield one ``EntrySet`` per non-blank line."""

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield parse_row_group(line, line_number=line_number)


@dataclass(frozen=True, slots=True)
class JsonLinesRegionSource:
    """Row groups read lazily from ``path``, one per line."""

    path: Path

    def __iter__(self) -> Iterator[EntrySet]:
        log.info("Reading row groups from %s", self.path)
        try:
            with self.path.open(encoding="utf-8") as handle:
                yield from iter_row_groups(handle)
        except OSError as exc:
            raise RegionSourceError(f"Cannot read region file {self.path}: {exc}") from exc
