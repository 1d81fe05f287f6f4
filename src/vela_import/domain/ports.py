"""Ports for the collaborators around the rule engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from vela_import.domain.model import Record

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from vela_import.domain.regions import EntrySet
    from vela_import.domain.vocabulary import Vocabulary


@runtime_checkable
class RegionSource(Protocol):
    """Ordered row groups, already decoded and tagged."""

    def __iter__(self) -> Iterator[EntrySet]: ...


@runtime_checkable
class RecordSink(Protocol):
    """Receives each completed record exactly once, in row order."""

    def write(self, record: Record) -> None: ...


@runtime_checkable
class VocabularySource(Protocol):
    def load(self) -> Iterable[Vocabulary]: ...


@dataclass(slots=True)
class InMemoryRecordSink:
    """Sink keeping completed records in a list."""

    records: list[Record] = field(default_factory=list[Record])

    def write(self, record: Record) -> None:
        self.records.append(record)

    def __len__(self) -> int:
        return len(self.records)


__all__ = ["InMemoryRecordSink", "RecordSink", "RegionSource", "VocabularySource"]
