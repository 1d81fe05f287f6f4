"""Row-scoped state shared by the rules of one import run."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from vela_import.domain.diagnostics import Diagnostic, DiagnosticKind
from vela_import.domain.errors import MissingRecordContextError
from vela_import.domain.vocabulary import VocabularyResolver

if TYPE_CHECKING:
    from vela_import.domain.model import Part, Record
    from vela_import.domain.regions import Region

type CompletionHandler = Callable[[Record], None]

log = logging.getLogger(__name__)


@dataclass(slots=True)
class RowContext:
    """Accumulator holding the record being built for the current row.

    There is at most one live record. ``reset`` completes the previous one
    (handing it to ``on_complete``) before installing the next; ``finish`` does
    the same at end of input. Diagnostics accumulate for the whole run.
    """

    resolver: VocabularyResolver = field(default_factory=VocabularyResolver.empty)
    on_complete: CompletionHandler | None = None
    record: Record | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])
    completed: int = 0

    @property
    def row(self) -> int | None:
        return None if self.record is None else self.record.row

    def reset(self, record: Record) -> Record | None:
        """Complete the live record, if any, and make ``record`` the live one."""

        previous = self.finish()
        self.record = record
        return previous

    def finish(self) -> Record | None:
        record = self.record
        self.record = None
        if record is None:
            return None
        self.completed += 1
        if self.on_complete is not None:
            self.on_complete(record)
        return record

    def discard(self) -> Record | None:
        """Drop the live record without completing it."""

        record = self.record
        self.record = None
        if record is not None:
            log.warning("Discarding partial record for row %s", record.row)
        return record

    def require_record(self, region: Region) -> Record:
        if self.record is None:
            log.error("%s column without any record at region %s", region.tag, region)
            raise MissingRecordContextError(region.tag, region)
        return self.record

    def ensure_part[TPart: Part](
        self, part_cls: type[TPart], region: Region, role: str | None = None
    ) -> TPart:
        return self.require_record(region).ensure_part(part_cls, role)

    def report(
        self,
        kind: DiagnosticKind,
        region: Region,
        raw_value: str | None,
        message: str,
    ) -> Diagnostic:
        diagnostic = Diagnostic(
            kind=kind,
            tag=region.tag,
            region=region,
            raw_value=raw_value,
            message=message,
            row=self.row,
        )
        self.diagnostics.append(diagnostic)
        log.warning("%s", diagnostic)
        return diagnostic

    def resolve(self, vocabulary_id: str, value: str, region: Region) -> str:
        """Map ``value`` to its canonical id; unknown values are kept as they are."""

        entry_id = self.resolver.lookup(vocabulary_id, value)
        if entry_id is None:
            self.report(
                DiagnosticKind.UNRESOLVED_CONTROLLED_VALUE,
                region,
                value,
                f"unknown value for vocabulary {vocabulary_id}",
            )
            return value
        return entry_id
