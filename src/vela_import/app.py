"""Application orchestration entry points."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from vela_import.adapters.jsonl_sink import open_jsonl_sink
from vela_import.adapters.region_source import JsonLinesRegionSource
from vela_import.adapters.thesauri import load_resolver
from vela_import.config import DEFAULT_VOCABULARY_IDS, FatalPolicy, ImportConfig
from vela_import.domain.diagnostics import Diagnostic, DiagnosticKind
from vela_import.domain.errors import MissingRecordContextError, RowMarkerNotFoundError
from vela_import.domain.ingest_pipeline import RegionDispatcher, RowContext, build_default_catalog

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from vela_import.config import VocabularyIds
    from vela_import.domain.ports import RecordSink, RegionSource
    from vela_import.domain.regions import EntrySet
    from vela_import.domain.vocabulary import VocabularyResolver

log = getLogger(__name__)

# errors that invalidate a single row, as opposed to programming errors
ROW_FATAL_ERRORS: Final = (MissingRecordContextError, RowMarkerNotFoundError)


@dataclass(slots=True)
class ImportResult:
    rows: int = 0
    records: int = 0
    skipped_rows: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list[Diagnostic])

    def count_by_kind(self) -> Counter[DiagnosticKind]:
        return Counter(diagnostic.kind for diagnostic in self.diagnostics)


def build_dispatcher(
    config: ImportConfig, vocabularies: VocabularyIds = DEFAULT_VOCABULARY_IDS
) -> RegionDispatcher:
    return RegionDispatcher(
        build_default_catalog(
            vocabularies,
            facet_id=config.facet_id,
            creator_id=config.creator_id,
        )
    )


def import_entry_sets(
    entry_sets: Iterable[EntrySet],
    *,
    resolver: VocabularyResolver,
    sink: RecordSink,
    config: ImportConfig | None = None,
    dispatcher: RegionDispatcher | None = None,
) -> ImportResult:
    """Run every row group through the dispatcher, handing records to ``sink``.

    A record reaches the sink when the next row starts or the input ends. With
    ``FatalPolicy.SKIP_ROW`` a row failing fatally is dropped and the import
    goes on; with ``FatalPolicy.ABORT`` the error propagates.
    """

    effective_config = config or ImportConfig()
    effective_dispatcher = dispatcher or build_dispatcher(effective_config)
    context = RowContext(resolver=resolver, on_complete=sink.write)
    result = ImportResult()

    for entries in entry_sets:
        result.rows += 1
        live = context.record
        try:
            effective_dispatcher.run(entries, context)
        except ROW_FATAL_ERRORS:
            if effective_config.on_fatal is FatalPolicy.ABORT:
                raise
            log.exception("Skipping row group %d", result.rows)
            if context.record is not live:
                context.discard()
            result.skipped_rows += 1

    context.finish()
    result.records = context.completed
    result.diagnostics = list(context.diagnostics)
    return result


def run_import(regions_path: Path, output_path: Path, *, config: ImportConfig) -> ImportResult:
    """Import a JSON-lines region file into a JSON-lines record file."""

    resolver = load_resolver(config.thesauri_path)
    source: RegionSource = JsonLinesRegionSource(regions_path)
    log.info(
        "Starting import: regions=%s, output=%s, thesauri=%s, on_fatal=%s",
        regions_path,
        output_path,
        config.thesauri_path,
        config.on_fatal,
    )

    with open_jsonl_sink(output_path) as sink:
        result = import_entry_sets(source, resolver=resolver, sink=sink, config=config)

    kinds = ", ".join(f"{kind}={count}" for kind, count in sorted(result.count_by_kind().items()))
    log.info(
        f"Finished import: rows={result.rows}, records={result.records}, "
        f"skipped={result.skipped_rows}, diagnostics={len(result.diagnostics)} ({kinds or 'none'})"
    )
    return result
