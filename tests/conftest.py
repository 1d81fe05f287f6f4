from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from vela_import.app import build_dispatcher
from vela_import.config import DEFAULT_VOCABULARY_IDS, ImportConfig
from vela_import.domain.ingest_pipeline import RowContext
from vela_import.domain.ports import InMemoryRecordSink
from vela_import.domain.vocabulary import Vocabulary, VocabularyEntry, VocabularyResolver

if TYPE_CHECKING:
    from vela_import.domain.ingest_pipeline import RegionDispatcher

FIGURATIVE_BASE_ID = "grf-figurative-base@en"

_THESAURI: dict[str, list[tuple[str, str]]] = {
    DEFAULT_VOCABULARY_IDS.categories_functions: [("fn.church", "chiesa")],
    DEFAULT_VOCABULARY_IDS.grf_support_object_types: [("wall", "muro"), ("column", "colonna")],
    DEFAULT_VOCABULARY_IDS.grf_support_materials: [("stone", "pietra")],
    DEFAULT_VOCABULARY_IDS.epi_support_materials: [("marble", "marmo")],
    DEFAULT_VOCABULARY_IDS.epi_support_functions: [("tomb", "sepolcro")],
    DEFAULT_VOCABULARY_IDS.epi_technique_types: [("incision", "incisione")],
    DEFAULT_VOCABULARY_IDS.epi_technique_tools: [("chisel", "scalpello")],
    DEFAULT_VOCABULARY_IDS.epi_writing_casings: [("upper", "maiuscola")],
    DEFAULT_VOCABULARY_IDS.epi_writing_scripts: [("gothic", "gotica")],
    DEFAULT_VOCABULARY_IDS.epi_writing_features: [
        ("abbreviation", "abbreviazioni"),
        ("ligature", "nessi e legamenti"),
    ],
    DEFAULT_VOCABULARY_IDS.categories_fn: [("text", "testo"), ("monogram", "monogramma")],
    DEFAULT_VOCABULARY_IDS.categories_cnt: [("love", "amore"), ("initials", "iniziali nome")],
    DEFAULT_VOCABULARY_IDS.district_name_piece_types: [("ve", "venezia")],
    FIGURATIVE_BASE_ID: [("ship", "imbarcazione"), ("cross", "croce")],
}


def make_vocabularies() -> list[Vocabulary]:
    vocabularies = [
        Vocabulary(
            id=vocabulary_id,
            entries=tuple(VocabularyEntry(id=entry_id, value=value) for entry_id, value in entries),
        )
        for vocabulary_id, entries in _THESAURI.items()
    ]
    vocabularies.append(
        Vocabulary(id=DEFAULT_VOCABULARY_IDS.grf_figurative_types, target_id=FIGURATIVE_BASE_ID)
    )
    return vocabularies


@pytest.fixture
def resolver() -> VocabularyResolver:
    return VocabularyResolver(make_vocabularies())


@pytest.fixture
def sink() -> InMemoryRecordSink:
    return InMemoryRecordSink()


@pytest.fixture
def context(resolver: VocabularyResolver, sink: InMemoryRecordSink) -> RowContext:
    return RowContext(resolver=resolver, on_complete=sink.write)


@pytest.fixture
def dispatcher() -> RegionDispatcher:
    return build_dispatcher(ImportConfig())


@pytest.fixture
def thesauri_path(tmp_path: Path) -> Path:
    document = [
        {
            "id": vocabulary.id,
            "targetId": vocabulary.target_id,
            "entries": [{"id": entry.id, "value": entry.value} for entry in vocabulary.entries],
        }
        for vocabulary in make_vocabularies()
    ]
    path = tmp_path / "Thesauri.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
