from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.regions import run_row
from vela_import.app import build_dispatcher
from vela_import.config import DEFAULT_VOCABULARY_IDS, ImportConfig
from vela_import.domain.ingest_pipeline import build_default_catalog, validate_catalog
from vela_import.domain.ingest_pipeline.catalog import CONTENT_COLUMNS, FIGURATIVE_COLUMNS
from vela_import.domain.ingest_pipeline.rules import RowStartRule, YearRule
from vela_import.domain.model import PartType

if TYPE_CHECKING:
    from vela_import.domain.ingest_pipeline import RegionDispatcher, RowContext

KNOWN_TAGS = (
    "row",
    "col-id",
    "col-autore",
    "col-commento",
    "col-bibliografia",
    "col-stato",
    "col-segmento_progetto",
    "col-terminus_post",
    "col-terminus_ante",
    "col-secolo",
    "col-data",
    "col-cronologia",
    "col-sestiere",
    "col-denominazione",
    "col-provincia",
    "col-citta'",
    "col-centri/localita'",
    "col-centri/località",
    "col-localizzazione",
    "col-denominazione_struttura",
    "col-tipologia_struttura",
    "col-funzione_attuale",
    "col-presenza_di_damnatio",
    "col-supporto",
    "col-materiale",
    "col-materia",
    "col-funzione_originaria",
    "col-interno/esterno",
    "col-damnatio",
    "col-specchio",
    "col-cornice",
    "col-campo",
    "col-tipo_di_cornice",
    "col-rigatura",
    "col-presenza_di_preparazione_del_supporto",
    "col-numero_righe",
    "col-note",
    "col-misure",
    "col-misure_supporto",
    "col-misure_specchio",
    "col-tecnica_di_esecuzione",
    "col-strumento_di_esecuzione",
    "col-scrittura",
    "col-tipologia_grafica_caratteri_latini",
    "col-abbreviazioni",
    "col-nessi_e_legamenti",
    "col-figurativi",
    "col-numeri",
    "col-testo",
    "col-monogramma",
    "col-lettera_singola",
    "col-lettere_non_interpretabili",
    "col-amore",
    "col-funeraria",
    "col-cifra",
    "col-lingua",
    "col-croce",
    "col-tipo_figurativo",
    "col-tipo_cornice",
    "col-osservazioni_sullo_stato_di_conservazione",
    "col-data_primo_rilievo",
    "col-data_ultima_ricognizione",
)


def test_catalog_tags_are_disjoint() -> None:
    rules = build_default_catalog(DEFAULT_VOCABULARY_IDS, facet_id="graffiti", creator_id="zeus")

    validate_catalog(rules)
    assert len({rule.name for rule in rules}) == len(rules)


def test_dispatcher_builds_from_default_config() -> None:
    dispatcher = build_dispatcher(ImportConfig())

    assert isinstance(dispatcher.rule_for("col-data"), YearRule)
    assert dispatcher.rule_for("col-sconosciuta") is None


def test_catalog_starts_with_row_rule(dispatcher: RegionDispatcher) -> None:
    assert isinstance(dispatcher.rules[0], RowStartRule)


@pytest.mark.parametrize("tag", KNOWN_TAGS)
def test_known_column_has_a_rule(dispatcher: RegionDispatcher, tag: str) -> None:
    assert dispatcher.rule_for(tag) is not None


def test_column_families_do_not_overlap() -> None:
    assert CONTENT_COLUMNS.keys().isdisjoint(FIGURATIVE_COLUMNS.keys())
    assert "col-lingua" not in FIGURATIVE_COLUMNS
    assert CONTENT_COLUMNS["col-funzione_non_definibile"] == "non definibile"


def test_full_row(dispatcher: RegionDispatcher, context: RowContext) -> None:
    record = run_row(
        dispatcher,
        context,
        ("col-id", "SMN-001"),
        ("col-autore", "Rossi"),
        ("col-stato", "rilevata"),
        ("col-secolo", "XV"),
        ("col-sestiere", "Cannaregio"),
        ("col-provincia", "venezia"),
        ("col-supporto", "colonna"),
        ("col-materia", "pietra"),
        ("col-misure", "30x40"),
        ("col-tecnica_di_esecuzione", "incisione"),
        ("col-scrittura", "maiuscola"),
        ("col-testo", "si"),
        ("col-amore", "si"),
        ("col-lingua", "ita"),
        ("col-croce", "si"),
        ("col-tipo_cornice", "circolare"),
        ("col-data_primo_rilievo", "2/2/2020"),
        ("col-sconosciuta", "valore"),
        row=42,
    )

    assert record.row == 42
    assert record.title == "SMN-001"
    assert [part.part_type for part in record] == [
        PartType.METADATA,
        PartType.HISTORICAL_DATE,
        PartType.LOCALIZATION,
        PartType.DISTRICT_LOCATION,
        PartType.SUPPORT,
        PartType.EPI_SUPPORT,
        PartType.TECHNIQUE,
        PartType.WRITING,
        PartType.CATEGORIES,
        PartType.CATEGORIES,
        PartType.CATEGORIES,
        PartType.FIGURATIVE,
        PartType.FRAME,
        PartType.STATES,
    ]
    # "pietra" is a support material, not an epigraphic one
    assert [(d.kind.value, d.tag) for d in context.diagnostics] == [
        ("unresolved-controlled-value", "col-materia"),
    ]
