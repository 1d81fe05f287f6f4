"""The column catalog of the survey spreadsheet.

Most columns are plain data: a tag, the part and attribute it fills and, for
controlled values, the vocabulary resolving it. Those are listed in the tables
below and turned into table-driven rules; only columns with cross-column
state get a dedicated rule class.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from vela_import.domain.model import (
    CategoriesPart,
    EpiSupportPart,
    FigurativePart,
    FramePart,
    LocalizationPart,
    RecordFlag,
    SupportPart,
    TechniquePart,
    WritingPart,
)

from .dispatcher import validate_catalog
from .rules import (
    BooleanCategoryRule,
    BooleanFieldRule,
    CenturyRule,
    ChronologyFallbackRule,
    ConservationStateRule,
    DistrictNameRule,
    FlagRule,
    IdRule,
    LanguageRule,
    MetadataRule,
    PlaceNameRule,
    PresenceFieldRule,
    RowCountRule,
    RowStartRule,
    SizeRule,
    TerminusAnteRule,
    TerminusPostRule,
    TextFieldRule,
    ValueMapRule,
    VocabularyFieldRule,
    YearRule,
    display_name,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from vela_import.config.vocabularies import VocabularyIds
    from vela_import.domain.ingest_pipeline.rules import RegionRule


def _frozen(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


def _by_display_name(
    tags: Iterable[str], overrides: Mapping[str, str] | None = None
) -> Mapping[str, str]:
    overrides = overrides or {}
    values: dict[str, str] = {}
    for tag in tags:
        name = display_name(tag)
        values[tag] = overrides.get(name, name)
    return _frozen(values)


STATUS_FLAGS: Final[Mapping[str, RecordFlag]] = MappingProxyType(
    {
        "in lavorazione": RecordFlag.IN_PROGRESS,
        "importata": RecordFlag.IMPORTED,
        "lavorata": RecordFlag.WORKED,
        "rilevata": RecordFlag.SURVEYED,
        "convalidata": RecordFlag.VALIDATED,
    }
)

PROJECT_FLAGS: Final[Mapping[str, RecordFlag]] = MappingProxyType(
    {
        "vela urbana": RecordFlag.PROJECT_URBAN,
        "vela monastica": RecordFlag.PROJECT_MONASTIC,
        "vela palazzo ducale": RecordFlag.PROJECT_DUCAL_PALACE,
        "imai": RecordFlag.PROJECT_IMAI,
    }
)

DAMNATIO_VALUES: Final = _frozen(
    {
        "non presente": "absent",
        "parziale": "partial",
        "totale": "complete",
    }
)

DIGIT_SCRIPTS: Final = _frozen(
    {
        "araba": "digit.ar",
        "armena": "digit.hy",
        "cirillica": "digit.ru",
        "glagolitica": "digit.sla",
        "romana": "digit.la",
    }
)

FEATURE_COLUMNS: Final = _frozen(
    {
        "col-figurativi": "figurative",
        "col-numeri": "digits",
    }
)

FUNCTION_COLUMNS: Final = _by_display_name(
    (
        "col-testo",
        "col-monogramma",
        "col-lettera_singola",
        "col-lettere_non_interpretabili",
    )
)

CONTENT_COLUMNS: Final = _by_display_name(
    (
        "col-amore",
        "col-augurale",
        "col-autentica_di_reliquie",
        "col-bollo laterizio",
        "col-calendario",
        "col-celebrativa",
        "col-citazione",
        "col-commemorativa",
        "col-consacrazione",
        "col-dedicatoria",
        "col-devozionale",
        "col-didascalica",
        "col-documentaria",
        "col-esegetica",
        "col-esortativa",
        "col-ex_voto",
        "col-firma",
        "col-funeraria",
        "col-imprecazione",
        "col-infamante",
        "col-iniziale\\i_nome_persona",
        "col-insulto",
        "col-invocativa",
        "col-marchio_edile",
        "col-nome",
        "col-nome di luogo",
        "col-parlante",
        "col-politica",
        "col-poesia",
        "col-prosa",
        "col-prostituzione",
        "col-preghiera",
        "col-religiosa",
        "col-saluto",
        "col-segnaletica",
        "col-sigla",
        "col-sport",
        "col-funzione_non_definibile",
    ),
    # thesaurus values differing from the column name
    {
        "iniziale\\i nome persona": "iniziali nome",
        "funzione non definibile": "non definibile",
    },
)

FIGURATIVE_COLUMNS: Final = _by_display_name(
    (
        "col-disegno_non_interpretabile",
        "col-abbigliamento",
        "col-animale",
        "col-architettura",
        "col-arma",
        "col-armatura",
        "col-bandiera",
        "col-busto",
        "col-croce",
        "col-cuore",
        "col-erotico",
        "col-figura_umana",
        "col-geometrico",
        "col-gioco",
        "col-imbarcazione",
        "col-paesaggio",
        "col-pianta",
        "col-simbolo_zodiacale",
        "col-sistema",
        "col-volto",
    )
)

WRITING_FEATURE_COLUMNS: Final = _by_display_name(
    (
        "col-abbreviazioni",
        "col-nessi_e_legamenti",
        "col-lettere_incluse",
        "col-lettere_sovrapposte",
        "col-punteggiatura",
        "col-segni_di_interpunzione",
    )
)

LAYOUT_FEATURE_COLUMNS: Final = _frozen(
    {
        "col-rigatura": "ruling",
        "col-presenza_di_preparazione_del_supporto": "preparation",
    }
)


def build_default_catalog(
    vocabularies: VocabularyIds,
    *,
    facet_id: str,
    creator_id: str,
) -> tuple[RegionRule, ...]:
    """Return the rules for every known column, in dispatch order.

    Raises ``CatalogConflictError`` if two rules would compete for a tag.
    """

    v = vocabularies
    rules: tuple[RegionRule, ...] = (
        RowStartRule(facet_id=facet_id, creator_id=creator_id),
        # identity and editorial state
        IdRule("col-id"),
        MetadataRule("col-autore", "author", split=True),
        MetadataRule("col-commento", "_comment"),
        MetadataRule("col-bibliografia", "_biblio"),
        FlagRule("col-stato", STATUS_FLAGS),
        FlagRule("col-segmento_progetto", PROJECT_FLAGS),
        # chronology
        TerminusPostRule(),
        TerminusAnteRule(),
        CenturyRule(),
        YearRule(),
        ChronologyFallbackRule(),
        # place
        PlaceNameRule(),
        DistrictNameRule(v.district_name_piece_types),
        VocabularyFieldRule(
            "col-tipologia_struttura",
            LocalizationPart,
            "object_type",
            v.grf_support_object_types,
        ),
        VocabularyFieldRule(
            "col-funzione_attuale", LocalizationPart, "function", v.categories_functions
        ),
        ValueMapRule("col-presenza_di_damnatio", LocalizationPart, "damnatio", DAMNATIO_VALUES),
        # support
        VocabularyFieldRule("col-supporto", SupportPart, "type", v.grf_support_object_types),
        VocabularyFieldRule("col-materiale", SupportPart, "material", v.grf_support_materials),
        VocabularyFieldRule(
            "col-materia", EpiSupportPart, "material", v.epi_support_materials, missing="-"
        ),
        VocabularyFieldRule(
            "col-funzione_originaria", EpiSupportPart, "original_fn", v.epi_support_functions
        ),
        BooleanFieldRule("col-interno/esterno", EpiSupportPart, "indoor"),
        PresenceFieldRule("col-damnatio", EpiSupportPart, "has_damnatio"),
        PresenceFieldRule("col-specchio", EpiSupportPart, "has_mirror"),
        PresenceFieldRule("col-cornice", EpiSupportPart, "has_frame"),
        PresenceFieldRule("col-campo", EpiSupportPart, "has_field"),
        TextFieldRule("col-tipo_di_cornice", EpiSupportPart, "frame"),
        BooleanCategoryRule(
            LAYOUT_FEATURE_COLUMNS, EpiSupportPart, "features", name="LayoutFeatureRule"
        ),
        RowCountRule(),
        TextFieldRule("col-note", EpiSupportPart, "note"),
        SizeRule(),
        # technique and writing
        VocabularyFieldRule(
            "col-tecnica_di_esecuzione", TechniquePart, "techniques", v.epi_technique_types
        ),
        VocabularyFieldRule(
            "col-strumento_di_esecuzione", TechniquePart, "tools", v.epi_technique_tools
        ),
        VocabularyFieldRule("col-scrittura", WritingPart, "casing", v.epi_writing_casings),
        VocabularyFieldRule(
            "col-tipologia_grafica_caratteri_latini", WritingPart, "script", v.epi_writing_scripts
        ),
        BooleanCategoryRule(
            WRITING_FEATURE_COLUMNS,
            WritingPart,
            "features",
            vocabulary_id=v.epi_writing_features,
            name="WritingFeatureRule",
        ),
        # categories
        BooleanCategoryRule(
            FEATURE_COLUMNS, CategoriesPart, "categories", role="features", name="FeatureRule"
        ),
        BooleanCategoryRule(
            FUNCTION_COLUMNS,
            CategoriesPart,
            "categories",
            role="fn",
            vocabulary_id=v.categories_fn,
            name="FunctionRule",
        ),
        BooleanCategoryRule(
            CONTENT_COLUMNS,
            CategoriesPart,
            "categories",
            role="cnt",
            vocabulary_id=v.categories_cnt,
            name="ContentRule",
        ),
        ValueMapRule(
            "col-cifra",
            CategoriesPart,
            "categories",
            DIGIT_SCRIPTS,
            role="cnt",
            keep_unknown=False,
        ),
        LanguageRule("col-lingua"),
        # figurative
        BooleanCategoryRule(
            FIGURATIVE_COLUMNS,
            FigurativePart,
            "types",
            vocabulary_id=v.grf_figurative_types,
            name="FigurativeRule",
        ),
        TextFieldRule("col-tipo_figurativo", FramePart, "figure"),
        TextFieldRule("col-tipo_cornice", FramePart, "frame"),
        # conservation
        ConservationStateRule(),
    )
    validate_catalog(rules)
    return rules
