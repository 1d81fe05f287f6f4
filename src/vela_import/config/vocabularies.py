"""Canonical vocabulary ids referenced by the column catalog.

The ids must match the ``id`` fields of the thesauri file loaded at startup.
They are kept here, rather than in the rules, so a different thesauri
release can be targeted without touching the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VocabularyIds:
    categories_functions: str = "categories_functions@en"
    categories_fn: str = "categories_fn@en"
    categories_cnt: str = "categories_cnt@en"
    district_name_piece_types: str = "district-name-piece-types@en"
    grf_support_object_types: str = "grf-support-object-types@en"
    grf_support_materials: str = "grf-support-materials@en"
    epi_support_materials: str = "epi-support-materials@en"
    epi_support_functions: str = "epi-support-functions@en"
    epi_technique_types: str = "epi-technique-types@en"
    epi_technique_tools: str = "epi-technique-tools@en"
    epi_writing_casings: str = "epi-writing-casings@en"
    epi_writing_scripts: str = "epi-writing-scripts@en"
    epi_writing_features: str = "epi-writing-features@en"
    grf_figurative_types: str = "grf-figurative-types@en"


DEFAULT_VOCABULARY_IDS = VocabularyIds()
