"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .importing import (
    DEFAULT_CREATOR_ID,
    DEFAULT_FACET_ID,
    DEFAULT_THESAURI_PATH,
    FatalPolicy,
    ImportConfig,
    get_import_config,
    parse_fatal_policy,
)
from .logging import configure_logging, parse_log_level
from .vocabularies import DEFAULT_VOCABULARY_IDS, VocabularyIds

__all__ = [
    "DEFAULT_CREATOR_ID",
    "DEFAULT_FACET_ID",
    "DEFAULT_THESAURI_PATH",
    "DEFAULT_VOCABULARY_IDS",
    "ConfigurationError",
    "FatalPolicy",
    "ImportConfig",
    "VocabularyIds",
    "configure_logging",
    "get_import_config",
    "optional_env_var",
    "parse_fatal_policy",
    "parse_log_level",
]
