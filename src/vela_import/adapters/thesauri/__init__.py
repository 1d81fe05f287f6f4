"""Thesauri file adapter."""

from __future__ import annotations

from .loader import JsonThesauriSource, load_resolver, parse_vocabularies
from .schema import ThesauriPayload, VocabularyEntryPayload, VocabularyPayload

__all__ = [
    "JsonThesauriSource",
    "ThesauriPayload",
    "VocabularyEntryPayload",
    "VocabularyPayload",
    "load_resolver",
    "parse_vocabularies",
]
