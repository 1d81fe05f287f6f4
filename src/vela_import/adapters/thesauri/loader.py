"""Load the controlled vocabularies from a thesauri JSON file."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from vela_import.domain.errors import VocabularyLoadError
from vela_import.domain.vocabulary import VocabularyResolver

from .schema import ThesauriPayload

if TYPE_CHECKING:
    from pathlib import Path

    from vela_import.domain.vocabulary import Vocabulary

log = getLogger(__name__)


def parse_vocabularies(payload: str | bytes) -> list[Vocabulary]:
    """Validate a thesauri JSON document and return its vocabularies."""

    try:
        document = ThesauriPayload.model_validate_json(payload)
    except ValidationError as exc:
        raise VocabularyLoadError(f"Invalid thesauri document: {exc}") from exc
    return [vocabulary.to_domain() for vocabulary in document.root]


@dataclass(frozen=True, slots=True)
class JsonThesauriSource:
    path: Path

    def load(self) -> list[Vocabulary]:
        try:
            payload = self.path.read_bytes()
        except OSError as exc:
            raise VocabularyLoadError(f"Cannot read thesauri file {self.path}: {exc}") from exc
        vocabularies = parse_vocabularies(payload)
        log.info("Loaded %d vocabularies from %s", len(vocabularies), self.path)
        return vocabularies


def load_resolver(path: Path) -> VocabularyResolver:
    return VocabularyResolver(JsonThesauriSource(path).load())
