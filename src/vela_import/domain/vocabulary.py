"""Controlled vocabularies (thesauri) and display-value lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VocabularyEntry:
    id: str
    value: str


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """A closed list of entries, or an alias of another vocabulary when ``target_id`` is set."""

    id: str
    target_id: str | None = None
    entries: tuple[VocabularyEntry, ...] = field(default_factory=tuple[VocabularyEntry, ...])

    @property
    def is_alias(self) -> bool:
        return self.target_id is not None


class VocabularyResolver:
    """Read-only map from ``(vocabulary id, display value)`` to canonical entry id.

    Aliases are followed for one hop only. The resolver never changes after
    construction, so it can be shared freely.
    """

    __slots__ = ("_aliases", "_entries", "_vocabularies")

    def __init__(self, vocabularies: Iterable[Vocabulary] = ()) -> None:
        concrete: dict[str, Vocabulary] = {}
        aliases: dict[str, str] = {}
        for vocabulary in vocabularies:
            if vocabulary.target_id is not None:
                aliases[vocabulary.id] = vocabulary.target_id
            else:
                concrete[vocabulary.id] = vocabulary

        entries: dict[str, dict[str, str]] = {}
        for vocabulary_id, vocabulary in concrete.items():
            by_value: dict[str, str] = {}
            for entry in vocabulary.entries:
                # first entry wins for duplicated display values
                by_value.setdefault(entry.value, entry.id)
            entries[vocabulary_id] = by_value

        self._vocabularies: Mapping[str, Vocabulary] = MappingProxyType(concrete)
        self._aliases: Mapping[str, str] = MappingProxyType(aliases)
        self._entries: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {key: MappingProxyType(value) for key, value in entries.items()}
        )

    @classmethod
    def empty(cls) -> VocabularyResolver:
        return cls(())

    def __len__(self) -> int:
        return len(self._vocabularies) + len(self._aliases)

    def __contains__(self, vocabulary_id: object) -> bool:
        return vocabulary_id in self._vocabularies or vocabulary_id in self._aliases

    def target_of(self, vocabulary_id: str) -> str:
        """Return the id lookups for ``vocabulary_id`` are redirected to."""

        return self._aliases.get(vocabulary_id, vocabulary_id)

    def get(self, vocabulary_id: str) -> Vocabulary | None:
        return self._vocabularies.get(self.target_of(vocabulary_id))

    def lookup(self, vocabulary_id: str, value: str) -> str | None:
        """Return the id of the entry whose value equals ``value`` exactly, if any."""

        entries = self._entries.get(self.target_of(vocabulary_id))
        if entries is None:
            return None
        return entries.get(value)

    def resolve(self, vocabulary_id: str, value: str) -> str:
        """Like ``lookup`` but falls back to ``value`` itself, logging the miss."""

        entry_id = self.lookup(vocabulary_id, value)
        if entry_id is None:
            log.warning("Unknown value %r for vocabulary %s", value, vocabulary_id)
            return value
        return entry_id
