"""Pydantic models describing the thesauri JSON file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from vela_import.domain.vocabulary import Vocabulary, VocabularyEntry


class ThesauriBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class VocabularyEntryPayload(ThesauriBaseModel):
    id: str
    value: str


class VocabularyPayload(ThesauriBaseModel):
    id: str
    target_id: str | None = Field(default=None, alias="targetId")
    entries: list[VocabularyEntryPayload] = Field(default_factory=list[VocabularyEntryPayload])

    @field_validator("id")
    @classmethod
    def _require_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("vocabulary id must not be empty")
        return value

    @field_validator("target_id", mode="before")
    @classmethod
    def _blank_target_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_domain(self) -> Vocabulary:
        return Vocabulary(
            id=self.id,
            target_id=self.target_id,
            entries=tuple(
                VocabularyEntry(id=entry.id, value=entry.value) for entry in self.entries
            ),
        )


class ThesauriPayload(RootModel[list[VocabularyPayload]]):
    """The whole file: a JSON array of vocabularies."""
