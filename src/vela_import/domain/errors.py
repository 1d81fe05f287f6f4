"""Errors raised by the import engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vela_import.domain.regions import Region


class VelaImportError(Exception):
    """Base error for this package."""


class MissingRecordContextError(VelaImportError):
    """Raised when a column rule runs before any row has started a record.

    This is fatal for the current row: the driver decides whether to abort the
    run or skip the row.
    """

    def __init__(self, tag: str, region: Region) -> None:
        super().__init__(f"{tag} column without any record at region {region}")
        self.tag = tag
        self.region = region


class RowMarkerNotFoundError(VelaImportError):
    """Raised when a row region does not contain a row-start command."""

    def __init__(self, region: Region) -> None:
        super().__init__(f"Row command not found in region {region}")
        self.region = region


class RuleContractError(VelaImportError):
    """Raised when a rule does not advance the cursor by exactly one region."""


class CatalogConflictError(VelaImportError):
    """Raised when two rules of a catalog claim the same tag."""


class VocabularyLoadError(VelaImportError):
    """Raised when the vocabulary file cannot be read or validated."""


class RegionSourceError(VelaImportError):
    """Raised when a row group of the region source cannot be read or validated."""
