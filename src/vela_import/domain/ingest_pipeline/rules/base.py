"""Contract shared by all region rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.regions import EntrySet, Region


@runtime_checkable
class RegionRule(Protocol):
    """A handler for the regions carrying one of its ``tags``.

    ``apply`` consumes exactly the region at ``cursor`` and returns
    ``cursor + 1``.
    """

    name: str
    tags: frozenset[str]

    def applicable(self, tag: str) -> bool: ...

    def apply(self, entries: EntrySet, cursor: int, context: RowContext) -> int: ...


class ColumnRule(ABC):
    """Base for rules writing one column value into the live record.

    Subclasses implement ``handle``; the record is required before it runs,
    so a column outside any row fails fast.
    """

    __slots__ = ("name", "tags")

    def __init__(self, tags: Iterable[str], *, name: str | None = None) -> None:
        self.tags = frozenset(tags)
        if not self.tags:
            raise ValueError("a rule needs at least one tag")
        self.name = name or f"{type(self).__name__}({', '.join(sorted(self.tags))})"

    def __repr__(self) -> str:
        return self.name

    def applicable(self, tag: str) -> bool:
        return tag in self.tags

    def apply(self, entries: EntrySet, cursor: int, context: RowContext) -> int:
        region = entries.regions[cursor]
        context.require_record(region)
        self.handle(entries.text_of(region), region, context)
        return cursor + 1

    @abstractmethod
    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        """Apply the raw cell text of ``region`` to ``context.record``."""


def display_name(tag: str) -> str:
    """Thesaurus spelling of a column: ``col-nessi_e_legamenti`` -> ``nessi e legamenti``."""

    return tag.removeprefix("col-").replace("_", " ")
