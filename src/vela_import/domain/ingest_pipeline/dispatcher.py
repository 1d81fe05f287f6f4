"""Dispatch of tagged regions to the first matching rule."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vela_import.domain.errors import CatalogConflictError, RuleContractError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.ingest_pipeline.rules import RegionRule
    from vela_import.domain.regions import EntrySet

log = logging.getLogger(__name__)


def validate_catalog(rules: Iterable[RegionRule]) -> None:
    """Fail if a tag claimed by one rule is also accepted by another one."""

    earlier: list[RegionRule] = []
    for rule in rules:
        for tag in sorted(rule.tags):
            for owner in earlier:
                if tag in owner.tags or owner.applicable(tag):
                    raise CatalogConflictError(
                        f"Tag {tag!r} claimed by both {owner.name} and {rule.name}"
                    )
        earlier.append(rule)


class RegionDispatcher:
    """Route each region of a row group to the first rule accepting its tag.

    Regions without a rule are skipped; skipping is not an error.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[RegionRule]) -> None:
        self._rules: tuple[RegionRule, ...] = tuple(rules)

    @property
    def rules(self) -> Sequence[RegionRule]:
        return self._rules

    def rule_for(self, tag: str) -> RegionRule | None:
        """First rule in catalog order whose ``applicable`` accepts ``tag``."""

        for rule in self._rules:
            if rule.applicable(tag):
                return rule
        return None

    def process_region(self, entries: EntrySet, cursor: int, context: RowContext) -> int:
        """Apply the rule for the region at ``cursor`` and return the next cursor."""

        if not 0 <= cursor < len(entries.regions):
            raise IndexError(f"Region cursor {cursor} out of range")
        region = entries.regions[cursor]
        rule = self.rule_for(region.tag)
        if rule is None:
            log.debug("Skipping region %s: no rule for tag %r", region, region.tag)
            return cursor + 1

        next_cursor = rule.apply(entries, cursor, context)
        if next_cursor != cursor + 1:
            raise RuleContractError(
                f"{rule.name} returned cursor {next_cursor} for region {region} at {cursor}"
            )
        return next_cursor

    def run(self, entries: EntrySet, context: RowContext) -> int:
        """Process every region of ``entries`` in order; returns the regions consumed."""

        cursor = 0
        total = len(entries.regions)
        while cursor < total:
            cursor = self.process_region(entries, cursor, context)
        log.debug("Processed %d regions", total)
        return cursor
