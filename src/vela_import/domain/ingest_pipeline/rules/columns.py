"""Table-driven column rules.

Each class covers a family of columns that differ only in the target part,
attribute, role or vocabulary; the catalog instantiates them from a table.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from vela_import.domain.diagnostics import DiagnosticKind
from vela_import.domain.model import CategoriesPart, MetadataPart, Part, RecordFlag
from vela_import.domain.values import filter_value, parse_bool, split_values

from .base import ColumnRule

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vela_import.domain.ingest_pipeline.context import RowContext
    from vela_import.domain.regions import Region

_ISO_639_3_RE: Final = re.compile(r"^[a-z]{3}$")


def _store(part: Part, attribute: str, value: str) -> None:
    """Set a scalar attribute, or append once to a list attribute."""

    current = getattr(part, attribute)
    if isinstance(current, list):
        if value not in current:
            current.append(value)
    else:
        setattr(part, attribute, value)


class TextFieldRule(ColumnRule):
    """Copy the filtered cell text as is."""

    __slots__ = ("attribute", "lowercase", "part_cls", "role")

    def __init__(
        self,
        tag: str,
        part_cls: type[Part],
        attribute: str,
        *,
        role: str | None = None,
        lowercase: bool = False,
    ) -> None:
        super().__init__((tag,))
        self.part_cls = part_cls
        self.attribute = attribute
        self.role = role
        self.lowercase = lowercase

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw, lowercase=self.lowercase)
        if value is None:
            return
        _store(context.ensure_part(self.part_cls, region, self.role), self.attribute, value)


class VocabularyFieldRule(ColumnRule):
    """Resolve the lowercased cell text through a vocabulary.

    When ``missing`` is set, an empty cell stores that placeholder instead of
    leaving the attribute untouched.
    """

    __slots__ = ("attribute", "missing", "part_cls", "role", "vocabulary_id")

    def __init__(
        self,
        tag: str,
        part_cls: type[Part],
        attribute: str,
        vocabulary_id: str,
        *,
        role: str | None = None,
        missing: str | None = None,
    ) -> None:
        super().__init__((tag,))
        self.part_cls = part_cls
        self.attribute = attribute
        self.vocabulary_id = vocabulary_id
        self.role = role
        self.missing = missing

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw, lowercase=True)
        if value is None:
            if self.missing is None:
                return
            resolved = self.missing
        else:
            resolved = context.resolve(self.vocabulary_id, value, region)
        _store(context.ensure_part(self.part_cls, region, self.role), self.attribute, resolved)


class BooleanFieldRule(ColumnRule):
    """Set a flag attribute when the cell says ``si``."""

    __slots__ = ("attribute", "part_cls", "role")

    def __init__(
        self, tag: str, part_cls: type[Part], attribute: str, *, role: str | None = None
    ) -> None:
        super().__init__((tag,))
        self.part_cls = part_cls
        self.attribute = attribute
        self.role = role

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        if parse_bool(raw):
            setattr(context.ensure_part(self.part_cls, region, self.role), self.attribute, True)


class PresenceFieldRule(BooleanFieldRule):
    """Set a flag attribute when the cell holds any value at all."""

    __slots__ = ()

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        if filter_value(raw) is not None:
            setattr(context.ensure_part(self.part_cls, region, self.role), self.attribute, True)


class BooleanCategoryRule(ColumnRule):
    """A family of yes/no columns, each adding its own value to a list.

    ``values`` maps each tag to the value it contributes; with a
    ``vocabulary_id`` that value is a display name to resolve first.
    """

    __slots__ = ("attribute", "part_cls", "role", "values", "vocabulary_id")

    def __init__(
        self,
        values: Mapping[str, str],
        part_cls: type[Part],
        attribute: str,
        *,
        role: str | None = None,
        vocabulary_id: str | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(values, name=name)
        self.values: Mapping[str, str] = MappingProxyType(dict(values))
        self.part_cls = part_cls
        self.attribute = attribute
        self.role = role
        self.vocabulary_id = vocabulary_id

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        if not parse_bool(raw):
            return
        value = self.values[region.tag]
        if self.vocabulary_id is not None:
            value = context.resolve(self.vocabulary_id, value, region)
        _store(context.ensure_part(self.part_cls, region, self.role), self.attribute, value)


class ValueMapRule(ColumnRule):
    """Translate the lowercased cell text through a fixed table.

    Unknown values are reported; they are stored as they are when
    ``keep_unknown`` is set and dropped otherwise.
    """

    __slots__ = ("attribute", "keep_unknown", "part_cls", "role", "values")

    def __init__(  # noqa: PLR0913
        self,
        tag: str,
        part_cls: type[Part],
        attribute: str,
        values: Mapping[str, str],
        *,
        role: str | None = None,
        keep_unknown: bool = True,
    ) -> None:
        super().__init__((tag,))
        self.part_cls = part_cls
        self.attribute = attribute
        self.values: Mapping[str, str] = MappingProxyType(dict(values))
        self.role = role
        self.keep_unknown = keep_unknown

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw, lowercase=True)
        if value is None:
            return
        mapped = self.values.get(value)
        if mapped is None:
            context.report(
                DiagnosticKind.UNRESOLVED_CONTROLLED_VALUE,
                region,
                value,
                f"unknown value for {region.tag}",
            )
            if not self.keep_unknown:
                return
            mapped = value
        _store(context.ensure_part(self.part_cls, region, self.role), self.attribute, mapped)


class FlagRule(ColumnRule):
    """Add record flags according to the cell text."""

    __slots__ = ("flags",)

    def __init__(self, tag: str, flags: Mapping[str, RecordFlag]) -> None:
        super().__init__((tag,))
        self.flags: Mapping[str, RecordFlag] = MappingProxyType(dict(flags))

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw, lowercase=True)
        if value is None:
            return
        flag = self.flags.get(value)
        if flag is None:
            context.report(
                DiagnosticKind.UNRESOLVED_CONTROLLED_VALUE,
                region,
                value,
                f"unknown value for {region.tag}",
            )
            return
        context.require_record(region).add_flags(flag)


class MetadataRule(ColumnRule):
    """Add the cell text as a named metadatum, or one per item with ``split``."""

    __slots__ = ("metadatum", "split")

    def __init__(self, tag: str, metadatum: str, *, split: bool = False) -> None:
        super().__init__((tag,))
        self.metadatum = metadatum
        self.split = split

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        if self.split:
            values = split_values(raw)
        else:
            value = filter_value(raw)
            values = [] if value is None else [value]
        if not values:
            return
        part = context.ensure_part(MetadataPart, region)
        for value in values:
            part.add(self.metadatum, value)


class LanguageRule(ColumnRule):
    """Add an ISO 639-3 language code to the language categories.

    Codes of the wrong shape are reported but still kept for review.
    """

    __slots__ = ("role",)

    def __init__(self, tag: str, *, role: str = "lng") -> None:
        super().__init__((tag,))
        self.role = role

    def handle(self, raw: str | None, region: Region, context: RowContext) -> None:
        value = filter_value(raw, lowercase=True)
        if value is None:
            return
        if not _ISO_639_3_RE.match(value):
            context.report(
                DiagnosticKind.UNRESOLVED_CONTROLLED_VALUE,
                region,
                value,
                "invalid language code",
            )
        context.ensure_part(CategoriesPart, region, self.role).add(value)
