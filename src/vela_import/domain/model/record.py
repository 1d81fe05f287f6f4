"""The record assembled for one survey row."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from vela_import.domain.model.enums import RecordFlag

if TYPE_CHECKING:
    from collections.abc import Iterator

    from vela_import.domain.model.parts import Part, PartKey


def new_id() -> UUID:
    return uuid4()


@dataclass(eq=False, kw_only=True)
class Record:
    """Entity built from the regions of one row.

    Parts are created lazily and are unique per ``(part type, role)``: asking
    twice for the same key returns the same instance.
    """

    id: UUID = field(default_factory=new_id)
    title: str | None = None
    flags: RecordFlag = RecordFlag.NONE
    facet_id: str | None = None
    creator_id: str | None = None
    user_id: str | None = None
    row: int | None = None
    _parts: dict[PartKey, Part] = field(default_factory=dict, repr=False)

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts.values())

    def __iter__(self) -> Iterator[Part]:
        return iter(self._parts.values())

    def add_flags(self, flags: RecordFlag) -> None:
        self.flags |= flags

    def has_flags(self, flags: RecordFlag) -> bool:
        return (self.flags & flags) == flags

    def get_part[TPart: Part](
        self, part_cls: type[TPart], role: str | None = None
    ) -> TPart | None:
        part = self._parts.get((part_cls.PART_TYPE, role))
        if part is None:
            return None
        if not isinstance(part, part_cls):
            raise TypeError(
                f"part {part_cls.PART_TYPE}/{role} is a {type(part).__name__}, "
                f"not a {part_cls.__name__}"
            )
        return part

    def ensure_part[TPart: Part](self, part_cls: type[TPart], role: str | None = None) -> TPart:
        """Return the part for ``(part_cls.PART_TYPE, role)``, creating it on first use."""

        part = self.get_part(part_cls, role)
        if part is None:
            part = part_cls(role=role)
            self._parts[part.key] = part
        return part
