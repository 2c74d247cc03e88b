"""Conflicting extras and groups as a user declares them in ``pyproject.toml``.

These mirror the types in ``pypi_conflicts.models.conflict`` except that an
entry may leave out its package name, meaning "the package declaring the
conflict". ``SchemaConflicts.to_conflicts_with_package_name`` fills the gaps
in to produce the resolved form.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import total_ordering

from pypi_conflicts.models.conflict import (
    ConflictItem,
    ConflictKind,
    Conflicts,
    ConflictSet,
    Extra,
    Group,
    _Sequence,
    kind_from_wire,
    require_two_items,
    wire_from_kind,
)
from pypi_conflicts.models.names import ExtraName, GroupName, PackageName
from pypi_conflicts.schemas.wire import ConflictItemWire


@total_ordering
@dataclass(frozen=True, slots=True)
class SchemaConflictItem:
    """An extra or group, optionally qualified with the package defining it."""

    package: PackageName | None
    kind: ConflictKind

    def __post_init__(self) -> None:
        if self.package is not None and not isinstance(self.package, PackageName):
            object.__setattr__(self, "package", PackageName(self.package))
        if not isinstance(self.kind, Extra | Group):
            raise TypeError(f"Expected an Extra or Group, got {self.kind!r}")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SchemaConflictItem):
            return NotImplemented
        # Unqualified entries sort first.
        return (self.package or "", self.kind) < (other.package or "", other.kind)

    @classmethod
    def from_extra(cls, extra: ExtraName, package: PackageName | None = None) -> SchemaConflictItem:
        return cls(package, Extra(extra))

    @classmethod
    def from_group(cls, group: GroupName, package: PackageName | None = None) -> SchemaConflictItem:
        return cls(package, Group(group))

    @property
    def extra(self) -> ExtraName | None:
        return self.kind.extra

    @property
    def group(self) -> GroupName | None:
        return self.kind.group

    @classmethod
    def from_wire(cls, wire: ConflictItemWire) -> SchemaConflictItem:
        return cls(wire.package, kind_from_wire(wire))

    def to_wire(self) -> ConflictItemWire:
        return wire_from_kind(self.package, self.kind)

    def resolve(self, package: PackageName) -> ConflictItem:
        """Qualify this entry, using ``package`` only if it names none itself."""
        return ConflictItem(self.package or package, self.kind)


class SchemaConflictSet(_Sequence[SchemaConflictItem]):
    """Two or more declared entries. Same length rules as ``ConflictSet``."""

    __slots__ = ()

    def __init__(self, items: Iterable[SchemaConflictItem]) -> None:
        items = list(items)
        require_two_items(items)
        self._items = items


class SchemaConflicts(_Sequence[SchemaConflictSet]):
    __slots__ = ()

    def __init__(self, sets: Iterable[SchemaConflictSet] = ()) -> None:
        self._items = list(sets)

    @classmethod
    def empty(cls) -> SchemaConflicts:
        return cls()

    def push(self, conflict_set: SchemaConflictSet) -> None:
        self._items.append(conflict_set)

    def is_empty(self) -> bool:
        return not self._items

    def to_conflicts_with_package_name(self, package: PackageName) -> Conflicts:
        """Resolve every entry against ``package``.

        Entries that name their own package keep it. Every schema set already
        holds at least two entries, so building the resolved sets cannot fail.
        """
        conflicts = Conflicts.empty()
        for schema_set in self._items:
            conflicts.push(ConflictSet(item.resolve(package) for item in schema_set))
        return conflicts
