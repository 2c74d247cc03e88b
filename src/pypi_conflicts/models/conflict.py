"""Conflicting extras and dependency groups, in their fully resolved form.

A ``Conflicts`` value is a list of ``ConflictSet``s. Each set names two or
more extras/groups (each paired with the package that defines it) that the
resolver must keep in separate forks. This is the form stored in lock files,
where every entry carries an explicit package name.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Generic, TypeAlias, TypeVar, assert_never

from pypi_conflicts.errors import (
    FoundExtraAndGroupError,
    MissingExtraAndGroupError,
    MissingPackageError,
    OneItemError,
    ZeroItemsError,
)
from pypi_conflicts.models.names import ExtraName, GroupName, PackageName
from pypi_conflicts.schemas.wire import ConflictItemWire

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------


@total_ordering
class _Kind:
    """Ordering shared by both kinds: all extras sort before all groups."""

    __slots__ = ()

    _rank: ClassVar[int]

    def _sort_key(self) -> tuple[int, str]:
        return (self._rank, self.name)  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _Kind):
            return NotImplemented
        return self._sort_key() < other._sort_key()


@dataclass(frozen=True, slots=True)
class Extra(_Kind):
    """The conflicting entry is an optional extra of its package."""

    name: ExtraName

    _rank: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if not isinstance(self.name, ExtraName):
            object.__setattr__(self, "name", ExtraName(self.name))

    @property
    def extra(self) -> ExtraName | None:
        return self.name

    @property
    def group(self) -> GroupName | None:
        return None


@dataclass(frozen=True, slots=True)
class Group(_Kind):
    """The conflicting entry is a dependency group of its package."""

    name: GroupName

    _rank: ClassVar[int] = 1

    def __post_init__(self) -> None:
        if not isinstance(self.name, GroupName):
            object.__setattr__(self, "name", GroupName(self.name))

    @property
    def extra(self) -> ExtraName | None:
        return None

    @property
    def group(self) -> GroupName | None:
        return self.name


ConflictKind: TypeAlias = Extra | Group


def as_kind(kind: ConflictKind | ExtraName | GroupName) -> ConflictKind:
    """Accept a kind, or a bare extra/group name, and return a kind."""
    match kind:
        case Extra() | Group():
            return kind
        case ExtraName():
            return Extra(kind)
        case GroupName():
            return Group(kind)
    raise TypeError(f"Expected an Extra, Group, ExtraName or GroupName, got {kind!r}")


# ---------------------------------------------------------------------------
# Wire bridging
# ---------------------------------------------------------------------------


def kind_from_wire(wire: ConflictItemWire) -> ConflictKind:
    """Pick the kind out of a wire record, requiring exactly one of extra/group."""
    match (wire.extra, wire.group):
        case (None, None):
            raise MissingExtraAndGroupError()
        case (None, group):
            return Group(group)
        case (extra, None):
            return Extra(extra)
        case _:
            raise FoundExtraAndGroupError()


def wire_from_kind(package: PackageName | None, kind: ConflictKind) -> ConflictItemWire:
    match kind:
        case Extra(name=extra):
            return ConflictItemWire(package=package, extra=extra)
        case Group(name=group):
            return ConflictItemWire(package=package, group=group)
        case _:
            assert_never(kind)


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------


@total_ordering
class _ItemKey:
    """Structural equality, hashing and ordering over ``(package, kind)``.

    Shared by ``ConflictItem`` and ``ConflictItemRef`` so that either one can
    be used to look up the other in a set or dict.
    """

    __slots__ = ()

    def __post_init__(self) -> None:
        if not isinstance(self.package, PackageName):  # type: ignore[attr-defined]
            object.__setattr__(self, "package", PackageName(self.package))  # type: ignore[attr-defined]
        if not isinstance(self.kind, Extra | Group):  # type: ignore[attr-defined]
            raise TypeError(f"Expected an Extra or Group, got {self.kind!r}")  # type: ignore[attr-defined]

    def _sort_key(self) -> tuple[PackageName, tuple[int, str]]:
        return (self.package, self.kind._sort_key())  # type: ignore[attr-defined]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ItemKey):
            return NotImplemented
        return self.package == other.package and self.kind == other.kind  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.package, self.kind))  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _ItemKey):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    @property
    def extra(self) -> ExtraName | None:
        """The extra name, or ``None`` if this entry is a group."""
        return self.kind.extra  # type: ignore[attr-defined]

    @property
    def group(self) -> GroupName | None:
        """The group name, or ``None`` if this entry is an extra."""
        return self.kind.group  # type: ignore[attr-defined]


@dataclass(frozen=True, slots=True, eq=False)
class ConflictItem(_ItemKey):
    """A package paired with one of its extras or dependency groups."""

    package: PackageName
    kind: ConflictKind

    @classmethod
    def from_extra(cls, package: PackageName, extra: ExtraName) -> ConflictItem:
        return cls(package, Extra(extra))

    @classmethod
    def from_group(cls, package: PackageName, group: GroupName) -> ConflictItem:
        return cls(package, Group(group))

    @classmethod
    def from_wire(cls, wire: ConflictItemWire) -> ConflictItem:
        """Build an item from its lock file record, where ``package`` is required."""
        if wire.package is None:
            raise MissingPackageError()
        return cls(wire.package, kind_from_wire(wire))

    def to_wire(self) -> ConflictItemWire:
        return wire_from_kind(self.package, self.kind)

    def as_ref(self) -> ConflictItemRef:
        return ConflictItemRef(self.package, self.kind)


@dataclass(frozen=True, slots=True, eq=False)
class ConflictItemRef(_ItemKey):
    """A lookup key for ``ConflictItem``.

    Compares and hashes the same as the item it was built from, so it can be
    built from an existing package and extra/group name to look up
    collections keyed by owned items. The package is normalized the same way
    as for ``ConflictItem``.
    """

    package: PackageName
    kind: ConflictKind

    @classmethod
    def from_extra(cls, package: PackageName, extra: ExtraName) -> ConflictItemRef:
        return cls(package, Extra(extra))

    @classmethod
    def from_group(cls, package: PackageName, group: GroupName) -> ConflictItemRef:
        return cls(package, Group(group))

    def to_owned(self) -> ConflictItem:
        return ConflictItem(self.package, self.kind)


# ---------------------------------------------------------------------------
# Sets and collections
# ---------------------------------------------------------------------------


def require_two_items(items: list) -> None:
    """Reject sequences too short to form a set of conflicts."""
    match len(items):
        case 0:
            raise ZeroItemsError()
        case 1:
            raise OneItemError()


class _Sequence(Generic[T]):
    """An ordered, owned list of values with value equality."""

    __slots__ = ("_items",)
    __hash__ = None  # type: ignore[assignment]

    _items: list[T]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._items == other._items  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class ConflictSet(_Sequence[ConflictItem]):
    """Two or more items the resolver must keep in separate forks.

    Raises ``ZeroItemsError`` or ``OneItemError`` if ``items`` is too short.
    Duplicates are kept as given.
    """

    __slots__ = ()

    def __init__(self, items: Iterable[ConflictItem]) -> None:
        items = list(items)
        require_two_items(items)
        self._items = items

    @classmethod
    def pair(cls, item1: ConflictItem, item2: ConflictItem) -> ConflictSet:
        return cls((item1, item2))

    def push(self, item: ConflictItem) -> None:
        self._items.append(item)

    def contains(self, package: PackageName, kind: ConflictKind | ExtraName | GroupName) -> bool:
        """Whether any item in this set is the given package and extra/group."""
        return self.contains_item(ConflictItemRef(_as_package(package), as_kind(kind)))

    def contains_item(self, item: ConflictItem | ConflictItemRef) -> bool:
        return any(existing == item for existing in self._items)


class Conflicts(_Sequence[ConflictSet]):
    """All conflicting sets declared for a resolution, in declaration order.

    An empty value imposes no constraints.
    """

    __slots__ = ()

    def __init__(self, sets: Iterable[ConflictSet] = ()) -> None:
        self._items = list(sets)

    @classmethod
    def empty(cls) -> Conflicts:
        return cls()

    def push(self, conflict_set: ConflictSet) -> None:
        self._items.append(conflict_set)

    def contains(self, package: PackageName, kind: ConflictKind | ExtraName | GroupName) -> bool:
        """Whether any set contains the given package and extra/group."""
        return self.contains_item(ConflictItemRef(_as_package(package), as_kind(kind)))

    def contains_item(self, item: ConflictItem | ConflictItemRef) -> bool:
        return any(conflict_set.contains_item(item) for conflict_set in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def append(self, other: Conflicts) -> None:
        """Move all sets from ``other`` onto the end of this one, leaving ``other`` empty."""
        drained, other._items = other._items, []
        self._items.extend(drained)


def _as_package(package: PackageName | str) -> PackageName:
    return package if isinstance(package, PackageName) else PackageName(package)
