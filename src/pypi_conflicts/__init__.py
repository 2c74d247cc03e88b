"""Mutually exclusive extras and dependency groups for dependency resolution."""

from pypi_conflicts.errors import (
    ConflictError,
    FoundExtraAndGroupError,
    MissingExtraAndGroupError,
    MissingPackageError,
    OneItemError,
    ZeroItemsError,
)
from pypi_conflicts.models.conflict import (
    ConflictItem,
    ConflictItemRef,
    ConflictKind,
    Conflicts,
    ConflictSet,
    Extra,
    Group,
)
from pypi_conflicts.models.names import ExtraName, GroupName, PackageName
from pypi_conflicts.models.schema import SchemaConflictItem, SchemaConflicts, SchemaConflictSet
from pypi_conflicts.schemas.wire import ConflictItemWire

__all__ = [
    "ConflictError",
    "ConflictItem",
    "ConflictItemRef",
    "ConflictItemWire",
    "ConflictKind",
    "ConflictSet",
    "Conflicts",
    "Extra",
    "ExtraName",
    "FoundExtraAndGroupError",
    "Group",
    "GroupName",
    "MissingExtraAndGroupError",
    "MissingPackageError",
    "OneItemError",
    "PackageName",
    "SchemaConflictItem",
    "SchemaConflictSet",
    "SchemaConflicts",
    "ZeroItemsError",
]
