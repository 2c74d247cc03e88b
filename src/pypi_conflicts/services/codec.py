"""Parse and dump conflict declarations.

Two forms share one wire shape (a list of lists of ``ConflictItemWire``
records):

* the lock form, parsed into ``Conflicts``, where every entry names its package;
* the declaration form, parsed into ``SchemaConflicts``, where it may not.

Structural problems (unknown fields, wrong types, invalid names) raise
``pydantic.ValidationError``. Semantic problems raise a ``ConflictError``
carrying a note that points at the offending set and entry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Annotated, Any, TypeVar

from pydantic import Field, TypeAdapter

from pypi_conflicts.errors import ConflictError
from pypi_conflicts.models.conflict import ConflictItem, Conflicts, ConflictSet
from pypi_conflicts.models.schema import SchemaConflictItem, SchemaConflicts, SchemaConflictSet
from pypi_conflicts.schemas.wire import ConflictItemWire

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", ConflictItem, SchemaConflictItem)

_ITEM_ADAPTER = TypeAdapter(ConflictItemWire)
_SET_ADAPTER = TypeAdapter(list[ConflictItemWire])
_SETS_ADAPTER = TypeAdapter(list[list[ConflictItemWire]])

# Only used to publish a JSON Schema; parsing reports short sets via ConflictError.
_DECLARATION_ADAPTER = TypeAdapter(
    list[Annotated[list[ConflictItemWire], Field(min_length=2)]]
)


# ---------------------------------------------------------------------------
# Wire -> model
# ---------------------------------------------------------------------------


def _convert_items(
    wires: list[ConflictItemWire],
    convert: Callable[[ConflictItemWire], ItemT],
) -> list[ItemT]:
    items: list[ItemT] = []
    for position, wire in enumerate(wires):
        try:
            items.append(convert(wire))
        except ConflictError as exc:
            exc.add_note(f"in conflicting entry {position}: {wire.to_data()}")
            raise
    return items


def _convert_sets(
    wire_sets: list[list[ConflictItemWire]],
    convert: Callable[[ConflictItemWire], ItemT],
    build_set: Callable[[list[ItemT]], Any],
) -> list[Any]:
    sets = []
    for index, wires in enumerate(wire_sets):
        try:
            sets.append(build_set(_convert_items(wires, convert)))
        except ConflictError as exc:
            exc.add_note(f"in conflicting set {index}")
            logger.debug("Rejected conflicting set %d: %s", index, exc)
            raise
    logger.debug(
        "Parsed %d conflicting sets (%d entries)",
        len(sets),
        sum(len(wires) for wires in wire_sets),
    )
    return sets


def _to_conflicts(wire_sets: list[list[ConflictItemWire]]) -> Conflicts:
    return Conflicts(_convert_sets(wire_sets, ConflictItem.from_wire, ConflictSet))


def _to_schema_conflicts(wire_sets: list[list[ConflictItemWire]]) -> SchemaConflicts:
    return SchemaConflicts(
        _convert_sets(wire_sets, SchemaConflictItem.from_wire, SchemaConflictSet)
    )


# ---------------------------------------------------------------------------
# Lock form
# ---------------------------------------------------------------------------


def parse_conflict_item(data: Any) -> ConflictItem:
    return ConflictItem.from_wire(_ITEM_ADAPTER.validate_python(data))


def parse_conflict_set(data: Any) -> ConflictSet:
    return ConflictSet(_convert_items(_SET_ADAPTER.validate_python(data), ConflictItem.from_wire))


def parse_conflicts(data: Any) -> Conflicts:
    """Parse already-decoded data (e.g. from a TOML lock file) into ``Conflicts``."""
    return _to_conflicts(_SETS_ADAPTER.validate_python(data))


def parse_conflicts_json(text: str | bytes) -> Conflicts:
    return _to_conflicts(_SETS_ADAPTER.validate_json(text))


# ---------------------------------------------------------------------------
# Declaration form
# ---------------------------------------------------------------------------


def parse_schema_conflict_item(data: Any) -> SchemaConflictItem:
    return SchemaConflictItem.from_wire(_ITEM_ADAPTER.validate_python(data))


def parse_schema_conflict_set(data: Any) -> SchemaConflictSet:
    return SchemaConflictSet(
        _convert_items(_SET_ADAPTER.validate_python(data), SchemaConflictItem.from_wire)
    )


def parse_schema_conflicts(data: Any) -> SchemaConflicts:
    """Parse a ``[tool.uv] conflicts`` value into ``SchemaConflicts``."""
    return _to_schema_conflicts(_SETS_ADAPTER.validate_python(data))


def parse_schema_conflicts_json(text: str | bytes) -> SchemaConflicts:
    return _to_schema_conflicts(_SETS_ADAPTER.validate_json(text))


# ---------------------------------------------------------------------------
# Model -> wire
#
# Both forms dump the same way; absent fields are left out rather than
# written as null.
# ---------------------------------------------------------------------------


def dump_conflict_item(item: ConflictItem | SchemaConflictItem) -> dict[str, str]:
    return item.to_wire().to_data()


def dump_conflict_set(
    conflict_set: Iterable[ConflictItem] | Iterable[SchemaConflictItem],
) -> list[dict[str, str]]:
    return [dump_conflict_item(item) for item in conflict_set]


def dump_conflicts(conflicts: Conflicts | SchemaConflicts) -> list[list[dict[str, str]]]:
    return [dump_conflict_set(conflict_set) for conflict_set in conflicts]


def dump_conflicts_json(conflicts: Conflicts | SchemaConflicts, indent: int | None = None) -> str:
    wire_sets = [[item.to_wire() for item in conflict_set] for conflict_set in conflicts]
    return _SETS_ADAPTER.dump_json(wire_sets, indent=indent, exclude_none=True).decode()


def schema_conflicts_json_schema() -> dict[str, Any]:
    """JSON Schema for the ``[tool.uv] conflicts`` declaration format."""
    return _DECLARATION_ADAPTER.json_schema()
