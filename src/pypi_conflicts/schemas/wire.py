"""Pydantic schema for the serialized shape of a single conflicting entry."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pypi_conflicts.models.names import ExtraName, GroupName, PackageName


class ConflictItemWire(BaseModel):
    """One ``{package?, extra?, group?}`` record.

    Accepts any combination of fields. Whether the combination is valid
    depends on what the record is converted into, so the checks live in
    ``ConflictItem.from_wire`` and ``SchemaConflictItem.from_wire``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    package: PackageName | None = None
    extra: ExtraName | None = None
    group: GroupName | None = None

    def to_data(self) -> dict[str, str]:
        """Dump to plain data, omitting absent fields."""
        return self.model_dump(mode="json", exclude_none=True)
