"""Pydantic schema for the parts of pyproject.toml the conflicts loader reads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pypi_conflicts.models.names import PackageName


class UvTable(BaseModel):
    # Entries are checked by the conflicts codec, which reports set/entry positions.
    conflicts: list[Any] | None = None


class ToolTable(BaseModel):
    uv: UvTable = Field(default_factory=UvTable)


class ProjectTable(BaseModel):
    name: PackageName | None = None


class PyprojectDocument(BaseModel):
    """``[project]`` and ``[tool.uv]``; every other key is ignored."""

    project: ProjectTable = Field(default_factory=ProjectTable)
    tool: ToolTable = Field(default_factory=ToolTable)
