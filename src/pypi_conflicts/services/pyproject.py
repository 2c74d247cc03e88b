"""Read the conflicts a project declares under ``[tool.uv]`` in its pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pypi_conflicts.models.conflict import Conflicts
from pypi_conflicts.models.names import PackageName
from pypi_conflicts.models.schema import SchemaConflicts
from pypi_conflicts.schemas.pyproject import PyprojectDocument
from pypi_conflicts.services.codec import parse_schema_conflicts

logger = logging.getLogger(__name__)

# Stands in for the project name when every entry names its own package.
_UNUSED_PACKAGE = PackageName("unused")


def _has_unqualified_entries(schema_conflicts: SchemaConflicts) -> bool:
    return any(
        item.package is None for schema_set in schema_conflicts for item in schema_set
    )


def load_pyproject_conflicts(path: Path, package: PackageName | None = None) -> Conflicts:
    """Load and resolve the conflicts declared in ``path``.

    Entries without a package are attributed to ``package``, or to the
    ``[project]`` name when no package is given; the name is only required if
    such entries exist. Raises ``ValueError`` (or one of its subclasses) when
    the document or the declaration is invalid.
    """
    with path.open("rb") as fh:
        raw = tomllib.load(fh)

    try:
        document = PyprojectDocument.model_validate(raw)
    except ValueError as exc:
        exc.add_note(f"while reading {path}")
        raise

    declared = document.tool.uv.conflicts
    if declared is None:
        logger.debug("No conflicts declared in %s", path)
        return Conflicts.empty()

    try:
        schema_conflicts = parse_schema_conflicts(declared)
    except ValueError as exc:
        exc.add_note(f"while reading `tool.uv.conflicts` in {path}")
        raise

    package = package or document.project.name
    if package is None:
        if _has_unqualified_entries(schema_conflicts):
            raise ValueError(
                f"{path} declares conflicts without a package but has no `project.name`"
            )
        package = _UNUSED_PACKAGE

    conflicts = schema_conflicts.to_conflicts_with_package_name(package)
    logger.info("Loaded %d conflicting sets from %s", len(conflicts), path)
    return conflicts
