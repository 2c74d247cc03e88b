from pathlib import Path

import pytest

from pypi_conflicts.models.conflict import ConflictItem
from pypi_conflicts.models.names import ExtraName, GroupName, PackageName


@pytest.fixture
def extra_item():
    def _make(package: str = "pkg", extra: str = "x") -> ConflictItem:
        return ConflictItem.from_extra(PackageName(package), ExtraName(extra))

    return _make


@pytest.fixture
def group_item():
    def _make(package: str = "pkg", group: str = "dev") -> ConflictItem:
        return ConflictItem.from_group(PackageName(package), GroupName(group))

    return _make


@pytest.fixture
def write_pyproject(tmp_path):
    def _write(body: str, name: str = "pyproject.toml") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write
