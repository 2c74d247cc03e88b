"""Normalized identifier types for packages, extras and dependency groups.

All three follow the PEP 508 naming rules and are stored in their PEP 503
normalized form (lowercase, runs of ``-``, ``_`` and ``.`` collapsed to a
single ``-``), so ``Foo_Bar`` and ``foo-bar`` are the same name.
"""

from __future__ import annotations

import re
from typing import Any

from packaging.utils import canonicalize_name
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

_NAME_RE = re.compile(r"^([A-Z0-9]|[A-Z0-9][A-Z0-9._-]*[A-Z0-9])$", re.IGNORECASE)


class _Name(str):
    """Base for the normalized name types. Instances are plain strings."""

    __slots__ = ()

    _label = "name"

    def __new__(cls, value: str) -> _Name:
        if not isinstance(value, str):
            raise TypeError(f"{cls.__name__} must be a string, not {type(value).__name__}")
        if not _NAME_RE.match(value):
            raise ValueError(f"Not a valid {cls._label}: {value!r}")
        return super().__new__(cls, canonicalize_name(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )


class PackageName(_Name):
    __slots__ = ()
    _label = "package name"


class ExtraName(_Name):
    __slots__ = ()
    _label = "extra name"


class GroupName(_Name):
    __slots__ = ()
    _label = "group name"
