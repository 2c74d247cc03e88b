"""Tests for the normalized package, extra and group name types."""

import pytest
from pydantic import TypeAdapter, ValidationError

from pypi_conflicts.models.names import ExtraName, GroupName, PackageName


class TestNormalization:
    def test_lowercases(self):
        assert PackageName("Django") == "django"

    def test_collapses_separators(self):
        assert ExtraName("Foo__bar.Baz") == "foo-bar-baz"

    def test_equal_spellings_hash_equal(self):
        assert hash(GroupName("Dev_Tools")) == hash(GroupName("dev-tools"))

    def test_type_is_preserved(self):
        assert type(PackageName("a")) is PackageName
        assert isinstance(ExtraName("a"), str)

    def test_repr_names_the_type(self):
        assert repr(GroupName("lint")) == "GroupName('lint')"

    def test_orders_like_strings(self):
        names = [PackageName("b"), PackageName("a"), PackageName("c")]
        assert sorted(names) == ["a", "b", "c"]


class TestValidation:
    @pytest.mark.parametrize("value", ["", "-foo", "foo-", "foo bar", "föö"])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError, match="Not a valid package name"):
            PackageName(value)

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            ExtraName(3)  # type: ignore[arg-type]

    def test_single_character(self):
        assert GroupName("x") == "x"


class TestPydantic:
    def test_validates_and_normalizes(self):
        value = TypeAdapter(PackageName).validate_python("My.Package")
        assert value == "my-package"
        assert isinstance(value, PackageName)

    def test_invalid_name_is_validation_error(self):
        with pytest.raises(ValidationError):
            TypeAdapter(ExtraName).validate_python("not valid")

    def test_non_string_is_validation_error(self):
        with pytest.raises(ValidationError):
            TypeAdapter(GroupName).validate_python(42)

    def test_serializes_as_string(self):
        assert TypeAdapter(PackageName).dump_python(PackageName("a_b"), mode="json") == "a-b"
