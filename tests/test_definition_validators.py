"""Tests for value-set validation at definition time."""

import pytest

from typedenum import BadFormatError, EmptyValueSetError, InvalidDefinitionError, build
from typedenum.core.validators import (
    detect_storage_kind,
    is_code,
    is_tag_name,
    normalize_value_set,
    validate_value_set,
)
from typedenum.models.enums import StorageKind


class TestTagNamesAndCodes:
    """Test the primitive shape checks."""

    def test_identifiers_are_tag_names(self):
        """Test plain identifiers are accepted as tag names."""
        assert is_tag_name("open")
        assert is_tag_name("val_1")
        assert is_tag_name("Closed")

    def test_non_identifiers_are_rejected(self):
        """Test non-identifier values are not tag names."""
        assert not is_tag_name("")
        assert not is_tag_name("1abc")
        assert not is_tag_name("has space")
        assert not is_tag_name("_private")
        assert not is_tag_name("class")
        assert not is_tag_name("mro")
        assert not is_tag_name(1)
        assert not is_tag_name(None)

    def test_bool_is_not_a_code(self):
        """Test ints are codes but bools are not."""
        assert is_code(0)
        assert is_code(-3)
        assert not is_code(True)
        assert not is_code(1.0)
        assert not is_code("1")


class TestValueSetShape:
    """Test variant detection and flattening."""

    def test_mapping_becomes_pairs(self):
        """Test a mapping is flattened to (name, code) pairs in order."""
        assert normalize_value_set("X", {"b": 2, "a": 1}) == [("b", 2), ("a", 1)]

    def test_non_sequence_rejected(self):
        """Test a bare string or set is not a value set."""
        with pytest.raises(BadFormatError, match="must be a list, tuple or mapping"):
            normalize_value_set("X", "open")

        with pytest.raises(BadFormatError):
            normalize_value_set("X", {"open", "closed"})

    def test_detects_storage_kind_from_first_entry(self):
        """Test pairs select integer storage and names select string storage."""
        assert detect_storage_kind([("a", 1)]) == StorageKind.INTEGER
        assert detect_storage_kind(["a"]) == StorageKind.STRING

    def test_validate_returns_kind_and_entries(self):
        """Test a valid set returns its kind and entries."""
        kind, entries = validate_value_set("X", ("a", "b"))
        assert kind == StorageKind.STRING
        assert entries == ["a", "b"]


class TestEmptyValueSets:
    """Test empty value sets fail generation."""

    @pytest.mark.parametrize("values", [[], (), {}])
    def test_empty_fails(self, values):
        """Test every empty container raises EmptyValueSetError."""
        with pytest.raises(EmptyValueSetError, match="at least 1 element"):
            build("Empty", values)

    def test_empty_error_is_definition_error(self):
        """Test the empty error is an InvalidDefinitionError and a ValueError."""
        with pytest.raises(InvalidDefinitionError) as exc_info:
            build("Empty", [])

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.code == "EMPTY_VALUE_SET"
        assert exc_info.value.details["name"] == "Empty"


class TestStringVariantFormat:
    """Test string-variant value set validation."""

    def test_mixed_shape_fails(self):
        """Test a name followed by an integer is rejected."""
        with pytest.raises(BadFormatError, match="is not a valid tag name"):
            build("Mixed", ["a", 1])

    def test_pair_after_name_fails(self):
        """Test a pair inside a string-variant set is rejected."""
        with pytest.raises(BadFormatError):
            build("Mixed", ["a", ("b", 1)])

    def test_duplicate_tag_fails(self):
        """Test a repeated name is rejected."""
        with pytest.raises(BadFormatError, match="declared more than once"):
            build("Dup", ["a", "b", "a"])

    @pytest.mark.parametrize("values", [["open", "mro"], [("mro", 1)]])
    def test_reserved_enum_name_fails(self, values):
        """Test a name enum reserves fails as BadFormatError, not a bare ValueError."""
        with pytest.raises(BadFormatError, match="mro"):
            build("Reserved", values)

    def test_message_describes_expected_shape(self):
        """Test the error message describes the accepted value-set shapes."""
        with pytest.raises(BadFormatError) as exc_info:
            build("Mixed", ["a", 1])

        assert "list of names for the string version" in exc_info.value.message
        assert exc_info.value.offending == 1


class TestIntegerVariantFormat:
    """Test integer-variant value set validation."""

    def test_duplicate_tag_fails(self):
        """Test two pairs with the same tag are rejected."""
        with pytest.raises(BadFormatError, match="tag 'a' is declared more than once"):
            build("Dup", [("a", 1), ("a", 2)])

    def test_duplicate_code_fails(self):
        """Test two pairs with the same code are rejected."""
        with pytest.raises(BadFormatError, match="code 1 is declared more than once"):
            build("Dup", [("a", 1), ("b", 1)])

    def test_non_integer_code_fails(self):
        """Test string, float and bool codes are rejected."""
        for code in ("1", 1.5, True):
            with pytest.raises(BadFormatError, match="is not a \\(tag name, integer\\) pair"):
                build("BadCode", [("a", code)])

    def test_name_after_pair_fails(self):
        """Test a bare name inside an integer-variant set is rejected."""
        with pytest.raises(BadFormatError):
            build("Mixed", [("a", 1), "b"])

    def test_invalid_tag_in_pair_fails(self):
        """Test a pair whose tag is not a name is rejected."""
        with pytest.raises(BadFormatError):
            build("BadTag", [(1, 1)])


class TestTypeName:
    """Test type name validation."""

    def test_invalid_type_name_fails(self):
        """Test type names must be identifiers."""
        with pytest.raises(BadFormatError, match="type name"):
            build("not valid", ["a"])

        with pytest.raises(BadFormatError, match="type name"):
            build(None, ["a"])

    def test_overrides_must_be_overrides_instance(self):
        """Test passing something other than Overrides is rejected."""
        with pytest.raises(BadFormatError, match="Overrides instance"):
            build("Bad", ["a"], overrides=[lambda v, t: v])
