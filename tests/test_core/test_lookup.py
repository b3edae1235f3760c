"""
Tests for lookup.py module.
"""
import pytest

from stockslot.core.exceptions import ValidationError
from stockslot.core.lookup import ById, ByName, to_key


class TestToKey:
    """Test cases for lookup key normalization."""

    def test_int_becomes_by_id(self):
        assert to_key(102) == ById(102)

    def test_str_becomes_by_name(self):
        assert to_key("Mouse") == ByName("Mouse")

    def test_keys_pass_through(self):
        key = ByName("Monitor")
        assert to_key(key) is key
        assert to_key(ById(5)) == ById(5)

    @pytest.mark.parametrize("value", [True, 1.5, None, ["Mouse"]])
    def test_rejects_other_types(self, value):
        with pytest.raises(ValidationError):
            to_key(value)

    @pytest.mark.parametrize("key, message", [
        (ByName(5), "ByName key needs a str name"),
        (ById("1"), "ById key needs an int identifier"),
        (ById(True), "ById key needs an int identifier"),
    ])
    def test_rejects_mistyped_key_payloads(self, key, message):
        with pytest.raises(ValidationError, match=message):
            to_key(key)

    def test_by_name_key_is_lowercase(self):
        assert ByName("MoNiToR").name_key == "monitor"

    def test_keys_are_hashable_and_comparable(self):
        """Test keys can be used in sets and compared by value."""
        keys = {ById(1), ById(1), ByName("a")}
        assert len(keys) == 2
        assert ById(1) != ByName("1")

    def test_str(self):
        assert str(ById(7)) == "ID 7"
        assert str(ByName("Mouse")) == "name 'Mouse'"
