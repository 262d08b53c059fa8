"""
Tests for the Variable Bag
"""

import pytest

from plan_compiler.orchestration.variables import VariableBag


class TestVariableBag:
    """Tests for VariableBag"""

    def test_keys_are_case_insensitive(self):
        bag = VariableBag()
        bag["Input"] = "a"
        assert bag["input"] == "a"
        assert "INPUT" in bag

    def test_overwrite_keeps_first_spelling_and_position(self):
        bag = VariableBag({"input": "a", "language": "en"})
        bag["INPUT"] = "b"
        assert list(bag) == ["input", "language"]
        assert bag.to_dict() == {"input": "b", "language": "en"}

    def test_set_none_removes(self):
        bag = VariableBag(input="a")
        bag.set("input", None)
        bag.set("missing", None)
        assert len(bag) == 0

    def test_equality_and_copy(self):
        bag = VariableBag({"a": "1", "b": "2"})
        clone = bag.copy()
        assert clone == bag
        clone["a"] = "changed"
        assert bag["a"] == "1"
        assert clone != bag

    def test_values_are_strings(self):
        bag = VariableBag()
        bag["count"] = 3
        assert bag["count"] == "3"

    def test_freeze_returns_read_only_copy(self):
        bag = VariableBag(input="a")
        frozen = bag.freeze()
        assert frozen.read_only
        assert frozen == bag
        with pytest.raises(TypeError):
            frozen["input"] = "b"
        with pytest.raises(TypeError):
            del frozen["input"]
        bag["input"] = "b"
        assert frozen["input"] == "a"

    def test_copy_of_frozen_is_writable(self):
        clone = VariableBag(input="a").freeze().copy()
        clone["input"] = "b"
        assert not clone.read_only
        assert clone["input"] == "b"
