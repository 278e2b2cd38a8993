"""
Tests for the lookup helpers.
"""

from classbuilder.modifiers import Modifier
from classbuilder.utils import contains, find_value


class TestFindValue:
    """Test find_value."""

    def test_found_returns_value_and_index(self):
        """Should return the matched value and its position."""
        assert find_value([5, 8, 30], 8) == (8, 1)

    def test_first_match_wins(self):
        """Should report the first of several equal items."""
        assert find_value(["a", "b", "a"], "a") == ("a", 0)

    def test_missing_returns_none_pair(self):
        """Should return (None, None) when absent."""
        assert find_value([1, 2, 3], 4) == (None, None)

    def test_empty_collection(self):
        """Should handle empty collections."""
        assert find_value((), "x") == (None, None)

    def test_falsy_target_is_found(self):
        """A falsy target is still located by index."""
        value, index = find_value([1, 0, 2], 0)
        assert value == 0
        assert index == 1

    def test_modifier_lookup(self):
        """Should find enum members by identity/equality."""
        mods = (Modifier.PRIVATE, Modifier.STATIC)
        assert find_value(mods, Modifier.STATIC) == (Modifier.STATIC, 1)

    def test_string_is_not_a_modifier(self):
        """User strings never match modifier tokens."""
        assert find_value(("static",), Modifier.STATIC) == (None, None)


class TestContains:
    """Test contains."""

    def test_contains(self):
        assert contains(["name", "call"], "call")

    def test_not_contains(self):
        assert not contains(["name", "call"], "temp")

    def test_contains_falsy(self):
        """Falsy members are still reported present."""
        assert contains([None, 0], 0)
