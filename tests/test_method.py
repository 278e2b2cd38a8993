"""
Tests for modifiers and method descriptors.
"""

from dataclasses import FrozenInstanceError

import pytest

from classbuilder.method import MethodDescriptor, describe_method, is_method_descriptor
from classbuilder.modifiers import Modifier, get_modifiers


def hello():
    return "hello"


class TestModifiers:
    """Test the modifier tokens."""

    def test_get_modifiers_order(self):
        """Should return (static, private)."""
        static, private = get_modifiers()
        assert static is Modifier.STATIC
        assert private is Modifier.PRIVATE

    def test_modifiers_are_distinct(self):
        static, private = get_modifiers()
        assert static is not private
        assert static != private

    def test_modifiers_never_equal_user_values(self):
        """Strings with the same spelling are not modifiers."""
        static, private = get_modifiers()
        assert static != "static"
        assert private != "private"


class TestDescribeMethod:
    """Test describe_method."""

    def test_callable_only(self):
        """A lone callable has no modifiers."""
        d = describe_method(hello)
        assert d.call is hello
        assert d.modifiers == ()
        assert not d.is_static
        assert not d.is_private

    def test_with_modifiers(self):
        """Modifiers are kept in the order given."""
        static, private = get_modifiers()
        d = describe_method(private, static, hello)
        assert d.modifiers == (private, static)
        assert d.is_static
        assert d.is_private

    def test_no_arguments(self):
        """No arguments produces an empty, non-callable descriptor."""
        d = describe_method()
        assert d.call is None
        assert d.modifiers == ()

    def test_modifier_without_callable_is_not_validated_here(self):
        """Malformed input is only rejected at assembly time."""
        static, _ = get_modifiers()
        d = describe_method(static)
        assert d.call is static
        assert d.modifiers == ()

    def test_descriptor_is_immutable(self):
        d = describe_method(hello)
        with pytest.raises(FrozenInstanceError):
            d.call = None


class TestIsMethodDescriptor:
    """Test descriptor detection."""

    def test_described_method(self):
        assert is_method_descriptor(describe_method(hello))

    def test_plain_values(self):
        """Ordinary values are never descriptors."""
        assert not is_method_descriptor(hello)
        assert not is_method_descriptor({"marker": None, "call": hello, "modifiers": []})
        assert not is_method_descriptor(None)

    def test_forged_descriptor(self):
        """A MethodDescriptor built without the internal marker is rejected."""
        forged = MethodDescriptor(marker=object(), call=hello)
        assert not is_method_descriptor(forged)
