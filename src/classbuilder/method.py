"""
Method descriptors.

A method descriptor wraps a callable together with its modifiers so that
the definition surface can tell "register this as a method" apart from
"store this as a property value".

Example:
    static, private = get_modifiers()

    def Cake(cls):
        cls.announce = describe_method(static, lambda flavor: print(flavor))
        cls.bake = describe_method(lambda self, temp: setattr(self, "temp", temp))

IMPORTANT:
    describe_method does NOT validate its arguments.
    Validation happens when the class is assembled (see builder.py).
"""

from dataclasses import dataclass
from typing import Any, Tuple

from classbuilder.modifiers import Modifier
from classbuilder.utils import contains


class _MethodMarker:
    """Internal tag type. The single instance below is never exported."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<method marker>"


_METHOD_MARKER = _MethodMarker()


@dataclass(frozen=True)
class MethodDescriptor:
    """
    A callable plus the modifiers it was described with.

    Properties:
        marker: Internal tag proving the descriptor came from describe_method
        call: The real underlying callable
        modifiers: Modifier tokens, in the order they were given
    """

    marker: _MethodMarker
    call: Any
    modifiers: Tuple[Any, ...] = ()

    @property
    def is_static(self) -> bool:
        return contains(self.modifiers, Modifier.STATIC)

    @property
    def is_private(self) -> bool:
        return contains(self.modifiers, Modifier.PRIVATE)


def describe_method(*args: Any) -> MethodDescriptor:
    """
    Wrap a callable and its modifiers into a MethodDescriptor.

    All arguments but the last are modifiers; the last is the callable.

    Args:
        *args: Zero or more Modifier values followed by a callable

    Returns:
        MethodDescriptor ready to be assigned on a definition surface
    """
    if not args:
        return MethodDescriptor(marker=_METHOD_MARKER, call=None, modifiers=())
    return MethodDescriptor(marker=_METHOD_MARKER, call=args[-1], modifiers=tuple(args[:-1]))


def is_method_descriptor(value: Any) -> bool:
    """True only for descriptors produced by describe_method."""
    return isinstance(value, MethodDescriptor) and value.marker is _METHOD_MARKER
