"""
Method modifiers for class definitions.

Defines the two modifier tokens a method can carry:

    STATIC  - callable directly on the class record
    PRIVATE - callable only through the definition surface

ARCHITECTURAL RULE:
    Modifiers only decide WHO may reach a method.
    They never change what the method does.
"""

from enum import Enum
from typing import Tuple


class Modifier(Enum):
    """
    Closed set of method modifiers.

    Members are singletons and compare by identity, so no user-authored
    value (e.g. the string "static") is ever mistaken for one.
    """

    STATIC = "static"
    PRIVATE = "private"


def get_modifiers() -> Tuple[Modifier, Modifier]:
    """
    Return the modifiers that can be passed to describe_method.

    Example:
        static, private = get_modifiers()
    """
    return Modifier.STATIC, Modifier.PRIVATE
