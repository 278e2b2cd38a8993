"""
Lookup helpers shared by the class builder.

Kept tiny on purpose: the builder only ever searches small, fixed-size
collections (modifier lists, reserved names).
"""

from typing import Any, Iterable, Optional, Tuple


def find_value(collection: Iterable[Any], target: Any) -> Tuple[Optional[Any], Optional[int]]:
    """
    Search a collection for a value.

    Args:
        collection: Any iterable (list, tuple, set, ...)
        target: Value to look for (compared with ==)

    Returns:
        (value, index) for the first match, where index is the zero-based
        position in iteration order, or (None, None) if not present.

    Example:
        >>> find_value([5, 8, 30], 8)
        (8, 1)
    """
    for index, item in enumerate(collection):
        if item == target:
            return item, index
    return None, None


def contains(collection: Iterable[Any], target: Any) -> bool:
    """True if find_value locates target in collection."""
    _, index = find_value(collection, target)
    return index is not None
