"""
Ordering helpers for dependency resolution.
"""

from typing import Callable, Hashable, Iterable, List, Optional, TypeVar

T = TypeVar("T")


def dedupe_preserving_order(
    items: Iterable[T], key: Optional[Callable[[T], Hashable]] = None
) -> List[T]:
    """Remove duplicates, keeping each item at its first position.

    This is a stable set-reduction, not a re-sort: the relative order of
    the surviving items is the order in which they first appeared.

    Args:
        items: Items to deduplicate.
        key: Optional function computing the identity of an item.
            Defaults to the item itself.

    Returns:
        List of unique items in first-occurrence order.

    Example:
        >>> dedupe_preserving_order(["b", "a", "b", "d"])
        ['b', 'a', 'd']
    """
    seen = set()
    unique: List[T] = []
    for item in items:
        marker = key(item) if key else item
        if marker not in seen:
            seen.add(marker)
            unique.append(item)
    return unique
