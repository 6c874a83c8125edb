"""Sequence helpers: safe access, chunking, grouping, dedup and sampling.

Read-only helpers accept any `Sequence` and return new lists. The mutating
helpers (`remove_duplicates`, `remove`, `safe_remove_first`,
`safe_remove_items`) change the caller's list in place.

Safe access never raises for a bad index: it returns `None`. Negative indexes
are treated as out of bounds rather than counted from the end.

Deduplication:
    `removing_duplicates` goes through a `set` by default, so the output order
    is not guaranteed to match the input. Pass ``stable=True`` to keep the first
    occurrence of every element in input order instead.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
K = TypeVar("K", bound=Hashable)


# ============================================================================
#                           Safe access
# ============================================================================


def is_not_empty(items: Sequence[T]) -> bool:
    return len(items) > 0


def safe_index(items: Sequence[T], index: int) -> bool:
    """Return True if `index` addresses an element (``0 <= index < len``)."""
    return 0 <= index < len(items)


def get(items: Sequence[T], index: int) -> T | None:
    """Return the element at `index`, or `None` when out of bounds.

    Example:
        ```py
        >>> get([10, 20, 30], 1)
        20
        >>> get([10, 20, 30], 5) is None
        True
        ```
    """
    return items[index] if safe_index(items, index) else None


def first_elements(items: Sequence[T], count: int) -> list[T]:
    """Return up to `count` elements from the front."""
    if count <= 0:
        return []
    return list(items[:count])


def last_elements(items: Sequence[T], count: int) -> list[T]:
    """Return up to `count` elements from the back."""
    if count <= 0:
        return []
    return list(items[-count:])


def first_where_not(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first element for which `predicate` is false, else `None`."""
    for item in items:
        if not predicate(item):
            return item
    return None


def count_where(items: Iterable[T], predicate: Callable[[T], bool]) -> int:
    return sum(1 for item in items if predicate(item))


# ============================================================================
#                           Splitting & grouping
# ============================================================================


def chunked(items: Sequence[T], size: int) -> list[list[T]]:
    """Split into consecutive chunks of at most `size` elements.

    Order is preserved and only the last chunk may be shorter. A non-positive
    `size` yields an empty list.

    Example:
        ```py
        >>> chunked([1, 2, 3, 4, 5, 6, 7], 3)
        [[1, 2, 3], [4, 5, 6], [7]]
        ```
    """
    if size <= 0:
        return []
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


def grouped(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group elements by ``key(element)``.

    Within each group, elements keep the order in which they were seen.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


group_by = grouped


# ============================================================================
#                           Equality based helpers
# ============================================================================


def removing_duplicates(items: Iterable[H], *, stable: bool = False) -> list[H]:
    """Return the unique elements of `items`.

    Args:
        items: Hashable elements.
        stable: Keep first occurrences in input order. When False (default)
            the result comes from a `set` and its order is unspecified.
    """
    if not stable:
        return list(set(items))
    seen: set[H] = set()
    result: list[H] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def remove_duplicates(items: list[H], *, stable: bool = False) -> None:
    """In-place counterpart of `removing_duplicates`."""
    items[:] = removing_duplicates(items, stable=stable)


def indexes(items: Iterable[T], element: T) -> list[int]:
    """Return every position holding a value equal to `element`, ascending."""
    return [index for index, item in enumerate(items) if item == element]


def remove(items: list[T], element: T) -> None:
    """Remove all occurrences of `element` in place."""
    items[:] = [item for item in items if item != element]


# ============================================================================
#                           Mutating removal
# ============================================================================


def safe_remove_first(items: list[T]) -> T | None:
    """Pop and return the first element, or `None` if the list is empty."""
    return items.pop(0) if items else None


def safe_remove_items(items: list[T], count: int) -> list[T]:
    """Pop and return up to `count` leading elements.

    Fewer are returned when the list is shorter; a non-positive `count`
    returns an empty list and leaves `items` untouched.
    """
    if count <= 0:
        return []
    removed = items[:count]
    del items[:count]
    return removed


# ============================================================================
#                           Sampling
# ============================================================================


def random_elements(
    items: Sequence[T], count: int, rng: random.Random | None = None
) -> list[T]:
    """Sample `count` elements without replacement.

    The whole sequence is shuffled (on a copy) and a prefix is taken, so a
    `count` larger than the sequence returns a shuffled copy of everything.
    """
    shuffled = list(items)
    (rng if rng is not None else random).shuffle(shuffled)
    return shuffled[: max(count, 0)]
