"""Intersection records and ordered intersection sets.

An Intersection pairs a ray parameter t with the object that was hit. An
Intersections set collects the records for one ray against one or more
objects, keeps them sortable by t, and selects the visible hit.

The hit is the intersection with the smallest non-negative t. Records with
t < 0 lie behind the ray origin and are never selected. Ties keep the
earlier record, so selection is stable with respect to insertion order.

All t values must be comparable. A NaN t comes from invalid ray input and
makes ordering raise ValueError rather than silently misorder the set.

Example:
    >>> from phongtrace.geometry.intersection import Intersection, Intersections
    >>> from phongtrace.geometry.sphere import Sphere
    >>> s = Sphere()
    >>> xs = Intersections([Intersection(5.0, s), Intersection(-3.0, s), Intersection(2.0, s)])
    >>> xs.hit().t
    2.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from phongtrace.geometry.sphere import Sphere


@dataclass(frozen=True)
class Intersection:
    """A single ray-object intersection.

    Attributes:
        t: The ray parameter at the intersection.
        object: The sphere that was hit (compared by identity).
    """

    t: float
    object: Sphere


def _check_comparable(items: Iterable[Intersection]) -> None:
    for item in items:
        if math.isnan(item.t):
            raise ValueError("Tried to compare intersection with NaN t")


class Intersections:
    """An ordered collection of intersections for one ray."""

    def __init__(self, items: Iterable[Intersection] = ()) -> None:
        self._items: list[Intersection] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> Intersection: ...

    @overload
    def __getitem__(self, index: slice) -> list[Intersection]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        ts = ", ".join(repr(item.t) for item in self._items)
        return f"Intersections([{ts}])"

    def append(self, intersection: Intersection) -> None:
        self._items.append(intersection)

    def extend(self, other: Iterable[Intersection]) -> None:
        """Merge intersections from another object. No deduplication."""
        self._items.extend(other)

    def sort_by_t(self) -> None:
        """Sort ascending by t in place. The sort is stable.

        Raises:
            ValueError: If any t is NaN.
        """
        _check_comparable(self._items)
        self._items.sort(key=lambda item: item.t)

    def hit(self) -> Intersection | None:
        """Select the intersection with the smallest non-negative t.

        Returns:
            The visible intersection, or None if the set is empty or every
            t is negative.

        Raises:
            ValueError: If any t is NaN.
        """
        _check_comparable(self._items)
        best: Intersection | None = None
        for item in self._items:
            if item.t >= 0.0 and (best is None or item.t < best.t):
                best = item
        return best
