from __future__ import annotations

from typing import Protocol


class AssignmentStrategy(Protocol):
    def next_index(self, *, collection_size: int, roster_size: int) -> int:
        ...


class CollectionSizeRoundRobin:
    """Pick the roster slot from the collection size at call time.

    Deleting tickets shifts the rotation; two consecutive calls with an
    unchanged collection pick the same employee.
    """

    def next_index(self, *, collection_size: int, roster_size: int) -> int:
        return collection_size % roster_size


class CounterRoundRobin:
    """Rotate through the roster with a counter independent of the collection."""

    def __init__(self, start: int = 0) -> None:
        self._counter = start

    @property
    def counter(self) -> int:
        return self._counter

    def next_index(self, *, collection_size: int, roster_size: int) -> int:
        index = self._counter % roster_size
        self._counter += 1
        return index
