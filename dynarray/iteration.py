"""
Collection Iteration for dynarray.

Two pieces:
    Cursor       — lazy, restartable traversal over an indexed container
    Traversable  — mixin of collection helpers built on for_each()

Anything that provides ``length`` and ``at(index)`` can be walked by a
Cursor. Anything that provides ``for_each`` can mix in Traversable.
Every helper visits elements in strictly ascending index order.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional, Protocol

from .validation import EmptySequenceError


_MISSING = object()


class Indexed(Protocol):
    """Minimal surface a Cursor needs."""

    @property
    def length(self) -> int: ...

    def at(self, index: int) -> Any: ...


# =============================================================================
# CURSOR
# =============================================================================

class Cursor:
    """
    Position-holding iterator over an Indexed container.

    Each call to ``for_each()`` without an action builds a new Cursor,
    so traversals never share state. The container's length is read
    on every step; a cursor reflects mutations made while it is live.
    """

    __slots__ = ("_source", "_position")

    def __init__(self, source: Indexed, position: int = 0):
        self._source = source
        self._position = position

    @property
    def position(self) -> int:
        """Index of the next element this cursor will yield."""
        return self._position

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> Any:
        if self._position >= self._source.length:
            raise StopIteration
        value = self._source.at(self._position)
        self._position += 1
        return value

    def peek(self) -> Any:
        """Next element without advancing. StopIteration at the end."""
        if self._position >= self._source.length:
            raise StopIteration
        return self._source.at(self._position)

    def rewind(self) -> Cursor:
        """Reset to the first element."""
        self._position = 0
        return self

    def with_index(self) -> Iterator[tuple[Any, int]]:
        """Yield (element, index) pairs from the current position."""
        while self._position < self._source.length:
            index = self._position
            yield next(self), index

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={self._source.length})"


# =============================================================================
# TRAVERSABLE MIXIN
# =============================================================================

class Traversable:
    """
    Collection helpers for any class that defines ``for_each``.

    ``for_each(action)`` must call action once per element in order;
    ``for_each()`` must return an iterator over the same elements.
    Subclasses may override ``_spawn`` to control what map/select/reject
    return; by default they return plain lists.
    """

    def for_each(self, action: Optional[Callable[[Any], Any]] = None):
        raise NotImplementedError

    def _spawn(self, items: Iterable[Any]):
        return list(items)

    def each_with_index(self, action: Callable[[Any, int], Any]):
        """Call action(element, index) for each element. Returns self."""
        for index, element in enumerate(self.for_each()):
            action(element, index)
        return self

    def map(self, fn: Callable[[Any], Any]):
        collected = []
        self.for_each(lambda element: collected.append(fn(element)))
        return self._spawn(collected)

    def select(self, predicate: Callable[[Any], bool]):
        """Elements for which predicate is truthy, in order."""
        collected = []
        self.for_each(
            lambda element: collected.append(element) if predicate(element) else None
        )
        return self._spawn(collected)

    def reject(self, predicate: Callable[[Any], bool]):
        """Elements for which predicate is falsy, in order."""
        return self.select(lambda element: not predicate(element))

    def find(self, predicate: Callable[[Any], bool], default: Any = None) -> Any:
        """First element matching predicate, or default."""
        for element in self.for_each():
            if predicate(element):
                return element
        return default

    def find_index(self, predicate: Callable[[Any], bool]) -> Optional[int]:
        """Index of the first element matching predicate, or None."""
        for index, element in enumerate(self.for_each()):
            if predicate(element):
                return index
        return None

    def include(self, value: Any) -> bool:
        return self.find_index(lambda element: element == value) is not None

    def count(self, value: Any = _MISSING) -> int:
        """Number of elements, or number equal to value when one is given."""
        total = 0
        for element in self.for_each():
            if value is _MISSING or element == value:
                total += 1
        return total

    def reduce(self, fn: Callable[[Any, Any], Any], initial: Any = _MISSING) -> Any:
        """
        Fold elements left to right.

        Without an initial value the first element seeds the fold.

        Raises:
            EmptySequenceError: If empty and no initial value is given
        """
        cursor = self.for_each()
        if initial is _MISSING:
            try:
                accumulator = next(cursor)
            except StopIteration:
                raise EmptySequenceError(
                    "reduce", "cannot reduce an empty sequence without an initial value"
                ) from None
        else:
            accumulator = initial
        for element in cursor:
            accumulator = fn(accumulator, element)
        return accumulator

    def first(self, n: Optional[int] = None) -> Any:
        """
        First element, or a list of the first n elements.

        Returns None for an empty sequence when n is omitted.
        """
        cursor = self.for_each()
        if n is None:
            return next(cursor, None)
        taken = []
        for element in cursor:
            if len(taken) >= n:
                break
            taken.append(element)
        return taken

    def min_by(self, key: Callable[[Any], Any]) -> Any:
        return self._extreme_by(key, lambda candidate, best: candidate < best)

    def max_by(self, key: Callable[[Any], Any]) -> Any:
        return self._extreme_by(key, lambda candidate, best: candidate > best)

    def _extreme_by(self, key, better) -> Any:
        # Ties keep the earliest element
        best = _MISSING
        best_key = None
        for element in self.for_each():
            element_key = key(element)
            if best is _MISSING or better(element_key, best_key):
                best, best_key = element, element_key
        return None if best is _MISSING else best

    def to_list(self) -> list:
        return list(self.for_each())
