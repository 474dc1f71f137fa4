"""
Dynamic Sequence Container for dynarray.

DynamicArray is a growable, index-addressable sequence written by hand
on top of a SparseStore. It tracks its own logical length rather than
asking the store, which lets it represent gap slots that read as the
default value without occupying an entry.

Costs:
    at / set_at / push_back / pop_back      — O(1)
    push_front / pop_front / insert / remove — O(n), every later element moves
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Union

from .iteration import Cursor, Traversable
from .log import get_logger
from .store import SparseStore
from .validation import (
    EmptySequenceError,
    InvalidIndexError,
    SequenceError,
    UnderflowPolicy,
    in_range,
    resolve_underflow_policy,
    validate_read_index,
    validate_write_index,
)

logger = get_logger("sequence")

__all__ = [
    "DynamicArray",
    "EmptySequenceError",
    "InvalidIndexError",
    "SequenceError",
]


class DynamicArray(Traversable):
    """
    Mutable ordered sequence over a sparse index -> value store.

    Invariants:
    1. length >= 0
    2. no store entry exists at an index >= length
    3. at(i) for a slot never written (or out of range) returns default
    """

    def __init__(
        self,
        source: Optional[Iterable[Any]] = None,
        *,
        default: Any = None,
        underflow: Optional[Union[UnderflowPolicy, str]] = None,
    ):
        self._store = SparseStore(default)
        self._length = 0
        self._underflow = resolve_underflow_policy(underflow)

        if source is not None:
            for element in source:
                self._store.put(self._length, element)
                self._length += 1

    @classmethod
    def of(cls, *items: Any, **options: Any) -> DynamicArray:
        """Build a sequence from positional elements."""
        return cls(items, **options)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Logical element count, gap slots included."""
        return self._length

    @property
    def occupancy(self) -> int:
        """Explicit entries in the backing store."""
        return self._store.occupancy

    @property
    def default(self) -> Any:
        return self._store.default

    @property
    def underflow(self) -> UnderflowPolicy:
        return self._underflow

    # -------------------------------------------------------------------------
    # Indexed access
    # -------------------------------------------------------------------------

    def at(self, index: int) -> Any:
        """
        Element at index, or the default value.

        Negative and out-of-range indices are not errors; they read as
        the default just like a gap slot does.
        """
        validate_read_index(index, "at")
        if not in_range(index, self._length):
            return self._store.default
        return self._store.get(index)

    def set_at(self, index: int, value: Any) -> Any:
        """
        Write value at index and return it.

        Writing past the end grows the sequence: every slot between the
        old length and index becomes a gap that reads as the default.
        Length never shrinks here.
        """
        validate_write_index(index, "set_at")
        if index > self._length:
            logger.debug(
                "set_at(%d) past length %d, filling %d gap slot(s)",
                index, self._length, index - self._length,
            )
            self._length = index
        self._store.put(index, value)
        if index == self._length:
            self._length += 1
        return value

    # -------------------------------------------------------------------------
    # Tail operations
    # -------------------------------------------------------------------------

    def push_back(self, value: Any) -> DynamicArray:
        """Append value. Returns self for chaining."""
        self._store.put(self._length, value)
        self._length += 1
        return self

    append = push_back

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._length == 0:
            return self._handle_underflow("pop_back")
        last = self._length - 1
        value = self._store.get(last)
        self._store.discard(last)
        self._length = last
        return value

    # -------------------------------------------------------------------------
    # Head and interior operations
    # -------------------------------------------------------------------------

    def push_front(self, value: Any) -> DynamicArray:
        """Prepend value, shifting every element one slot toward the tail."""
        self._open_slot(0)
        self._store.put(0, value)
        return self

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._length == 0:
            return self._handle_underflow("pop_front")
        value = self._store.get(0)
        self._close_slot(0)
        return value

    def insert(self, index: int, value: Any) -> DynamicArray:
        """
        Insert value before the element currently at index.

        At or past the end this is a plain set_at.
        """
        validate_write_index(index, "insert")
        if index >= self._length:
            self.set_at(index, value)
            return self
        self._open_slot(index)
        self._store.put(index, value)
        return self

    def delete_at(self, index: int) -> Any:
        """Remove and return the element at index; default if out of range."""
        validate_read_index(index, "delete_at")
        if not in_range(index, self._length):
            return self._store.default
        value = self._store.get(index)
        self._close_slot(index)
        return value

    def remove(self, value: Any) -> Any:
        """
        Remove the first element equal to value and return it.

        Returns the default value, leaving the sequence untouched, when
        nothing matches.
        """
        for element, index in self.for_each().with_index():
            if element == value:
                self._close_slot(index)
                return element
        return self._store.default

    def clear(self) -> DynamicArray:
        self._store.clear()
        self._length = 0
        return self

    def _open_slot(self, index: int) -> None:
        # Walk backward from the tail so no unread slot is overwritten
        for position in range(self._length - 1, index - 1, -1):
            self._store.move(position, position + 1)
        self._length += 1

    def _close_slot(self, index: int) -> None:
        for position in range(index + 1, self._length):
            self._store.move(position, position - 1)
        self._store.discard(self._length - 1)
        self._length -= 1

    def _handle_underflow(self, operation: str) -> Any:
        if self._underflow is UnderflowPolicy.RAISE:
            raise EmptySequenceError(operation, "sequence is empty")
        logger.debug("%s on empty sequence, returning default", operation)
        return self._store.default

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def for_each(self, action: Optional[Callable[[Any], Any]] = None):
        """
        Visit elements in index order.

        With no action, returns a fresh Cursor at index 0. With an action,
        calls it once per element and returns self.
        """
        if action is None:
            return Cursor(self)
        index = 0
        while index < self._length:
            action(self.at(index))
            index += 1
        return self

    def _spawn(self, items: Iterable[Any]) -> DynamicArray:
        return type(self)(items, default=self.default, underflow=self._underflow)

    def describe(self) -> str:
        """Render as ``DynamicArray[e0, e1, ...]``."""
        rendered = ", ".join(repr(element) for element in self.for_each())
        return f"{type(self).__name__}[{rendered}]"

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Cursor:
        return self.for_each()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._spawn(self.to_list()[index])
        return self.at(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set_at(index, value)

    def __contains__(self, value: object) -> bool:
        return self.include(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicArray):
            return self.to_list() == other.to_list()
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return self.describe()
