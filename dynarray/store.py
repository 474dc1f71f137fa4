"""
Sparse Backing Store for dynarray.

The container never owns a contiguous buffer. Elements live in a plain
dict keyed by integer index, and any index without an entry reads as
the store's default value.

Occupancy (explicit entries) and the container's logical length are
separate quantities: a gap slot counts toward length but holds no entry.
"""

from __future__ import annotations

from typing import Any, Iterator


class SparseStore:
    """
    Index -> value mapping with default-on-miss lookup.

    Keys are always non-negative integers. The store itself does not
    track a length; that is the owning container's job.
    """

    __slots__ = ("_entries", "_default")

    def __init__(self, default: Any = None):
        self._entries: dict[int, Any] = {}
        self._default = default

    @property
    def default(self) -> Any:
        """Value returned for any index without an explicit entry."""
        return self._default

    @property
    def occupancy(self) -> int:
        """Number of explicit entries."""
        return len(self._entries)

    def get(self, index: int) -> Any:
        return self._entries.get(index, self._default)

    def put(self, index: int, value: Any) -> None:
        self._entries[index] = value

    def discard(self, index: int) -> None:
        """Drop the entry at index if there is one."""
        self._entries.pop(index, None)

    def move(self, src: int, dst: int) -> None:
        """
        Copy the slot at src into dst.

        A gap at src becomes a gap at dst, so a shifted sequence keeps
        the same explicit/implicit layout it had before the shift.
        """
        if src in self._entries:
            self._entries[dst] = self._entries[src]
        else:
            self._entries.pop(dst, None)

    def clear(self) -> None:
        self._entries.clear()

    def indices(self) -> Iterator[int]:
        """Explicit indices in ascending order."""
        return iter(sorted(self._entries))

    def __contains__(self, index: object) -> bool:
        return index in self._entries

    def __len__(self) -> int:
        return len(self._entries)
