# dynarray
# A hand-built dynamic array over a sparse backing store

"""
Core invariant: a DynamicArray's logical length is tracked on its own,
independent of how many entries its backing store physically holds.

Unset slots and out-of-range reads yield the container's default value.
"""

from .iteration import Cursor, Traversable
from .sequence import DynamicArray
from .store import SparseStore
from .validation import (
    ConfigurationError,
    EmptySequenceError,
    InvalidIndexError,
    SequenceError,
    UnderflowPolicy,
)

__all__ = [
    "ConfigurationError",
    "Cursor",
    "DynamicArray",
    "EmptySequenceError",
    "InvalidIndexError",
    "SequenceError",
    "SparseStore",
    "Traversable",
    "UnderflowPolicy",
]

__version__ = "0.1.0"
