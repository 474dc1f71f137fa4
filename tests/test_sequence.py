"""
Tests for the DynamicArray container.

These tests verify that:
1. Tail and head operations keep length and ordering consistent
2. Writes past the end leave gap slots that read as the default
3. Removal by value only touches the first match
4. Underflow follows the configured policy
"""

import pytest

from dynarray import (
    DynamicArray,
    EmptySequenceError,
    InvalidIndexError,
    SequenceError,
    UnderflowPolicy,
)


# =============================================================================
# CONSTRUCTION
# =============================================================================

class TestConstruction:
    """Test building containers."""

    def test_empty_by_default(self):
        """No source gives an empty container."""
        seq = DynamicArray()
        assert seq.length == 0
        assert seq.occupancy == 0
        assert seq.to_list() == []

    def test_from_source(self):
        """Elements are copied in order from the source."""
        seq = DynamicArray(["a", "b", "c"])
        assert seq.length == 3
        assert seq.at(0) == "a"
        assert seq.at(2) == "c"

    def test_source_is_copied(self):
        """Mutating the source afterwards does not affect the container."""
        source = [1, 2]
        seq = DynamicArray(source)
        source.append(3)
        assert seq.to_list() == [1, 2]

    def test_from_generator(self):
        """Any finite iterable works as a source."""
        seq = DynamicArray(n * n for n in range(4))
        assert seq.to_list() == [0, 1, 4, 9]

    def test_variadic_constructor(self):
        """of() forwards positional elements."""
        seq = DynamicArray.of(1, 2, 3)
        assert seq.length == 3
        assert seq == [1, 2, 3]

    def test_variadic_constructor_options(self):
        """of() forwards keyword options."""
        seq = DynamicArray.of(default=0)
        assert seq.length == 0
        assert seq.at(5) == 0


# =============================================================================
# INDEXED ACCESS
# =============================================================================

class TestIndexedAccess:
    """Test at() and set_at()."""

    def test_at_out_of_range_returns_default(self):
        """Reads past the end are not errors."""
        seq = DynamicArray.of(1)
        assert seq.at(10) is None

    def test_at_negative_returns_default(self):
        """Negative indices are not counted from the end."""
        seq = DynamicArray.of(1, 2, 3)
        assert seq.at(-1) is None

    def test_at_custom_default(self):
        """A configured default is returned for unset slots."""
        seq = DynamicArray(default="?")
        assert seq.at(0) == "?"

    def test_at_rejects_non_integer(self):
        """Non-integer indices raise InvalidIndexError."""
        seq = DynamicArray.of(1)
        with pytest.raises(InvalidIndexError, match="index must be an integer"):
            seq.at("0")

    def test_set_at_overwrites_in_range(self):
        """Writing inside the sequence keeps length."""
        seq = DynamicArray.of(1, 2, 3)
        assert seq.set_at(1, "x") == "x"
        assert seq.length == 3
        assert seq == [1, "x", 3]

    def test_set_at_length_appends(self):
        """Writing at length behaves like push_back."""
        seq = DynamicArray.of(1)
        seq.set_at(1, 2)
        assert seq.length == 2
        assert seq.at(1) == 2

    def test_set_at_fills_gaps(self):
        """Writing past the end on an empty container leaves default gaps."""
        seq = DynamicArray()
        seq.set_at(4, "z")
        assert seq.length == 5
        assert all(seq.at(i) is None for i in range(4))
        assert seq.at(4) == "z"

    def test_gap_slots_occupy_no_entries(self):
        """Gap slots count toward length but not occupancy."""
        seq = DynamicArray()
        seq.set_at(9, 1)
        assert seq.length == 10
        assert seq.occupancy == 1

    def test_set_at_never_shrinks(self):
        """Length is monotonically non-decreasing under set_at."""
        seq = DynamicArray()
        lengths = []
        for index in (3, 1, 7, 0, 7):
            seq.set_at(index, index)
            lengths.append(seq.length)
        assert lengths == sorted(lengths)
        assert seq.length == 8

    def test_set_at_rejects_negative(self):
        """Negative write indices raise InvalidIndexError."""
        seq = DynamicArray()
        with pytest.raises(InvalidIndexError, match="non-negative"):
            seq.set_at(-1, "x")
        assert seq.length == 0

    def test_item_protocol(self):
        """[] reads and writes go through at() and set_at()."""
        seq = DynamicArray()
        seq[2] = "c"
        assert seq[2] == "c"
        assert seq[0] is None
        assert len(seq) == 3

    def test_slice_returns_container(self):
        """Slicing builds a new DynamicArray."""
        seq = DynamicArray.of(1, 2, 3, 4)
        part = seq[1:3]
        assert isinstance(part, DynamicArray)
        assert part == [2, 3]


# =============================================================================
# TAIL OPERATIONS
# =============================================================================

class TestTailOperations:
    """Test push_back() and pop_back()."""

    def test_push_back_grows_by_one(self):
        """push_back adds exactly one slot holding the value."""
        seq = DynamicArray.of(1, 2)
        old_length = seq.length
        seq.push_back(3)
        assert seq.length == old_length + 1
        assert seq.at(old_length) == 3

    def test_push_back_chains(self):
        """push_back returns the container."""
        seq = DynamicArray()
        assert seq.push_back(1).push_back(2) is seq
        assert seq == [1, 2]

    def test_append_alias(self):
        """append is push_back."""
        seq = DynamicArray()
        seq.append("a")
        assert seq == ["a"]

    def test_tail_round_trip(self):
        """pop_back right after push_back returns the value and restores length."""
        seq = DynamicArray.of("a", "b")
        seq.push_back("c")
        assert seq.pop_back() == "c"
        assert seq.length == 2
        assert seq == ["a", "b"]

    def test_pop_back_discards_entry(self):
        """The removed slot leaves the backing store."""
        seq = DynamicArray.of(1, 2)
        seq.pop_back()
        assert seq.occupancy == 1

    def test_pop_back_gap_returns_default(self):
        """Popping a gap slot returns the default value."""
        seq = DynamicArray(default=0)
        seq.set_at(2, 5)
        seq.pop_back()
        assert seq.pop_back() == 0
        assert seq.length == 1


# =============================================================================
# HEAD AND INTERIOR OPERATIONS
# =============================================================================

class TestHeadOperations:
    """Test push_front(), pop_front(), insert() and delete_at()."""

    def test_push_front_shifts_elements(self):
        """Every element moves one slot toward the tail."""
        seq = DynamicArray.of(1, 2, 3)
        seq.push_front(0)
        assert seq == [0, 1, 2, 3]
        assert seq.length == 4

    def test_push_front_on_empty(self):
        """push_front on an empty container just stores the value."""
        seq = DynamicArray()
        seq.push_front("x")
        assert seq == ["x"]

    def test_head_round_trip(self):
        """pop_front right after push_front restores the prior ordering."""
        seq = DynamicArray.of("b", "c", "d")
        seq.push_front("a")
        assert seq.pop_front() == "a"
        assert seq == ["b", "c", "d"]
        assert seq.length == 3

    def test_pop_front_compacts(self):
        """pop_front leaves no duplicated tail slot."""
        seq = DynamicArray.of(1, 2, 3)
        assert seq.pop_front() == 1
        assert seq == [2, 3]
        assert seq.occupancy == 2
        assert seq.at(2) is None

    def test_shift_preserves_gaps(self):
        """Gap slots move along with their neighbours."""
        seq = DynamicArray()
        seq.set_at(2, "c")
        seq.push_front("a")
        assert seq == ["a", None, None, "c"]
        assert seq.occupancy == 2
        seq.pop_front()
        assert seq == [None, None, "c"]
        assert seq.occupancy == 1

    def test_insert_interior(self):
        """insert places the value before the current element at index."""
        seq = DynamicArray.of(1, 3)
        seq.insert(1, 2)
        assert seq == [1, 2, 3]

    def test_insert_past_end_is_set_at(self):
        """insert beyond length fills gaps like set_at."""
        seq = DynamicArray.of(1)
        seq.insert(3, 4)
        assert seq == [1, None, None, 4]

    def test_delete_at_interior(self):
        """delete_at removes and returns the element at index."""
        seq = DynamicArray.of("a", "b", "c")
        assert seq.delete_at(1) == "b"
        assert seq == ["a", "c"]

    def test_delete_at_out_of_range(self):
        """Out-of-range delete_at returns the default without mutating."""
        seq = DynamicArray.of("a")
        assert seq.delete_at(5) is None
        assert seq == ["a"]

    def test_clear(self):
        """clear resets length and store."""
        seq = DynamicArray.of(1, 2, 3)
        seq.clear()
        assert seq.length == 0
        assert seq.occupancy == 0


# =============================================================================
# REMOVAL BY VALUE
# =============================================================================

class TestRemove:
    """Test remove()."""

    def test_removes_first_occurrence_only(self):
        """Only the lowest-index match is removed."""
        seq = DynamicArray.of(3, 7, 7, 2)
        assert seq.remove(7) == 7
        assert seq == [3, 7, 2]
        assert seq.length == 3

    def test_no_match_returns_default(self):
        """A missing value leaves the container unchanged."""
        seq = DynamicArray.of(1, 2)
        assert seq.remove(9) is None
        assert seq == [1, 2]

    def test_remove_last_element(self):
        """Removing the tail element shrinks by one."""
        seq = DynamicArray.of(1, 2)
        seq.remove(2)
        assert seq == [1]
        assert seq.occupancy == 1

    def test_remove_matches_gap(self):
        """A gap slot reads as the default, so remove(None) can match it."""
        seq = DynamicArray()
        seq.set_at(1, "b")
        seq.remove(None)
        assert seq == ["b"]


# =============================================================================
# UNDERFLOW
# =============================================================================

class TestUnderflow:
    """Test removal from an empty container."""

    @pytest.mark.parametrize("operation", ["pop_back", "pop_front"])
    def test_raise_policy(self, operation):
        """The default policy raises EmptySequenceError."""
        seq = DynamicArray()
        with pytest.raises(EmptySequenceError, match=operation):
            getattr(seq, operation)()
        assert seq.length == 0

    @pytest.mark.parametrize("operation", ["pop_back", "pop_front"])
    def test_clamp_policy(self, operation):
        """CLAMP returns the default and keeps length at zero."""
        seq = DynamicArray(default="none", underflow=UnderflowPolicy.CLAMP)
        assert getattr(seq, operation)() == "none"
        assert seq.length == 0

    def test_policy_from_string(self):
        """Policies may be given by value."""
        seq = DynamicArray(underflow="clamp")
        assert seq.underflow is UnderflowPolicy.CLAMP

    def test_empty_error_is_index_error(self):
        """EmptySequenceError can be caught as IndexError."""
        with pytest.raises(IndexError):
            DynamicArray().pop_back()

    def test_error_carries_operation(self):
        """Errors expose the failing operation."""
        with pytest.raises(SequenceError) as excinfo:
            DynamicArray().pop_front()
        assert excinfo.value.operation == "pop_front"
        assert str(excinfo.value) == "[pop_front] sequence is empty"


# =============================================================================
# TRAVERSAL AND DISPLAY
# =============================================================================

class TestTraversal:
    """Test for_each() and describe()."""

    def test_for_each_with_action(self):
        """The action sees every element in index order."""
        seq = DynamicArray.of("a", "b", "c")
        seen = []
        assert seq.for_each(seen.append) is seq
        assert seen == ["a", "b", "c"]

    def test_for_each_reads_gaps(self):
        """Gap slots are visited as the default value."""
        seq = DynamicArray(default=0)
        seq.set_at(2, 9)
        seen = []
        seq.for_each(seen.append)
        assert seen == [0, 0, 9]

    def test_order_after_mixed_operations(self):
        """Traversal matches the logical state after any mix of operations."""
        seq = DynamicArray()
        seq.push_back(2).push_back(3).push_front(1)
        seq.insert(3, 4)
        seq.pop_back()
        seq.push_front(0)
        seq.remove(2)
        assert list(seq) == [0, 1, 3]
        assert [seq.at(i) for i in range(seq.length)] == [0, 1, 3]

    def test_contains(self):
        """in uses value equality."""
        seq = DynamicArray.of(1, 2)
        assert 2 in seq
        assert 5 not in seq

    def test_describe_format(self):
        """describe renders a type tag and a bracketed list."""
        seq = DynamicArray.of(1, "a", None)
        assert seq.describe() == "DynamicArray[1, 'a', None]"
        assert repr(seq) == seq.describe()

    def test_describe_empty(self):
        assert DynamicArray().describe() == "DynamicArray[]"

    def test_describe_is_idempotent(self):
        """Two calls without mutation give identical output."""
        seq = DynamicArray.of(3, 7, 2)
        first = seq.describe()
        assert seq.describe() == first
        assert seq == [3, 7, 2]

    def test_equality(self):
        """Containers compare equal by elements."""
        assert DynamicArray.of(1, 2) == DynamicArray.of(1, 2)
        assert DynamicArray.of(1, 2) != DynamicArray.of(2, 1)
        assert DynamicArray.of(1, 2) == (1, 2)
        assert DynamicArray.of(1) != "1"
