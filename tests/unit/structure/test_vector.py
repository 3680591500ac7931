"""Tests for ArrayVector, SparseVector and ValueSequence."""

import pytest

from sparselsh.structure import ArrayVector, SparseVector, ValueSequence


class TestArrayVector:
    """Tests for dense vectors."""

    def test_creates_zeros(self):
        """A new vector holds zeros, all explicit."""
        vector = ArrayVector(4)

        assert vector.dimensions == 4
        assert vector.known_size == 4
        assert vector.unknown_size == 0
        assert list(vector) == [0.0, 0.0, 0.0, 0.0]

    def test_creates_from_values(self):
        """Values are copied in order."""
        vector = ArrayVector.of([1, 2.5, -3])

        assert vector.dimensions == 3
        assert vector.to_list() == [1.0, 2.5, -3.0]

    def test_rejects_wrong_value_count(self):
        """Rejects a values list that does not match dimensions."""
        with pytest.raises(ValueError, match="expected 3 values"):
            ArrayVector(3, [1.0, 2.0])

    def test_rejects_negative_dimensions(self):
        """Rejects negative dimensions."""
        with pytest.raises(ValueError, match="non-negative"):
            ArrayVector(-1)

    def test_get_and_set(self):
        """Values can be read and written by index."""
        vector = ArrayVector(3)
        vector.set_value(1, 7)
        vector[2] = -1.5

        assert vector.get_value(1) == 7.0
        assert vector[2] == -1.5

    def test_rejects_out_of_range_index(self):
        """Index outside [0, dimensions) raises IndexError."""
        vector = ArrayVector(3)

        with pytest.raises(IndexError):
            vector.get_value(3)
        with pytest.raises(IndexError):
            vector.set_value(-1, 1.0)

    def test_items_enumerate_all_coordinates(self):
        """items() yields every (index, value) pair."""
        assert list(ArrayVector.of([4.0, 5.0]).items()) == [(0, 4.0), (1, 5.0)]


class TestSparseVector:
    """Tests for sparse vectors."""

    def test_counts_known_and_unknown(self):
        """Explicit entries are known, the rest unknown."""
        vector = SparseVector(1000, {3: 1.5, 42: -2.0})

        assert vector.known_size == 2
        assert vector.unknown_size == 998
        assert vector.length == 1000

    def test_missing_coordinate_reads_zero(self):
        """Untouched coordinates read as 0.0."""
        assert SparseVector(10, {1: 2.0}).get_value(7) == 0.0

    def test_stored_zero_is_explicit(self):
        """Setting 0.0 still makes the coordinate explicit."""
        vector = SparseVector(10)
        vector.set_value(4, 0.0)

        assert vector.known_size == 1
        assert list(vector.items()) == [(4, 0.0)]

    def test_accepts_pairs(self):
        """Entries may be given as (index, value) pairs."""
        vector = SparseVector(5, [(4, 1.0), (0, 2.0)])

        assert list(vector.items()) == [(0, 2.0), (4, 1.0)]

    def test_iterates_explicit_values_in_index_order(self):
        """Iteration yields only explicit values, ordered by index."""
        vector = SparseVector(10, {9: 3.0, 2: 1.0, 5: 2.0})

        assert list(vector) == [1.0, 2.0, 3.0]

    def test_rejects_out_of_range_entry(self):
        """Entries outside the dimensions raise IndexError."""
        with pytest.raises(IndexError):
            SparseVector(3, {3: 1.0})

    def test_remove_value(self):
        """Removing a coordinate makes it implicit again."""
        vector = SparseVector(5, {1: 1.0})
        vector.remove_value(1)

        assert vector.known_size == 0
        assert vector.get_value(1) == 0.0

    def test_to_dense(self):
        """to_dense materializes every coordinate."""
        dense = SparseVector(4, {1: 2.0, 3: -1.0}).to_dense()

        assert isinstance(dense, ArrayVector)
        assert dense.to_list() == [0.0, 2.0, 0.0, -1.0]

    def test_indices(self):
        """indices() returns the explicit coordinates."""
        assert SparseVector(8, {1: 1.0, 6: 1.0}).indices() == {1, 6}


class TestBulkUpdates:
    """Tests for scale_values, set_values and shift_values."""

    def test_scale_values(self):
        """Scales explicit values and returns the vector."""
        vector = ArrayVector.of([1.0, -2.0])

        assert vector.scale_values(3.0) is vector
        assert vector.to_list() == [3.0, -6.0]

    def test_shift_values_touches_explicit_entries_only(self):
        """Implicit zeros stay implicit when shifting."""
        vector = SparseVector(5, {0: 1.0, 2: 2.0}).shift_values(10.0)

        assert list(vector.items()) == [(0, 11.0), (2, 12.0)]
        assert vector.unknown_size == 3

    def test_set_values(self):
        """Overwrites every explicit value."""
        vector = SparseVector(5, {0: 1.0, 2: 2.0}).set_values(0.5)

        assert list(vector) == [0.5, 0.5]

    def test_chaining(self):
        """Bulk updates chain."""
        vector = ArrayVector.of([1.0, 2.0]).shift_values(1.0).scale_values(2.0)

        assert vector.to_list() == [4.0, 6.0]


class TestValueSequence:
    """Tests for the list adapter."""

    def test_sizes(self):
        """Known size is the number of values; unknown size is given."""
        sequence = ValueSequence([1.0, 2.0, 3.0], unknown_size=7)

        assert sequence.known_size == 3
        assert sequence.unknown_size == 7
        assert sequence.length == 10

    def test_reiterable_from_iterator(self):
        """A one-shot iterator can still be traversed repeatedly."""
        sequence = ValueSequence(iter([1, 2]))

        assert list(sequence) == [1.0, 2.0]
        assert list(sequence) == [1.0, 2.0]

    def test_rejects_negative_unknown_size(self):
        """Rejects negative unknown_size."""
        with pytest.raises(ValueError, match="non-negative"):
            ValueSequence([1.0], unknown_size=-1)
