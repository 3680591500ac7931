"""Dense and sparse vector storage.

ArrayVector keeps every coordinate explicitly, so statistics see no implicit
zeros. SparseVector keeps only the coordinates that were set; everything else
reads as 0.0 and is reported through ``unknown_size``.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Mapping

from sparselsh.structure.base import MathVector


class ArrayVector(MathVector):
    """Dense vector backed by a Python list.

    Args:
        dimensions: Number of coordinates. Must be non-negative.
        values: Optional initial values, exactly ``dimensions`` of them.
            Defaults to all zeros.

    Raises:
        ValueError: If dimensions is negative or values has the wrong length.
    """

    def __init__(self, dimensions: int, values: Iterable[float] | None = None):
        if dimensions < 0:
            raise ValueError(f"dimensions must be non-negative, got {dimensions}")

        if values is None:
            self._values = [0.0] * dimensions
        else:
            self._values = [float(value) for value in values]
            if len(self._values) != dimensions:
                raise ValueError(
                    f"expected {dimensions} values, got {len(self._values)}"
                )

    @classmethod
    def of(cls, values: Iterable[float]) -> ArrayVector:
        """Build a dense vector sized to the given values."""
        values = list(values)
        return cls(len(values), values)

    @property
    def dimensions(self) -> int:
        return len(self._values)

    @property
    def known_size(self) -> int:
        return len(self._values)

    def get_value(self, index: int) -> float:
        self._check_index(index)
        return self._values[index]

    def set_value(self, index: int, value: float) -> None:
        self._check_index(index)
        self._values[index] = float(value)

    def items(self) -> Iterator[tuple[int, float]]:
        return iter(enumerate(self._values))

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def to_list(self) -> list[float]:
        """Copy of the coordinates as a list."""
        return list(self._values)

    @property
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
        return len(self._values) * 8 + sys.getsizeof(self._values) + sys.getsizeof(self)

    def __repr__(self) -> str:
        return f"ArrayVector(dimensions={len(self._values)})"


class SparseVector(MathVector):
    """Sparse vector storing only explicitly set coordinates.

    Setting a coordinate makes it explicit even when the value is 0.0, so a
    stored zero counts towards ``known_size`` while an untouched coordinate
    counts towards ``unknown_size``.

    Args:
        dimensions: Number of coordinates. Must be non-negative.
        entries: Optional ``{index: value}`` mapping or iterable of
            ``(index, value)`` pairs.

    Example:
        vector = SparseVector(1000, {3: 1.5, 42: -2.0})
        vector.known_size    # 2
        vector.unknown_size  # 998
        vector[7]            # 0.0
    """

    def __init__(
        self,
        dimensions: int,
        entries: Mapping[int, float] | Iterable[tuple[int, float]] | None = None,
    ):
        if dimensions < 0:
            raise ValueError(f"dimensions must be non-negative, got {dimensions}")

        self._dimensions = dimensions
        self._entries: dict[int, float] = {}

        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for index, value in pairs:
                self.set_value(index, value)

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def known_size(self) -> int:
        return len(self._entries)

    def get_value(self, index: int) -> float:
        self._check_index(index)
        return self._entries.get(index, 0.0)

    def set_value(self, index: int, value: float) -> None:
        self._check_index(index)
        self._entries[index] = float(value)

    def remove_value(self, index: int) -> None:
        """Turn a coordinate back into an implicit zero."""
        self._check_index(index)
        self._entries.pop(index, None)

    def items(self) -> Iterator[tuple[int, float]]:
        for index in sorted(self._entries):
            yield index, self._entries[index]

    def indices(self) -> set[int]:
        """Indices of the explicit coordinates."""
        return set(self._entries)

    def to_dense(self) -> ArrayVector:
        """Materialize every coordinate into an ArrayVector."""
        dense = ArrayVector(self._dimensions)
        for index, value in self._entries.items():
            dense.set_value(index, value)
        return dense

    @property
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""
        # key + value + hash slot per entry
        return len(self._entries) * 24 + sys.getsizeof(self._entries) + sys.getsizeof(self)

    def __repr__(self) -> str:
        return (
            f"SparseVector(dimensions={self._dimensions}, "
            f"known={len(self._entries)}, unknown={self.unknown_size})"
        )
