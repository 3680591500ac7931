"""Base protocols for sequences of scalars and the vectors that expose them.

Statistics in this package never look at how a vector is stored. They only
need three things:
- Iteration over the explicitly stored ("known") values
- How many such explicit values exist
- How many further coordinates are implicit zeros ("unknown")

A dense vector has no implicit coordinates; a sparse vector usually has many.
``known_size + unknown_size`` is always the full dimensionality.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator


class ScalarSequence(ABC):
    """A re-iterable sequence of explicit scalar values.

    Each call to ``__iter__`` starts a fresh traversal, so a statistic that
    needs two passes can simply iterate twice.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[float]:
        """Iterate over the explicit values."""

    @property
    @abstractmethod
    def known_size(self) -> int:
        """Number of explicit values reachable through iteration."""

    @property
    @abstractmethod
    def unknown_size(self) -> int:
        """Number of implicit coordinates, all of them exactly zero."""

    @property
    def length(self) -> int:
        """Full dimensionality, explicit plus implicit."""
        return self.known_size + self.unknown_size


class ValueSequence(ScalarSequence):
    """Adapts a plain collection of numbers to :class:`ScalarSequence`.

    Args:
        values: A re-iterable collection of numbers (list, tuple, array...).
            One-shot iterators are materialized into a tuple.
        unknown_size: Count of implicit zeros to account for. Default 0.

    Example:
        # Four explicit values and six implicit zeros
        sequence = ValueSequence([1.0, -2.0, 0.5, 3.0], unknown_size=6)
    """

    def __init__(self, values: Iterable[float], unknown_size: int = 0):
        if unknown_size < 0:
            raise ValueError(f"unknown_size must be non-negative, got {unknown_size}")
        if isinstance(values, Iterator):
            values = tuple(values)
        self._values = values
        self._known_size = sum(1 for _ in values)
        self._unknown_size = unknown_size

    def __iter__(self) -> Iterator[float]:
        for value in self._values:
            yield float(value)

    @property
    def known_size(self) -> int:
        return self._known_size

    @property
    def unknown_size(self) -> int:
        return self._unknown_size

    def __repr__(self) -> str:
        return f"ValueSequence(known={self._known_size}, unknown={self._unknown_size})"


class MathVector(ScalarSequence):
    """A fixed-size numeric vector whose iteration yields explicit values.

    Implementations decide which coordinates are stored explicitly. The bulk
    mutators (``scale_values``, ``set_values``, ``shift_values``) only touch
    explicit coordinates and return the vector itself for chaining.
    """

    @property
    @abstractmethod
    def dimensions(self) -> int:
        """Total number of coordinates."""

    @abstractmethod
    def get_value(self, index: int) -> float:
        """Return the value at a coordinate (0.0 for implicit ones).

        Raises:
            IndexError: If index is outside ``[0, dimensions)``.
        """

    @abstractmethod
    def set_value(self, index: int, value: float) -> None:
        """Store a value at a coordinate, making it explicit.

        Raises:
            IndexError: If index is outside ``[0, dimensions)``.
        """

    @abstractmethod
    def items(self) -> Iterator[tuple[int, float]]:
        """Iterate over explicit ``(index, value)`` entries in index order."""

    @property
    def unknown_size(self) -> int:
        return self.dimensions - self.known_size

    def __iter__(self) -> Iterator[float]:
        for _, value in self.items():
            yield value

    def __len__(self) -> int:
        return self.dimensions

    def __getitem__(self, index: int) -> float:
        return self.get_value(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set_value(index, value)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.dimensions:
            raise IndexError(f"index must be in [0, {self.dimensions}), got {index}")

    def scale_values(self, factor: float) -> MathVector:
        """Multiply every explicit value by ``factor``."""
        for index, value in list(self.items()):
            self.set_value(index, value * factor)
        return self

    def set_values(self, value: float) -> MathVector:
        """Overwrite every explicit value with ``value``."""
        for index, _ in list(self.items()):
            self.set_value(index, value)
        return self

    def shift_values(self, offset: float) -> MathVector:
        """Add ``offset`` to every explicit value."""
        for index, value in list(self.items()):
            self.set_value(index, value + offset)
        return self
