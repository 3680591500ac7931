"""SimHash family: bit-sampling hashes keyed by a shared projection.

The family owns one projection vector whose entries are random integers in
``[1, w]``. Every function drawn from the family reads that same vector (it is
never copied) and adds its own randomness: the coordinate it samples and an
offset in ``[0, w)``. A function hashes a vector as

    bits(vector[index]) XOR bits(projection[index] * w + offset)

where ``bits`` is the IEEE-754 pattern of a float, with ``-0.0`` folded into
``0.0`` and every NaN into one canonical NaN. The second term is constant for
a given function, so two vectors collide exactly when they agree on the
sampled coordinate. The collision probability of a random draw is therefore
``s``, the fraction of agreeing coordinates reported by
``similarity_coefficient``, whatever the size of the disagreements.

Example:
    family = SimHashFamily.from_seed(42, dimensions=128, w=4)

    rng = random.Random(7)
    functions = [family.draw_hash_function(rng) for _ in range(16)]
    signature = [function(vector) for function in functions]
"""

from __future__ import annotations

import logging
import math
import random
import struct

from sparselsh.correlation.distance import HammingDistance
from sparselsh.lsh.base import LshHashFamily, VectorHashFunction
from sparselsh.structure.base import MathVector
from sparselsh.structure.vector import ArrayVector

logger = logging.getLogger(__name__)

_distance = HammingDistance()


def _bits(value: float) -> int:
    """64-bit IEEE-754 pattern of ``value``, signed zero and NaN canonical."""
    if math.isnan(value):
        value = math.nan
    return struct.unpack(">Q", struct.pack(">d", value + 0.0))[0]


class SimHashFunction(VectorHashFunction):
    """One hash function drawn from a :class:`SimHashFamily`.

    Args:
        rng: Source of this function's private randomness.
        projection: The family's projection vector, held by reference.
        w: Width of the family, which scales the salt.
    """

    def __init__(self, rng: random.Random, projection: MathVector, w: int):
        self._projection = projection
        self._w = w
        self._index = rng.randrange(projection.dimensions)
        self._offset = rng.random() * w

    @property
    def projection(self) -> MathVector:
        """The shared projection vector."""
        return self._projection

    @property
    def index(self) -> int:
        """The coordinate this function samples."""
        return self._index

    @property
    def offset(self) -> float:
        """Random offset in ``[0, w)``."""
        return self._offset

    @property
    def w(self) -> int:
        """Width of the family."""
        return self._w

    def hash(self, vector: MathVector) -> int:
        if vector.dimensions != self._projection.dimensions:
            raise ValueError(
                f"Cannot hash vector: dimensions differ "
                f"({vector.dimensions} vs {self._projection.dimensions})"
            )
        weight = self._projection.get_value(self._index)
        salt = _bits(weight * self._w + self._offset)
        return _bits(vector.get_value(self._index)) ^ salt

    def __repr__(self) -> str:
        return (
            f"SimHashFunction(index={self._index}, offset={self._offset:.4f}, w={self._w})"
        )


class SimHashFamily(LshHashFamily):
    """Locality-sensitive family over a shared random projection.

    Args:
        projection: Projection vector to share with every drawn function. It
            is stored by reference; callers must not mutate it afterwards.
        w: Width, the upper bound of the projection entries. Defaults to
            the largest projection entry (at least 1).

    Alternatively, generate the projection:
        SimHashFamily.from_random(rng, dimensions=64, w=4)
        SimHashFamily.from_seed(42, dimensions=64, w=4)

    Raises:
        ValueError: If the projection is empty or w <= 0.
    """

    def __init__(self, projection: MathVector, w: int | None = None):
        if projection.dimensions <= 0:
            raise ValueError(
                f"projection must have positive dimensions, got {projection.dimensions}"
            )
        if w is None:
            w = max(1, math.ceil(max(projection, default=1.0)))
        if w <= 0:
            raise ValueError(f"w must be positive, got {w}")

        self._projection = projection
        self._w = w

    @classmethod
    def from_random(cls, rng: random.Random, dimensions: int, w: int) -> SimHashFamily:
        """Create a family whose projection entries are uniform in ``[1, w]``.

        Args:
            rng: Source of randomness for the projection.
            dimensions: Length of the projection. Must be positive.
            w: Width, the largest projection entry. Must be positive.

        Raises:
            ValueError: If dimensions or w <= 0.
        """
        if dimensions <= 0:
            raise ValueError(f"dimensions must be positive, got {dimensions}")
        if w <= 0:
            raise ValueError(f"w must be positive, got {w}")

        projection = ArrayVector(dimensions)
        for dimension in range(dimensions):
            projection.set_value(dimension, rng.randint(1, w))

        logger.debug("Generated projection with %d dimensions, w=%d", dimensions, w)
        return cls(projection, w)

    @classmethod
    def from_seed(cls, seed: int | None, dimensions: int, w: int) -> SimHashFamily:
        """Create a family reproducibly from an integer seed."""
        return cls.from_random(random.Random(seed), dimensions, w)

    @property
    def projection(self) -> MathVector:
        """The shared projection vector."""
        return self._projection

    @property
    def dimensions(self) -> int:
        """Length of the projection, and of every vector the family hashes."""
        return self._projection.dimensions

    @property
    def w(self) -> int:
        """Width of the family, the upper bound of the projection entries."""
        return self._w

    def draw_hash_function(self, rng: random.Random) -> SimHashFunction:
        function = SimHashFunction(rng, self._projection, self._w)
        logger.debug("Drew %r", function)
        return function

    def similarity_coefficient(self, left: MathVector, right: MathVector) -> float:
        """Hamming similarity: fraction of coordinates where the vectors agree.

        Raises:
            ValueError: If the vectors have different dimensions.
        """
        return _distance.get_coefficient(left, right)

    def __repr__(self) -> str:
        return f"SimHashFamily(dimensions={self.dimensions}, w={self._w})"
