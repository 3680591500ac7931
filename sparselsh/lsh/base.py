"""Base protocols for locality-sensitive hash families.

A hash family is a recipe for drawing random hash functions. Its defining
property: for two vectors of matching dimensionality, the probability that a
randomly drawn function gives both the same code never decreases as their
similarity coefficient grows.

This module defines:
- VectorHashFunction: One concrete function, vector -> integer code
- LshHashFamily: Draws functions and scores vector similarity
- collision_rate: Empirical collision probability of a family for one pair
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from sparselsh.structure.base import MathVector


class VectorHashFunction(ABC):
    """A concrete hash function drawn from a family.

    Its random state is fixed when it is drawn, so hashing the same vector
    twice always gives the same code.
    """

    @abstractmethod
    def hash(self, vector: MathVector) -> int:
        """Hash a vector to an integer code.

        Raises:
            ValueError: If the vector's dimensionality does not match.
        """

    def __call__(self, vector: MathVector) -> int:
        return self.hash(vector)


class LshHashFamily(ABC):
    """A family of locality-sensitive hash functions."""

    @abstractmethod
    def draw_hash_function(self, rng: random.Random) -> VectorHashFunction:
        """Draw a new function, taking its private randomness from ``rng``.

        Distinct draws are independent; give concurrent callers their own
        ``random.Random`` instances.
        """

    @abstractmethod
    def similarity_coefficient(self, left: MathVector, right: MathVector) -> float:
        """Similarity of two vectors as seen by this family."""

    @property
    @abstractmethod
    def dimensions(self) -> int:
        """Dimensionality of the vectors this family hashes."""


def collision_rate(
    family: LshHashFamily,
    left: MathVector,
    right: MathVector,
    draws: int = 1000,
    seed: int | None = None,
) -> float:
    """Fraction of drawn functions that give two vectors the same code.

    Args:
        family: The family to draw from.
        left: First vector.
        right: Second vector.
        draws: Number of functions to draw. Must be positive.
        seed: Seed for the draws, for reproducible estimates.

    Raises:
        ValueError: If draws <= 0.
    """
    if draws <= 0:
        raise ValueError(f"draws must be positive, got {draws}")

    rng = random.Random(seed)
    collisions = 0
    for _ in range(draws):
        function = family.draw_hash_function(rng)
        if function.hash(left) == function.hash(right):
            collisions += 1
    return collisions / draws
