"""Pairwise distance between vectors.

HammingDistance counts the coordinates on which two vectors disagree. It walks
only the explicit entries of both vectors: a coordinate implicit in both is
0.0 on both sides and cannot differ. Two NaNs agree, so a vector never
differs from itself.
"""

from __future__ import annotations

import math

from sparselsh.structure.base import MathVector


def _check_dimensions(left: MathVector, right: MathVector) -> None:
    if left.dimensions != right.dimensions:
        raise ValueError(
            f"Cannot compare vectors: dimensions differ "
            f"({left.dimensions} vs {right.dimensions})"
        )


def _differ(left: float, right: float) -> bool:
    if left == right:
        return False
    return not (math.isnan(left) and math.isnan(right))


class HammingDistance:
    """Hamming distance and the similarity coefficient derived from it.

    Example:
        distance = HammingDistance()
        a = ArrayVector.of([1, 0, 1, 1])
        b = ArrayVector.of([1, 1, 1, 0])
        distance.get_distance(a, b)     # 2
        distance.get_coefficient(a, b)  # 0.5
    """

    def get_distance(self, left: MathVector, right: MathVector) -> int:
        """Number of coordinates whose values differ.

        Raises:
            ValueError: If the vectors have different dimensions.
        """
        _check_dimensions(left, right)
        indices = {index for index, _ in left.items()}
        indices.update(index for index, _ in right.items())
        return sum(
            1 for index in indices if _differ(left.get_value(index), right.get_value(index))
        )

    def get_coefficient(self, left: MathVector, right: MathVector) -> float:
        """Fraction of coordinates on which the vectors agree, in ``[0, 1]``.

        Two zero-dimensional vectors are identical, so their coefficient is 1.

        Raises:
            ValueError: If the vectors have different dimensions.
        """
        differing = self.get_distance(left, right)
        if left.dimensions == 0:
            return 1.0
        return 1.0 - differing / left.dimensions

    def __repr__(self) -> str:
        return "HammingDistance()"
