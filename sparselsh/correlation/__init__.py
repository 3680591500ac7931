"""Pairwise distance and similarity between vectors."""

from sparselsh.correlation.distance import HammingDistance

__all__ = [
    "HammingDistance",
]
