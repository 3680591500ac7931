"""Vector storage and descriptive statistics over explicit values.

Quick Reference:
    ScalarSequence: Protocol for re-iterable explicit values + implicit zeros
    ValueSequence: Wraps a list of numbers as a ScalarSequence
    ArrayVector: Dense vector (no implicit zeros)
    SparseVector: Dict-backed vector (untouched coordinates are implicit zeros)
    ScalarAggregator: sum, boundary, histogram, variance, skewness, kurtosis,
        median and p-norms over a ScalarSequence
    ScalarSummary: All of the above in one report

Example:
    from sparselsh.structure import ScalarAggregator, SparseVector

    vector = SparseVector(100, {1: 2.0, 5: -1.0, 9: 4.0})
    aggregator = ScalarAggregator(vector)
    print(aggregator.kurtosis(aggregator.sum()))
    print(aggregator.describe())
"""

from sparselsh.structure.aggregator import Boundary, MeanVariance, ScalarAggregator
from sparselsh.structure.base import MathVector, ScalarSequence, ValueSequence
from sparselsh.structure.summary import ScalarSummary
from sparselsh.structure.vector import ArrayVector, SparseVector

__all__ = [
    "ArrayVector",
    "Boundary",
    "MathVector",
    "MeanVariance",
    "ScalarAggregator",
    "ScalarSequence",
    "ScalarSummary",
    "SparseVector",
    "ValueSequence",
]
