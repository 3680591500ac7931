"""Descriptive statistics over the explicit values of a (sparse) sequence.

ScalarAggregator computes every statistic as a fold over one traversal (two
for skewness and kurtosis) of a :class:`ScalarSequence`. It keeps no state
between calls; the moment accumulators live only for the duration of a call.

Implicit zeros are handled per statistic:
- sum: no correction needed (adding zero is a no-op)
- skewness, kurtosis: corrected analytically using ``unknown_size``
- boundary, histogram, median, variance(): explicit values only

The last group therefore describes the observed values, not the full vector.
An all-negative sparse vector reports its most negative explicit value as the
maximum even though its implicit zeros are larger.

Degenerate inputs never raise. Empty sequences and zero-length vectors give
IEEE-754 results (``nan`` or ``inf``) the way float arithmetic defines them.
"""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterator
from dataclasses import dataclass

from sparselsh.structure.base import ScalarSequence
from sparselsh.structure.summary import ScalarSummary

# Shared key so that every NaN lands in the same histogram bucket.
_NAN = math.nan


def _divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _power(base: float, exponent: float) -> float:
    """``base ** exponent`` returning inf/nan where Python would raise."""
    if base == 0 and exponent < 0:
        return math.inf
    try:
        result = math.pow(base, exponent)
    except ValueError:
        # negative base with a fractional exponent
        return math.nan
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    return result


@dataclass(frozen=True, slots=True)
class Boundary:
    """Smallest and largest explicit value.

    Attributes:
        minimum: Smallest value seen, ``inf`` when nothing was seen.
        maximum: Largest value seen, ``-inf`` when nothing was seen.
    """

    minimum: float
    maximum: float


@dataclass(frozen=True, slots=True)
class MeanVariance:
    """Result of the online mean/variance pass.

    Attributes:
        mean: Mean of the explicit values.
        variance: Sum of squared deviations from the mean. Divide by the count
            for the population variance; take the square root of that for the
            standard deviation.
    """

    mean: float
    variance: float


class ScalarAggregator:
    """Statistics over a sequence of explicit values with implicit zeros.

    Args:
        sequence: The values to describe. It is traversed again by every call.

    Example:
        vector = SparseVector(10, {0: 3.0, 4: -1.0, 7: 2.0})
        aggregator = ScalarAggregator(vector)

        total = aggregator.sum()
        skew = aggregator.skewness(total)
        median = aggregator.median()
        l2 = aggregator.norm(2)
    """

    def __init__(self, sequence: ScalarSequence):
        self._sequence = sequence

    @property
    def sequence(self) -> ScalarSequence:
        """The sequence being described."""
        return self._sequence

    def _values(self, absolute: bool = False) -> Iterator[float]:
        if absolute:
            return (abs(value) for value in self._sequence)
        return iter(self._sequence)

    def sum(self, absolute: bool = False) -> float:
        """Sum of the explicit values (or of their absolute values)."""
        total = 0.0
        for value in self._values(absolute):
            total += value
        return total

    def boundary(self, absolute: bool = False) -> Boundary:
        """Minimum and maximum over the explicit values.

        Implicit zeros are not considered, so this may differ from the true
        extremes of a sparse vector.
        """
        minimum = math.inf
        maximum = -math.inf
        for value in self._values(absolute):
            if maximum < value:
                maximum = value
            if minimum > value:
                minimum = value
        return Boundary(minimum=minimum, maximum=maximum)

    def histogram(self, absolute: bool = False) -> dict[float, int]:
        """Occurrence count of every distinct explicit value."""
        counts: dict[float, int] = {}
        for value in self._values(absolute):
            if math.isnan(value):
                value = _NAN
            counts[value] = counts.get(value, 0) + 1
        return counts

    def variance(self) -> MeanVariance:
        """Online (Welford) mean and sum of squared deviations.

        Only explicit values take part; implicit zeros are ignored. An empty
        sequence gives ``MeanVariance(nan, nan)``.
        """
        iterator = iter(self._sequence)
        first = next(iterator, None)
        if first is None:
            return MeanVariance(mean=math.nan, variance=math.nan)

        size = 1
        mean = first
        variance = 0.0
        for value in iterator:
            size += 1
            delta = value - mean
            mean += delta / size
            variance += delta * (value - mean)
        return MeanVariance(mean=mean, variance=variance)

    def variance_around_mean(self, mean: float) -> float:
        """Sum of squared deviations of the explicit values from ``mean``.

        Callers typically pass the mean of the full vector,
        ``sum / (known_size + unknown_size)``.
        """
        variance = 0.0
        for value in self._sequence:
            deviation = value - mean
            variance += deviation * deviation
        return variance

    def _corrected_variance(self, mean: float, unknown: int, length: int) -> float:
        # implicit zeros each deviate from the mean by -mean
        return _divide(self.variance_around_mean(mean) + mean * mean * unknown, length)

    def skewness(self, sum: float) -> float:
        """Sample skewness of the full vector, implicit zeros included.

        Args:
            sum: Sum of the vector's values, usually ``self.sum()``.

        Returns:
            Skewness, bias-corrected when the vector has at least three
            coordinates. ``nan`` or ``inf`` for degenerate lengths.
        """
        unknown = self._sequence.unknown_size
        length = self._sequence.known_size + unknown
        mean = _divide(sum, length)

        skewness = 0.0
        for value in self._sequence:
            skewness += _power(value - mean, 3)
        if unknown:
            skewness += _power(-mean, 3) * unknown

        variance = self._corrected_variance(mean, unknown, length)
        skewness = _divide(skewness, _power(variance, 1.5) * (length - 1))
        if length >= 3:
            return math.sqrt(length * (length - 1)) / (length - 2) * skewness
        return skewness

    def kurtosis(self, sum: float) -> float:
        """Excess kurtosis of the full vector, implicit zeros included.

        Args:
            sum: Sum of the vector's values, usually ``self.sum()``.
        """
        unknown = self._sequence.unknown_size
        length = self._sequence.known_size + unknown
        mean = _divide(sum, length)

        kurtosis = 0.0
        for value in self._sequence:
            kurtosis += _power(value - mean, 4)
        if unknown:
            kurtosis += _power(-mean, 4) * unknown

        variance = self._corrected_variance(mean, unknown, length)
        return _divide(kurtosis, variance * variance * (length - 1)) - 3.0

    def median(self, absolute: bool = False) -> float:
        """Median of the explicit values using two heaps.

        The lower half lives in a max-heap (stored negated), the upper half in
        a min-heap. After each value the lower half holds either exactly half
        the values or one more than the upper half.

        Returns:
            The median, or ``nan`` for an empty sequence.
        """
        lower: list[float] = []
        upper: list[float] = []
        count = 0
        for value in self._values(absolute):
            if count % 2 == 0:
                # route through the upper half so the lower half grows
                heapq.heappush(lower, -heapq.heappushpop(upper, value))
            else:
                heapq.heappush(upper, -heapq.heappushpop(lower, -value))
            count += 1

        if count == 0:
            return math.nan
        if count % 2 == 0:
            return (-lower[0] + upper[0]) / 2.0
        return -lower[0]

    def norm(self, power: float, root: bool = True) -> float:
        """The p-norm of the explicit values.

        Args:
            power: The norm order. 0 counts the explicit entries; 1 and 2 are
                the Manhattan and Euclidean norms and are always rooted.
            root: For other orders, whether to take the ``1/power`` root of
                the accumulated power sum.
        """
        if power == 0:
            return float(self._sequence.known_size)

        norm = 0.0
        if power == 1:
            for value in self._sequence:
                norm += abs(value)
            return norm
        if power == 2:
            for value in self._sequence:
                norm += value * value
            return math.sqrt(norm)

        if float(power).is_integer() and power % 2 == 0:
            # even powers are already non-negative
            for value in self._sequence:
                norm += _power(value, power)
        else:
            for value in self._sequence:
                norm += _power(abs(value), power)
        return _power(norm, 1.0 / power) if root else norm

    def describe(self, absolute: bool = False) -> ScalarSummary:
        """Compute every statistic into a :class:`ScalarSummary`."""
        return ScalarSummary.from_aggregator(self, absolute=absolute)

    def __repr__(self) -> str:
        return f"ScalarAggregator({self._sequence!r})"
