"""One-shot statistical report of a scalar sequence.

ScalarSummary gathers every statistic ScalarAggregator offers into a single
record that can be printed, turned into a dict, or exported to pandas.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

if TYPE_CHECKING:
    from sparselsh.structure.aggregator import ScalarAggregator


@dataclass(frozen=True)
class ScalarSummary:
    """Descriptive statistics of one sequence.

    ``sum``, ``minimum``, ``maximum``, ``median`` and ``distinct_values``
    follow the ``absolute`` flag the summary was built with. The moments
    (``mean``, ``skewness``, ``kurtosis``) always describe the raw values of
    the full vector including implicit zeros, while ``online_mean`` and
    ``online_variance`` describe the explicit values alone.
    """

    known_size: int
    unknown_size: int
    absolute: bool
    sum: float
    mean: float
    online_mean: float
    online_variance: float
    minimum: float
    maximum: float
    median: float
    skewness: float
    kurtosis: float
    l1_norm: float
    l2_norm: float
    distinct_values: int

    @classmethod
    def from_aggregator(cls, aggregator: ScalarAggregator, absolute: bool = False) -> ScalarSummary:
        sequence = aggregator.sequence
        length = sequence.known_size + sequence.unknown_size
        raw_sum = aggregator.sum()
        online = aggregator.variance()
        boundary = aggregator.boundary(absolute)
        return cls(
            known_size=sequence.known_size,
            unknown_size=sequence.unknown_size,
            absolute=absolute,
            sum=aggregator.sum(absolute) if absolute else raw_sum,
            mean=raw_sum / length if length else math.nan,
            online_mean=online.mean,
            online_variance=online.variance,
            minimum=boundary.minimum,
            maximum=boundary.maximum,
            median=aggregator.median(absolute),
            skewness=aggregator.skewness(raw_sum),
            kurtosis=aggregator.kurtosis(raw_sum),
            l1_norm=aggregator.norm(1),
            l2_norm=aggregator.norm(2),
            distinct_values=len(aggregator.histogram(absolute)),
        )

    @property
    def length(self) -> int:
        return self.known_size + self.unknown_size

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_series(self) -> pd.Series:
        """Export the summary as a pandas Series indexed by statistic name."""
        return pd.Series(self.to_dict(), name="value")

    def __str__(self) -> str:
        lines = [
            "Scalar Summary",
            f"  Entries: {self.known_size} explicit / {self.unknown_size} implicit",
            f"  Sum: {self.sum:.6g} | Mean: {self.mean:.6g}",
            f"  Online: mean={self.online_mean:.6g}, sq.dev={self.online_variance:.6g}",
            f"  Range: [{self.minimum:.6g}, {self.maximum:.6g}] | Median: {self.median:.6g}",
            f"  Skewness: {self.skewness:.6g} | Kurtosis: {self.kurtosis:.6g}",
            f"  Norms: L1={self.l1_norm:.6g}, L2={self.l2_norm:.6g}",
            f"  Distinct values: {self.distinct_values}",
        ]
        return "\n".join(lines)
