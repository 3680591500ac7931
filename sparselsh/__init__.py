"""sparselsh: statistics over sparse vectors and locality-sensitive hashing.

Two independent building blocks for similarity search and recommendation:
- ScalarAggregator: descriptive statistics over the explicit values of a
  sparse vector, correcting for implicit zeros where the statistic needs it
- SimHashFamily: a locality-sensitive hash family drawing independent hash
  functions over one shared random projection

The library is silent by default. See :mod:`sparselsh.logging_config` to
enable log output.
"""

import logging

from sparselsh.correlation import HammingDistance
from sparselsh.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from sparselsh.lsh import LshHashFamily, SimHashFamily, SimHashFunction, VectorHashFunction, collision_rate
from sparselsh.structure import (
    ArrayVector,
    Boundary,
    MathVector,
    MeanVariance,
    ScalarAggregator,
    ScalarSequence,
    ScalarSummary,
    SparseVector,
    ValueSequence,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Structure
    "ArrayVector",
    "Boundary",
    "MathVector",
    "MeanVariance",
    "ScalarAggregator",
    "ScalarSequence",
    "ScalarSummary",
    "SparseVector",
    "ValueSequence",
    # Hashing
    "HammingDistance",
    "LshHashFamily",
    "SimHashFamily",
    "SimHashFunction",
    "VectorHashFunction",
    "collision_rate",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
