"""Locality-sensitive hash families.

Quick Reference:
    LshHashFamily: Protocol for families (draw functions, score similarity)
    VectorHashFunction: Protocol for a drawn function (vector -> int code)
    SimHashFamily: Shared random projection + bit-sampling functions
    collision_rate: Empirical collision probability of a family for a pair

Example:
    import random
    from sparselsh.lsh import SimHashFamily

    family = SimHashFamily.from_seed(42, dimensions=8, w=4)
    function = family.draw_hash_function(random.Random(1))
    code = function(vector)
"""

from sparselsh.lsh.base import LshHashFamily, VectorHashFunction, collision_rate
from sparselsh.lsh.simhash import SimHashFamily, SimHashFunction

__all__ = [
    "LshHashFamily",
    "SimHashFamily",
    "SimHashFunction",
    "VectorHashFunction",
    "collision_rate",
]
