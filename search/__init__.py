#Expose the driver search strategies:
#Euclidean (straight line)
#Manhattan (city blocks)
#Expanding ring (square rings around the order, early exit)
#Registry to choose one by name

from .base import DriverRanker
from .euclidean import EuclideanRanker
from .manhattan import ManhattanRanker
from .expanding_ring import ExpandingRingRanker
from .registry import RANKERS, UnknownRankerError, available_rankers, get_ranker

__all__ = [
    "DriverRanker",
    "EuclideanRanker",
    "ManhattanRanker",
    "ExpandingRingRanker",
    "RANKERS",
    "UnknownRankerError",
    "available_rankers",
    "get_ranker",
]
