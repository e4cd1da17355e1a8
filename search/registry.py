"""
Purpose: Pick a search strategy by name.
What it does:
Maps the names used in config/CLI to the ranker classes and builds them with
the given policy.
"""

from typing import Callable, Dict, List, Optional

from drivers.policy import SearchPolicy

from .base import DriverRanker
from .euclidean import EuclideanRanker
from .expanding_ring import ExpandingRingRanker
from .manhattan import ManhattanRanker


class UnknownRankerError(ValueError):
    """Raised when a strategy name is not registered."""
    pass


RANKERS: Dict[str, Callable[..., DriverRanker]] = {
    "euclidean": EuclideanRanker,
    "manhattan": ManhattanRanker,
    "expanding_ring": ExpandingRingRanker,
}


def available_rankers() -> List[str]:
    return list(RANKERS)


def get_ranker(name: str, policy: Optional[SearchPolicy] = None) -> DriverRanker:
    try:
        ranker_cls = RANKERS[name]
    except KeyError:
        known = ", ".join(available_rankers())
        raise UnknownRankerError(f"Unknown search strategy {name!r}. Known: {known}") from None
    return ranker_cls(policy=policy)
