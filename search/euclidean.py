"""
Purpose: Search by straight-line (Euclidean) distance.
What it does:
Measures every driver against the order, sorts closest to furthest and keeps
the first few.
"""

import logging
from typing import List, Optional, Sequence

from drivers.distance import euclidean_distance
from drivers.models import Driver, Location, MapBounds
from drivers.policy import SearchPolicy, default_search_policy

logger = logging.getLogger(__name__)


class EuclideanRanker:
    def __init__(self, policy: Optional[SearchPolicy] = None):
        self.policy = policy or default_search_policy()

    def rank(self, order: Location, drivers: Sequence[Driver], bounds: MapBounds) -> List[Driver]:
        # sorted() is stable, so equally distant drivers keep their input order
        ranked = sorted(drivers, key=lambda driver: euclidean_distance(order, driver.position))
        found = ranked[:self.policy.max_results]

        logger.debug("euclidean search: %d drivers -> %d found", len(drivers), len(found))
        return found
