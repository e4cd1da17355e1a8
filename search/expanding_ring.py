"""
Purpose: Search in an expanding square around the order.
What it does:
Walks outwards ring by ring (ring = all cells at the same Chebyshev distance)
and collects drivers standing on the current ring until enough are found or
the ring has grown past the edge of the map.

Inside one ring drivers come back in input order, not by true distance.
The search only approximates proximity, but it can stop early without
looking at far away drivers once the nearby rings are full.
"""

import logging
from typing import Callable, List, Optional, Sequence, Set

from drivers.distance import chebyshev_distance
from drivers.models import Driver, Location, MapBounds
from drivers.policy import SearchPolicy, default_search_policy

logger = logging.getLogger(__name__)

# (order, driver position) -> ring index
RingDistance = Callable[[Location, Location], int]


class ExpandingRingRanker:
    def __init__(
        self,
        policy: Optional[SearchPolicy] = None,
        distance: RingDistance = chebyshev_distance,
    ):
        self.policy = policy or default_search_policy()
        self.distance = distance

    def rank(self, order: Location, drivers: Sequence[Driver], bounds: MapBounds) -> List[Driver]:
        found: List[Driver] = []
        if not drivers:
            return found

        max_results = self.policy.max_results
        # keyed by driver id: a repeated id is never admitted twice
        added_driver_ids: Set[int] = set()
        current_range = 0
        max_range = bounds.max_range

        while len(found) < max_results and current_range <= max_range:
            for driver in drivers:
                if driver.id in added_driver_ids:
                    continue

                if self.distance(order, driver.position) == current_range:
                    found.append(driver)
                    added_driver_ids.add(driver.id)
                    if len(found) >= max_results:
                        logger.debug(
                            "expanding ring search: cap reached at range %d (%d drivers)",
                            current_range, len(drivers),
                        )
                        return found
            current_range += 1

        logger.debug(
            "expanding ring search: %d drivers -> %d found, stopped at range %d",
            len(drivers), len(found), current_range - 1,
        )
        return found
