"""
Purpose: Search by "city block" (Manhattan) distance.
What it does:
Same shape as the Euclidean search, but distance is |dx| + |dy| which is what
a car moving along grid streets actually drives.
"""

import logging
from typing import List, Optional, Sequence

from drivers.distance import manhattan_distance
from drivers.models import Driver, Location, MapBounds
from drivers.policy import SearchPolicy, default_search_policy

logger = logging.getLogger(__name__)


class ManhattanRanker:
    def __init__(self, policy: Optional[SearchPolicy] = None):
        self.policy = policy or default_search_policy()

    def rank(self, order: Location, drivers: Sequence[Driver], bounds: MapBounds) -> List[Driver]:
        ranked = sorted(drivers, key=lambda driver: manhattan_distance(order, driver.position))
        found = ranked[:self.policy.max_results]

        logger.debug("manhattan search: %d drivers -> %d found", len(drivers), len(found))
        return found
