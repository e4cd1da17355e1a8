"""
Purpose: The shared contract every search strategy honours.
What it does:
Declares DriverRanker so the dispatcher (or the benchmark) can swap
strategies without caring which one it holds.
"""

from typing import List, Protocol, Sequence

from drivers.models import Driver, Location, MapBounds


class DriverRanker(Protocol):
    def rank(self, order: Location, drivers: Sequence[Driver], bounds: MapBounds) -> List[Driver]:
        """
        Return at most `max_results` drivers closest to `order`, best first.

        `bounds` is part of the contract for every strategy, even those
        that ignore it.
        """
        ...
