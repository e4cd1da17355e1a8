"""
Purpose: Distance math on the grid.
What it does:
Three metrics between two Locations. Each search strategy picks one of them.
"""

import math

from .models import Location


def euclidean_distance(a: Location, b: Location) -> float:
    """Straight-line distance."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def manhattan_distance(a: Location, b: Location) -> int:
    """Grid (city block) distance: |dx| + |dy|."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def chebyshev_distance(a: Location, b: Location) -> int:
    """
    max(|dx|, |dy|). All points with the same value form a square ring
    around `a`.
    """
    return max(abs(a.x - b.x), abs(a.y - b.y))
