"""
Purpose: Core data models for the drivers domain.
What it does:
Defines the grid Location, the Driver standing on it and the MapBounds of the
grid. Everything here is immutable; search strategies only ever read these.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """
    A point on the abstract city grid (integer coordinates, no projection).
    """
    x: int
    y: int


@dataclass(frozen=True)
class Driver:
    """
    A purely stateless representation of a Driver at a specific point in time.
    The id is what the caller uses to tell drivers apart.
    """
    id: int
    position: Location

    @classmethod
    def new(cls, driver_id: int, x: int, y: int) -> Driver:
        return cls(id=driver_id, position=Location(x, y))


@dataclass(frozen=True)
class MapBounds:
    """
    Extent of the grid. Only the expanding ring search looks at it,
    to know when to stop growing the ring.
    """
    width: int
    height: int

    @property
    def max_range(self) -> int:
        return max(self.width, self.height)

    def center(self) -> Location:
        return Location(self.width // 2, self.height // 2)
