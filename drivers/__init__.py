"""
Drivers domain package.

Public API:
- Domain models: Location, Driver, MapBounds
- Distance metrics: euclidean_distance, manhattan_distance, chebyshev_distance
- Configuration: SearchPolicy, default_search_policy, search_policy_from_env
"""
from .models import Location, Driver, MapBounds
from .distance import euclidean_distance, manhattan_distance, chebyshev_distance
from .policy import SearchPolicy, default_search_policy, search_policy_from_env

__all__ = [
    "Location",
    "Driver",
    "MapBounds",
    "euclidean_distance",
    "manhattan_distance",
    "chebyshev_distance",
    "SearchPolicy",
    "default_search_policy",
    "search_policy_from_env",
]
