import pytest

from drivers.distance import chebyshev_distance
from drivers.models import Driver, Location, MapBounds
from drivers.policy import SearchPolicy
from search import ExpandingRingRanker


@pytest.fixture
def order_location():
    return Location(0, 0)

@pytest.fixture
def bounds():
    return MapBounds(100, 100)


def test_should_not_return_duplicates(order_location, bounds):
    drivers = [Driver.new(1, 1, 1), Driver.new(2, 0, 5)]

    result = ExpandingRingRanker().rank(order_location, drivers, bounds)

    assert [driver.id for driver in result].count(1) == 1
    assert len(result) == 2

def test_guard_holds_when_a_driver_matches_several_rings(order_location, bounds):
    """
    A metric that reports a different ring on each lookup would admit the same
    driver on every ring without the admission guard.
    """
    calls = {"count": 0}

    def wandering_distance(order, position):
        calls["count"] += 1
        return calls["count"] - 1

    drivers = [Driver.new(1, 3, 3)]

    result = ExpandingRingRanker(distance=wandering_distance).rank(order_location, drivers, bounds)

    assert result == drivers

def test_duplicate_ids_are_admitted_once(order_location, bounds):
    first = Driver.new(1, 2, 2)
    same_id_elsewhere = Driver.new(1, 1, 0)
    other = Driver.new(2, 3, 0)

    result = ExpandingRingRanker().rank(order_location, [first, same_id_elsewhere, other], bounds)

    # the copy on ring 1 is reached first, so the one on ring 2 is dropped
    assert result == [same_id_elsewhere, other]

def test_equal_but_distinct_instances_count_as_one_driver(order_location, bounds):
    a = Driver.new(4, 2, 2)
    b = Driver.new(4, 2, 2)
    assert a is not b

    result = ExpandingRingRanker().rank(order_location, [a, b], bounds)

    assert len(result) == 1
    assert result[0] is a

def test_ring_order_is_input_order_not_true_distance(order_location, bounds):
    corner = Driver.new(1, 3, 3)   # ring 3, euclidean 4.24
    axis = Driver.new(2, 3, 0)     # ring 3, euclidean 3

    result = ExpandingRingRanker().rank(order_location, [corner, axis], bounds)

    assert result == [corner, axis]

def test_stops_mid_ring_once_cap_is_reached(order_location, bounds):
    ring_one = [Driver.new(i, 1, y) for i, y in enumerate([-1, 0, 1])]
    ring_one += [Driver.new(3, -1, 0), Driver.new(4, 0, 1), Driver.new(5, 0, -1)]
    closer = Driver.new(6, 0, 0)

    result = ExpandingRingRanker().rank(order_location, ring_one + [closer], bounds)

    assert result[0] == closer
    assert [driver.id for driver in result] == [6, 0, 1, 2, 3]

def test_drivers_outside_the_map_range_are_not_found(order_location):
    drivers = [Driver.new(1, 2, 0), Driver.new(2, 50, 50)]

    result = ExpandingRingRanker().rank(order_location, drivers, MapBounds(10, 20))

    assert result == [drivers[0]]

def test_driver_on_the_last_ring_is_found(order_location):
    drivers = [Driver.new(1, 20, 3)]

    result = ExpandingRingRanker().rank(order_location, drivers, MapBounds(10, 20))

    assert result == drivers

def test_honours_a_custom_cap(order_location, bounds):
    drivers = [Driver.new(i, i, 0) for i in range(10)]

    result = ExpandingRingRanker(policy=SearchPolicy(max_results=2)).rank(order_location, drivers, bounds)

    assert [driver.id for driver in result] == [0, 1]

def test_results_never_skip_a_closer_ring(bounds):
    order = bounds.center()
    drivers = [Driver.new(i, (i * 37) % 100, (i * 53) % 100) for i in range(80)]

    result = ExpandingRingRanker().rank(order, drivers, bounds)
    rings = [chebyshev_distance(order, driver.position) for driver in result]

    assert rings == sorted(rings)
    remaining = [d for d in drivers if d not in result]
    assert all(chebyshev_distance(order, d.position) >= rings[-1] for d in remaining)
