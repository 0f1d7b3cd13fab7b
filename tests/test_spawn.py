# tests/test_spawn.py
import pytest

from mistymaze.cells import Cell
from mistymaze.errors import NoSafeOrigin
from mistymaze.grid import Grid
from mistymaze.mapgen.carve import carve_room
from mistymaze.mapgen.spawn import FALLBACK_ORIGIN, scatter_coins, select_origin
from mistymaze.maze import Room
from mistymaze.rng import PMRandom

ROOMS = [Room(1, 1, 3, 3), Room(6, 1, 3, 3), Room(1, 6, 4, 4), Room(7, 7, 3, 3)]

def test_origin_from_first_safe_room():
    for seed in range(1, 20):
        origin = select_origin(ROOMS, [False, True, False, True], PMRandom.from_seed(seed))
        assert ROOMS[1].contains(origin), f"origin {origin} not in first safe room (seed {seed})"

def test_no_safe_room_warns_and_falls_back():
    with pytest.warns(NoSafeOrigin):
        origin = select_origin(ROOMS, [False] * 4, PMRandom.from_seed(1))
    assert origin == FALLBACK_ORIGIN == (0, 0)

def make_grid():
    g = Grid.filled(12, 12)
    carve_room(g, ROOMS[0], safe=True)
    carve_room(g, ROOMS[2], safe=False)
    return g

def test_coins_skip_blocked_and_origin():
    g = make_grid()
    origin = (2, 2)
    coins = scatter_coins(g, origin, 0.5, PMRandom.from_seed(4))
    assert origin not in coins
    assert all(g.get(x, y) != Cell.BLOCKED for x, y in coins)
    assert coins == sorted(coins)  # raster scan order

def test_coin_probability_extremes():
    g = make_grid()
    origin = (2, 2)
    eligible = [p for p in g.walkable_cells() if p != origin]
    assert scatter_coins(g, origin, 1.0, PMRandom.from_seed(4)) == eligible
    assert scatter_coins(g, origin, 0.0, PMRandom.from_seed(4)) == []

def test_coin_rate_roughly_matches_probability():
    g = Grid.filled(40, 40)
    carve_room(g, Room(1, 1, 38, 38), safe=False)
    coins = scatter_coins(g, (1, 1), 0.25, PMRandom.from_seed(9))
    rate = len(coins) / (38 * 38 - 1)
    assert 0.2 < rate < 0.3
