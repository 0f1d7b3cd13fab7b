# src/mistymaze/mapgen/spawn.py
import logging
import warnings
from typing import List, Sequence, Tuple

from ..cells import Cell
from ..errors import NoSafeOrigin
from ..grid import Grid
from ..maze import Room

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

FALLBACK_ORIGIN: XY = (0, 0)


def select_origin(rooms: Sequence[Room], safe: Sequence[bool], rng) -> XY:
    """
    Random cell of the first safe room in placement order.
    Without any safe room the origin falls back to (0, 0) and a
    NoSafeOrigin warning is issued; that cell is usually Blocked.
    """
    for room, is_safe in zip(rooms, safe):
        if is_safe:
            return room.random_point(rng)
    logger.warning("no safe room among %d rooms; origin falls back to %s", len(rooms), FALLBACK_ORIGIN)
    warnings.warn(
        f"no safe room among {len(rooms)} rooms; origin falls back to {FALLBACK_ORIGIN}",
        NoSafeOrigin,
        stacklevel=3,
    )
    return FALLBACK_ORIGIN


def scatter_coins(grid: Grid, origin: XY, probability: float, rng) -> List[XY]:
    # One Bernoulli draw per eligible cell, raster order.
    coins = []
    for x, y in grid.coords():
        if grid.get(x, y) == Cell.BLOCKED or (x, y) == origin:
            continue
        if rng.random() < probability:
            coins.append((x, y))
    return coins
