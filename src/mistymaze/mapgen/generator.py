# src/mistymaze/mapgen/generator.py
# Level pipeline: grid -> rooms -> carve -> connect -> origin -> coins.

import logging
import random
from typing import Optional

from ..config import MazeConfig, derive_config
from ..grid import Grid
from ..maze import Maze
from ..rng import make_rng
from .carve import carve_room, connect_rooms
from .placement import assign_safe_flags, place_rooms
from .spawn import scatter_coins, select_origin

logger = logging.getLogger(__name__)


def generate(config: MazeConfig, rng=None) -> Maze:
    """
    Build one Maze from `config`, drawing every random choice from `rng`
    (random.Random, PMRandom, or anything with randrange/randint/random/shuffle).
    Either returns a complete Maze or raises before anything is handed out.
    """
    if rng is None:
        rng = random.Random()
    logger.debug("generating with %s", config)

    grid = Grid.filled(config.width, config.height)
    safe = assign_safe_flags(config, rng)
    rooms = place_rooms(config, rng)

    for room, is_safe in zip(rooms, safe):
        carve_room(grid, room, is_safe)

    connect_rooms(grid, rooms, rng, extra=config.extra_connections)
    origin = select_origin(rooms, safe, rng)
    coins = scatter_coins(grid, origin, config.coin_probability, rng)

    logger.info(
        "maze %dx%d: %d rooms (%d safe), %d coins, origin %s",
        config.width, config.height, len(rooms), sum(safe), len(coins), origin,
    )
    return Maze(
        width=config.width,
        height=config.height,
        origin=origin,
        cells=grid.freeze(),
        coins=tuple(coins),
        rooms=tuple(rooms),
        safe=tuple(safe),
    )


def generate_maze(width: int, height: int, *, seed: Optional[int] = None, **overrides) -> Maze:
    """Derive the config from the size and generate; a seed makes it reproducible."""
    return generate(derive_config(width, height, **overrides), make_rng(seed))
