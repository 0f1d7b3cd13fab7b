# src/mistymaze/state.py
# The orchestrating layer's single live maze. A new maze is fully built
# before it replaces the old one, so observers never see a partial grid.

from __future__ import annotations

import logging
from typing import Optional

from .config import derive_config
from .mapgen.generator import generate
from .maze import Maze

logger = logging.getLogger(__name__)


class MazeState:
    def __init__(self, maze: Optional[Maze] = None) -> None:
        self.current: Optional[Maze] = maze
        self.generation = 0 if maze is None else 1

    def replace(self, maze: Maze) -> Maze:
        self.current = maze
        self.generation += 1
        return maze

    def regenerate(self, width: int, height: int, rng=None, **overrides) -> Maze:
        """
        Generate a fresh maze and swap it in. On MazeError the previous maze
        is kept and the error propagates.
        """
        maze = generate(derive_config(width, height, **overrides), rng)
        logger.debug("maze generation %d ready", self.generation + 1)
        return self.replace(maze)
