# src/mistymaze/connectivity.py
# Read-only queries over a finished grid: flood fill and the wall outline
# a front end needs colliders for.

from collections import deque
from typing import Deque, Set, Tuple

from .cells import Cell, is_walkable
from .grid import CellGrid

XY = Tuple[int, int]

DIRS4 = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIRS8 = DIRS4 + ((1, 1), (1, -1), (-1, 1), (-1, -1))


def reachable_from(grid: CellGrid, start: XY) -> Set[XY]:
    """4-connected flood fill over walkable cells. Empty if `start` is Blocked."""
    if not is_walkable(grid.get(*start)):
        return set()
    seen = {start}
    q: Deque[XY] = deque([start])
    while q:
        x, y = q.popleft()
        for dx, dy in DIRS4:
            nx, ny = x + dx, y + dy
            if (nx, ny) in seen or not grid.in_bounds(nx, ny):
                continue
            if is_walkable(grid.get(nx, ny)):
                seen.add((nx, ny))
                q.append((nx, ny))
    return seen


def is_wall(grid: CellGrid, x: int, y: int) -> bool:
    """A Blocked cell with at least one walkable 8-neighbour."""
    if grid.get(x, y) != Cell.BLOCKED:
        return False
    for dx, dy in DIRS8:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny) and is_walkable(grid.get(nx, ny)):
            return True
    return False


def wall_cells(grid: CellGrid) -> Set[XY]:
    return {(x, y) for (x, y) in grid.coords() if is_wall(grid, x, y)}
