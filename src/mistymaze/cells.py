# src/mistymaze/cells.py
# Cell classes for the maze grid. Integer order is overwrite priority:
# Safe > Open > Blocked, and carving only ever moves a cell upward.

from enum import IntEnum


class Cell(IntEnum):
    BLOCKED = 0
    OPEN = 1
    SAFE = 2


def upgrade(current: Cell, new: Cell) -> Cell:
    """Return whichever of the two cells ranks higher (never downgrades)."""
    return new if new > current else current


def is_walkable(cell: Cell) -> bool:
    return cell != Cell.BLOCKED
