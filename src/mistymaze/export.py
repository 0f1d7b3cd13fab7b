# src/mistymaze/export.py
"""
Plain-data dumps of a Maze for debugging and the tools/ scripts.

Row-major matrices (rows[y][x]) use the cell codes 0=Blocked, 1=Open,
2=Safe, plus COIN and ORIGIN markers layered on top when requested.
"""

import csv
from typing import List

from .cells import Cell
from .grid import FrozenGrid, Grid
from .maze import Maze

COIN = 3
ORIGIN = 4

GLYPHS = {
    Cell.BLOCKED: "#",
    Cell.OPEN: ".",
    Cell.SAFE: ":",
    COIN: "o",
    ORIGIN: "@",
}


def as_rows(maze: Maze, markers: bool = True) -> List[List[int]]:
    rows = [[int(maze.cells.get(x, y)) for x in range(maze.width)] for y in range(maze.height)]
    if markers:
        for x, y in maze.coins:
            rows[y][x] = COIN
        ox, oy = maze.origin
        rows[oy][ox] = ORIGIN
    return rows


def to_text(maze: Maze, markers: bool = True) -> str:
    return "\n".join(
        "".join(GLYPHS[v] for v in row) for row in as_rows(maze, markers=markers)
    )


def write_tsv(maze: Maze, path: str) -> None:
    """Cells only (no markers), one row per y."""
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", lineterminator="\n")
        w.writerows(as_rows(maze, markers=False))


def read_tsv(path: str) -> FrozenGrid:
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([Cell(int(v)) for v in line.split("\t")])
    if not rows or any(len(r) != len(rows[0]) for r in rows):
        raise ValueError(f"{path}: expected a non-empty rectangular grid")
    grid = Grid.filled(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, v in enumerate(row):
            grid.set(x, y, v)
    return grid.freeze()
