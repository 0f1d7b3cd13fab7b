# src/mistymaze/mapgen/carve.py
# Room stamping and L-shaped corridors. Every write goes through
# Grid.upgrade/set so a Safe cell is never lowered.

from typing import List, Sequence, Tuple

from ..cells import Cell
from ..grid import Grid
from ..maze import Room

XY = Tuple[int, int]


def carve_room(grid: Grid, room: Room, safe: bool) -> None:
    """Safe rooms force every footprint cell to Safe; others only open Blocked cells."""
    for x, y in room.cells():
        if safe:
            grid.set(x, y, Cell.SAFE)
        else:
            grid.upgrade(x, y, Cell.OPEN)


def connect_points(grid: Grid, p1: XY, p2: XY) -> int:
    """
    Carve an L: horizontal along p1's row, then vertical along p2's column.
    - points are swapped whole so p1.x <= p2.x
    - then only the y components are swapped so p1.y <= p2.y
    Only Blocked -> Open happens. Returns how many cells changed.
    """
    if p1[0] > p2[0]:
        p1, p2 = p2, p1
    (x1, y1), (x2, y2) = p1, p2

    changed = 0
    for x in range(x1, x2 + 1):
        changed += grid.upgrade(x, y1, Cell.OPEN)

    if y1 > y2:
        y1, y2 = y2, y1
    for y in range(y1, y2 + 1):
        changed += grid.upgrade(x2, y, Cell.OPEN)
    return changed


def ring_edges(room_count: int) -> List[Tuple[int, int]]:
    # i -> i+1 in placement order, closing with last -> first.
    return [(i, (i + 1) % room_count) for i in range(room_count)]


def extra_edges(room_count: int, count: int, rng) -> List[Tuple[int, int]]:
    """Up to `count` random pairs (i, j) with j >= i + 2, skipping the ring's wrap edge."""
    if count <= 0:
        return []
    pairs = [
        (i, j)
        for i in range(room_count)
        for j in range(i + 2, room_count)
        if not (i == 0 and j == room_count - 1)
    ]
    rng.shuffle(pairs)
    return pairs[:count]


def connect_rooms(
    grid: Grid,
    rooms: Sequence[Room],
    rng,
    extra: int = 0,
) -> List[Tuple[XY, XY]]:
    """
    Connect every room to the next one (cyclically), then add `extra`
    corridors between non-neighbouring rooms. Endpoints are random cells of
    each room; for every edge room a is drawn before room b.
    Returns the corridor endpoints in carve order.
    """
    corridors: List[Tuple[XY, XY]] = []
    edges = ring_edges(len(rooms)) + extra_edges(len(rooms), extra, rng)
    for a, b in edges:
        p1 = rooms[a].random_point(rng)
        p2 = rooms[b].random_point(rng)
        connect_points(grid, p1, p2)
        corridors.append((p1, p2))
    return corridors
