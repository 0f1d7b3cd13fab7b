from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

from .grid import FrozenGrid

XY = Tuple[int, int]


class Room(NamedTuple):
    x: int
    y: int
    w: int
    h: int

    def cells(self) -> Iterator[XY]:
        for ix in range(self.x, self.x + self.w):
            for iy in range(self.y, self.y + self.h):
                yield ix, iy

    def contains(self, p: XY) -> bool:
        px, py = p
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    def overlaps(self, other: "Room") -> bool:
        # Open-interval intersection: rooms sharing only an edge do not overlap.
        return (
            max(self.x, other.x) < min(self.x + self.w, other.x + other.w)
            and max(self.y, other.y) < min(self.y + self.h, other.y + other.h)
        )

    def random_point(self, rng) -> XY:
        return (
            rng.randrange(self.x, self.x + self.w),
            rng.randrange(self.y, self.y + self.h),
        )


@dataclass(frozen=True)
class Maze:
    """
    Finished level. Consumers read `cells[x][y]`, `coins` and `origin`;
    `rooms` and `safe` (one flag per room, placement order) are kept for
    debugging. `cells` is a FrozenGrid snapshot, so the maze cannot be
    written after generate() hands it out.
    """
    width: int
    height: int
    origin: XY
    cells: FrozenGrid
    coins: Tuple[XY, ...]
    rooms: Tuple[Room, ...]
    safe: Tuple[bool, ...]

    @property
    def safe_rooms(self) -> Tuple[Room, ...]:
        return tuple(r for r, s in zip(self.rooms, self.safe) if s)

    @property
    def has_safe_origin(self) -> bool:
        return any(self.safe)
