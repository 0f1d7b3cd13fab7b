from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

from .cells import Cell, is_walkable, upgrade

XY = Tuple[int, int]


class _Cells:
    # Read side shared by the work grid and the frozen snapshot.
    width: int
    height: int
    buf: Sequence[Cell]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return x * self.height + y

    def get(self, x: int, y: int) -> Cell:
        return self.buf[self.idx(x, y)]

    def __getitem__(self, x: int) -> Sequence[Cell]:
        # Column slice so consumers can read cells[x][y].
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} outside grid of width {self.width}")
        return self.buf[x * self.height:(x + 1) * self.height]

    def __len__(self) -> int:
        return self.width

    def coords(self) -> Iterator[XY]:
        """Raster order: increasing x, then increasing y."""
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y)

    def walkable_cells(self) -> Iterator[XY]:
        for (x, y) in self.coords():
            if is_walkable(self.get(x, y)):
                yield (x, y)

    def count(self, v: Cell) -> int:
        return self.buf.count(v)


@dataclass
class Grid(_Cells):
    """Mutable work buffer used while carving."""
    width: int
    height: int
    buf: List[Cell]

    @classmethod
    def filled(cls, width: int, height: int, cell: Cell = Cell.BLOCKED) -> "Grid":
        # Fresh grids start fully blocked; rooms and corridors are carved out.
        return cls(width=width, height=height, buf=[cell] * (width * height))

    def set(self, x: int, y: int, v: Cell) -> None:
        self.buf[self.idx(x, y)] = v

    def upgrade(self, x: int, y: int, v: Cell) -> bool:
        """Raise (x, y) to `v` if that ranks higher. Returns True if it changed."""
        i = self.idx(x, y)
        before = self.buf[i]
        self.buf[i] = upgrade(before, v)
        return self.buf[i] != before

    def copy(self) -> "Grid":
        return Grid(width=self.width, height=self.height, buf=list(self.buf))

    def freeze(self) -> "FrozenGrid":
        return FrozenGrid(width=self.width, height=self.height, buf=tuple(self.buf))


@dataclass(frozen=True)
class FrozenGrid(_Cells):
    """Read-only snapshot handed out inside a finished Maze."""
    width: int
    height: int
    buf: Tuple[Cell, ...]

    def thaw(self) -> Grid:
        return Grid(width=self.width, height=self.height, buf=list(self.buf))


CellGrid = Union[Grid, FrozenGrid]
