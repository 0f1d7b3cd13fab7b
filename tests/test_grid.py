# tests/test_grid.py
import pytest

from mistymaze.cells import Cell
from mistymaze.grid import FrozenGrid, Grid

def test_filled_starts_blocked():
    g = Grid.filled(15, 12)
    assert len(g.buf) == 15 * 12
    assert g.count(Cell.BLOCKED) == 15 * 12

def test_flat_index_is_column_major():
    g = Grid.filled(15, 12)
    assert g.idx(0, 0) == 0
    assert g.idx(0, 11) == 11
    assert g.idx(1, 0) == 12
    assert g.idx(14, 11) == 15 * 12 - 1

def test_get_set_and_column_access():
    g = Grid.filled(15, 12)
    g.set(3, 7, Cell.SAFE)
    assert g.get(3, 7) == Cell.SAFE
    assert g[3][7] == Cell.SAFE
    assert g[7][3] == Cell.BLOCKED
    assert len(g[3]) == 12
    assert len(g) == 15

@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (15, 0), (0, 12)])
def test_out_of_bounds_raises(x, y):
    g = Grid.filled(15, 12)
    with pytest.raises(IndexError):
        g.get(x, y)
    with pytest.raises(IndexError):
        g.set(x, y, Cell.OPEN)

def test_upgrade_reports_change():
    g = Grid.filled(12, 12)
    assert g.upgrade(2, 2, Cell.OPEN) is True
    assert g.upgrade(2, 2, Cell.OPEN) is False
    assert g.upgrade(2, 2, Cell.SAFE) is True
    assert g.upgrade(2, 2, Cell.OPEN) is False
    assert g.get(2, 2) == Cell.SAFE

def test_coords_raster_order():
    g = Grid.filled(12, 13)
    coords = list(g.coords())
    assert coords[0] == (0, 0) and coords[1] == (0, 1)
    assert coords[13] == (1, 0)
    assert coords == sorted(coords)

def test_copy_is_independent():
    g = Grid.filled(12, 12)
    c = g.copy()
    c.set(1, 1, Cell.OPEN)
    assert g.get(1, 1) == Cell.BLOCKED
    assert list(c.walkable_cells()) == [(1, 1)]

def test_freeze_snapshot():
    g = Grid.filled(12, 12)
    g.set(2, 3, Cell.OPEN)
    f = g.freeze()
    assert isinstance(f, FrozenGrid) and isinstance(f.buf, tuple)
    assert f.get(2, 3) == Cell.OPEN and f[2][3] == Cell.OPEN
    g.set(2, 3, Cell.SAFE)
    assert f.get(2, 3) == Cell.OPEN   # later writes do not leak in
    assert not hasattr(f, "set")
    assert f.thaw() == Grid(width=12, height=12, buf=list(f.buf))
    same = Grid.filled(12, 12)
    same.set(2, 3, Cell.OPEN)
    assert f == same.freeze() and hash(f) == hash(same.freeze())
