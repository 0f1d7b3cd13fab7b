# tests/test_placement.py
import random
from dataclasses import replace
from itertools import combinations

import pytest

from mistymaze.config import derive_config
from mistymaze.errors import GenerationFailed, InvalidConfig
from mistymaze.mapgen.placement import assign_safe_flags, overlaps, place_rooms
from mistymaze.maze import Room
from mistymaze.rng import PMRandom

def test_overlap_is_open_interval():
    a = Room(1, 1, 3, 3)
    assert overlaps(a, Room(3, 3, 3, 3))          # shares cell (3,3)
    assert not overlaps(a, Room(4, 1, 3, 3))      # touching edge
    assert not overlaps(a, Room(1, 4, 3, 3))
    assert not overlaps(a, Room(4, 4, 2, 2))      # touching corner
    assert overlaps(a, Room(0, 0, 10, 10))        # containment
    assert overlaps(Room(2, 0, 1, 10), Room(0, 2, 10, 1))  # cross

@pytest.mark.parametrize("w,h", [(12, 12), (40, 30), (30, 40), (80, 50)])
def test_rooms_disjoint_sized_and_inside_margin(w, h):
    c = derive_config(w, h)
    for seed in range(1, 6):
        rooms = place_rooms(c, PMRandom.from_seed(seed))
        assert len(rooms) == c.room_count
        for r in rooms:
            assert c.room_size_min <= r.w <= c.room_size_max
            assert c.room_size_min <= r.h <= c.room_size_max
            assert r.x >= 1 and r.y >= 1, f"{r} touches border (seed {seed})"
            assert r.x + r.w <= c.width - 1 and r.y + r.h <= c.height - 1, f"{r} touches border (seed {seed})"
        for a, b in combinations(rooms, 2):
            assert not overlaps(a, b), f"{a} overlaps {b} (seed {seed})"

def test_safe_flags_exact_count():
    c = derive_config(80, 50)
    for seed in range(10):
        flags = assign_safe_flags(c, random.Random(seed))
        assert len(flags) == c.room_count
        assert sum(flags) == c.safe_room_count

def test_safe_flags_are_shuffled():
    # The safe rooms must not always be the first ones.
    c = derive_config(80, 50)
    firsts = {tuple(assign_safe_flags(c, PMRandom.from_seed(s))[:c.safe_room_count]) for s in range(1, 30)}
    assert len(firsts) > 1

def test_retry_cap_raises_generation_failed():
    # 50 rooms of at least 3x3 cannot fit in a 10x10 interior.
    c = replace(derive_config(12, 12), room_count=50, max_attempts=200)
    with pytest.raises(GenerationFailed) as exc:
        place_rooms(c, PMRandom.from_seed(5))
    assert 1 <= exc.value.room_index <= 9
    assert exc.value.attempts == 200

def test_zero_attempts_fails_first_room():
    c = replace(derive_config(12, 12), max_attempts=0)
    with pytest.raises(GenerationFailed) as exc:
        place_rooms(c, PMRandom.from_seed(1))
    assert exc.value.room_index == 0

def test_room_that_cannot_fit_is_invalid():
    c = replace(derive_config(12, 12), room_size_max=11)
    with pytest.raises(InvalidConfig):
        place_rooms(c, PMRandom.from_seed(1))
