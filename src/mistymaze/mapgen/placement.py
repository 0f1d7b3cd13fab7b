# src/mistymaze/mapgen/placement.py
import logging
from typing import List

from ..config import MazeConfig
from ..errors import GenerationFailed, InvalidConfig
from ..maze import Room

logger = logging.getLogger(__name__)


def overlaps(a: Room, b: Room) -> bool:
    return a.overlaps(b)


def assign_safe_flags(config: MazeConfig, rng) -> List[bool]:
    """
    One flag per room index: exactly safe_room_count True, then shuffled so
    safety is independent of placement order.
    """
    safe = min(config.safe_room_count, config.room_count)
    flags = [True] * safe + [False] * (config.room_count - safe)
    rng.shuffle(flags)
    return flags


def _check_room_fits(config: MazeConfig) -> None:
    problems = []
    if config.room_size_min < 1:
        problems.append(f"room_size_min {config.room_size_min} must be positive")
    if config.room_size_min > config.room_size_max:
        problems.append(f"room_size_min {config.room_size_min} > room_size_max {config.room_size_max}")
    if config.room_size_max + 2 > min(config.width, config.height):
        problems.append(
            f"room_size_max {config.room_size_max} leaves no margin in a "
            f"{config.width}x{config.height} grid"
        )
    if problems:
        raise InvalidConfig(problems)


def draw_candidate(config: MazeConfig, rng) -> Room:
    """
    Draw order is w, h, x, y:
    - w, h uniform in [room_size_min, room_size_max]
    - x uniform in [1, width - w - 1], so cells stay inside [1, width - 1)
    - y likewise against height
    """
    w = rng.randint(config.room_size_min, config.room_size_max)
    h = rng.randint(config.room_size_min, config.room_size_max)
    # x + w may reach width - 1: the last interior column is usable.
    x = rng.randrange(1, config.width - w)
    y = rng.randrange(1, config.height - h)
    return Room(x, y, w, h)


def place_rooms(config: MazeConfig, rng) -> List[Room]:
    """
    Rejection-sample room_count pairwise non-overlapping rooms, in placement
    order. Raises GenerationFailed when one room burns through max_attempts.
    """
    _check_room_fits(config)
    rooms: List[Room] = []
    for index in range(config.room_count):
        for attempt in range(1, config.max_attempts + 1):
            room = draw_candidate(config, rng)
            if not any(room.overlaps(prev) for prev in rooms):
                break
        else:
            raise GenerationFailed(index, config.max_attempts)
        logger.debug("room %d placed at %s after %d attempt(s)", index, room, attempt)
        rooms.append(room)
    return rooms
