import math
from dataclasses import dataclass
from typing import List

from .errors import InvalidConfig

# Dimensions below this make the room-size formulas degenerate.
MIN_SIDE = 12
DEFAULT_COIN_PROBABILITY = 0.5
DEFAULT_MAX_ATTEMPTS = 50_000


def ilog2(n: int) -> int:
    # Exact floor(log2(n)) for n >= 1.
    return n.bit_length() - 1


@dataclass(frozen=True)
class MazeConfig:
    width: int
    height: int
    room_size_min: int
    room_size_max: int
    room_count: int
    safe_room_count: int
    coin_probability: float = DEFAULT_COIN_PROBABILITY
    # Rejection-sampling cap per room before GenerationFailed.
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    # Extra corridors between non-neighbouring rooms on top of the ring.
    extra_connections: int = 0

    def problems(self) -> List[str]:
        """List every violated sanity clause (empty when the config is sane)."""
        out = []
        side = min(self.width, self.height)
        if self.room_size_min > self.room_size_max:
            out.append(f"room_size_min {self.room_size_min} > room_size_max {self.room_size_max}")
        if self.room_size_min <= 0:
            out.append(f"room_size_min {self.room_size_min} must be positive")
        if side < max(self.room_size_max + 2, 10):
            out.append(f"smallest side {side} < max(room_size_max + 2, 10)")
        if self.room_count <= 0:
            out.append(f"room_count {self.room_count} must be positive")
        if self.safe_room_count > self.room_count:
            out.append(f"safe_room_count {self.safe_room_count} > room_count {self.room_count}")
        return out

    def check(self) -> bool:
        return not self.problems()

    def validate(self) -> "MazeConfig":
        problems = self.problems()
        if problems:
            raise InvalidConfig(problems)
        return self


def derive_config(
    width: int,
    height: int,
    *,
    coin_probability: float = DEFAULT_COIN_PROBABILITY,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    extra_connections: int = 0,
) -> MazeConfig:
    """
    Derive every generation parameter from the grid size alone.
    Width and height are clamped up to MIN_SIDE; nothing else can fail.
    """
    width = max(width, MIN_SIDE)
    height = max(height, MIN_SIDE)
    side = min(width, height)
    room_size_min = ilog2(side)
    room_size_max = math.floor(float(side) ** 0.7)
    room_count = max(3, (width - 1) * (height - 1) // (room_size_max * room_size_max))
    return MazeConfig(
        width=width,
        height=height,
        room_size_min=room_size_min,
        room_size_max=room_size_max,
        room_count=room_count,
        safe_room_count=ilog2(room_count),
        coin_probability=coin_probability,
        max_attempts=max_attempts,
        extra_connections=extra_connections,
    )
