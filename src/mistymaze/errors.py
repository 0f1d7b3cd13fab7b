# src/mistymaze/errors.py
from typing import List


class MazeError(Exception):
    pass


class InvalidConfig(MazeError):
    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("invalid maze config: " + "; ".join(self.problems))


class GenerationFailed(MazeError):
    """A room could not be placed without overlap within the retry cap."""

    def __init__(self, room_index: int, attempts: int):
        self.room_index = room_index
        self.attempts = attempts
        super().__init__(f"room {room_index} not placed after {attempts} attempts")


class NoSafeOrigin(UserWarning):
    """No room was flagged safe; the origin fell back to (0, 0)."""
