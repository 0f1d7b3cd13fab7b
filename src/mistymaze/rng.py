import random
from dataclasses import dataclass
from typing import MutableSequence, Optional, Union

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def normalize_seed(seed: int) -> int:
    # State must lie in 1..M-1; zero is a fixed point of the recurrence.
    s = seed % M
    return s if s else 1


@dataclass
class PMRandom:
    """
    Park–Miller minimal-standard stream with the slice of the random.Random
    API the generator draws from. Unlike random.Random its output is pinned
    to the recurrence, so seeded mazes stay identical across Python versions.
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(normalize_seed(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def randrange(self, start: int, stop: Optional[int] = None) -> int:
        if stop is None:
            start, stop = 0, start
        n = stop - start
        if n <= 0:
            raise ValueError(f"empty range for randrange({start}, {stop})")
        return start + (self.next32() - 1) % n

    def randint(self, a: int, b: int) -> int:
        return self.randrange(a, b + 1)

    def random(self) -> float:
        # Uniform in [0, 1): states are 1..M-1.
        return (self.next32() - 1) / (M - 1)

    def shuffle(self, seq: MutableSequence) -> None:
        # Fisher–Yates, same walk direction as random.Random.shuffle.
        for i in range(len(seq) - 1, 0, -1):
            j = self.randrange(i + 1)
            seq[i], seq[j] = seq[j], seq[i]


RandomSource = Union[random.Random, PMRandom]


def make_rng(seed: Optional[int] = None) -> RandomSource:
    """Seeded PMRandom when a seed is given, else an OS-seeded random.Random."""
    if seed is None:
        return random.Random()
    return PMRandom.from_seed(seed)
