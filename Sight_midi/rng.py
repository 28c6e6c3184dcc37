import math
from typing import Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


class Mulberry32:
    """
    Seeded 32-bit generator. Same seed -> same stream on every platform,
    so a score can be rebuilt from (settings, seed) alone.
    """
    def __init__(self, seed: int):
        self.state = seed & MASK32

    def next_uint32(self) -> int:
        self.state = (self.state + 0x6D2B79F5) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return (t ^ (t >> 14)) & MASK32

    def random(self) -> float:
        return self.next_uint32() / 4294967296.0

    def choice(self, seq: Sequence[T]) -> T:
        return seq[math.floor(self.random() * len(seq))]
