"""Multi-stream Lehmer random number generator.

The generator supplies 256 independent streams of uniformly distributed
numbers in (0, 1), each one a multiplicative congruential sequence modulo
the Mersenne prime 2**31 - 1.
"""

from __future__ import annotations

import math
import time
from typing import Callable

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789

_PROMPT = "\nEnter a positive integer seed (9 digits or less) >> "


def _lehmer_step(state: int, multiplier: int) -> int:
    """Advance ``state`` by ``multiplier`` modulo MODULUS without overflow."""
    q, r = divmod(MODULUS, multiplier)
    t = multiplier * (state % q) - r * (state // q)
    return t if t > 0 else t + MODULUS


class RandomStreams:
    """A bank of 256 seeded random streams with one stream selected at a time."""

    def __init__(self, prompt: Callable[[str], str] | None = None) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False
        self._prompt = prompt if prompt is not None else input

    @property
    def stream(self) -> int:
        """Index of the currently selected stream."""
        return self._stream

    def random(self) -> float:
        """Return the next number of the current stream, in (0, 1)."""
        state = _lehmer_step(self._seeds[self._stream], MULTIPLIER)
        self._seeds[self._stream] = state
        return state / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and derive the seeds of all other streams."""
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            self._seeds[j] = _lehmer_step(self._seeds[j - 1], A256)

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive ``x`` is used (reduced modulo MODULUS), a negative one is
        replaced by the system clock, and zero asks for a seed interactively.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        while x == 0:
            answer = self._prompt(_PROMPT)
            try:
                value = int(answer.strip())
            except ValueError:
                value = 0
            if 0 < value < MODULUS:
                x = value
            else:
                print("\nInput out of range ... try again")
        self._seeds[self._stream] = x

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo 256) the current stream."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)

    def self_test(self) -> bool:
        """Check the generator against its known reference states."""
        self.select_stream(0)
        self.put_seed(1)
        for _ in range(10000):
            self.random()
        ok = self.get_seed() == CHECK

        self.select_stream(1)
        self.plant_seeds(1)
        return ok and self.get_seed() == A256


def find_target(seed: int, target: int) -> int:
    """Draw from stream 1 seeded with ``seed`` until ``target`` comes up.

    Each draw is ``floor(random() * 1e9)``. Returns how many draws it took.
    """
    if not 0 <= target < 1_000_000_000:
        raise ValueError(f"target {target} can never be drawn")
    streams = RandomStreams()
    streams.select_stream(1)
    streams.put_seed(seed)
    draws = 0
    while True:
        draws += 1
        if math.floor(streams.random() * 1_000_000_000) == target:
            return draws