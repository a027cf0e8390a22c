"""Minimal-standard linear congruential engine (``minstd_rand``)."""

from __future__ import annotations

from typing import Iterator


class MinStdRand:
    """Multiplicative LCG with ``a = 48271`` and ``m = 2**31 - 1``.

    Outputs lie in ``[MIN, MAX]``. Seeding follows the conventional
    minimal-standard rule: the state is ``seed mod m`` and a zero state is
    replaced by ``1``, since zero is a fixed point of the recurrence.
    """

    MULTIPLIER = 48271
    MODULUS = 2**31 - 1
    MIN = 1
    MAX = MODULUS - 1

    __slots__ = ("_state", "_calls")

    def __init__(self, seed: int = 1) -> None:
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the engine to ``seed`` (any nonnegative integer)."""
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"Seed must be an integer, received {type(seed).__name__}")
        if seed < 0:
            raise ValueError(f"Seed must be nonnegative, received {seed}")
        state = seed % self.MODULUS
        self._state = state if state else 1
        self._calls = 0

    @property
    def state(self) -> int:
        return self._state

    @property
    def calls(self) -> int:
        """Number of outputs produced since the last seeding."""
        return self._calls

    def next(self) -> int:
        self._state = (self._state * self.MULTIPLIER) % self.MODULUS
        self._calls += 1
        return self._state

    def discard(self, count: int) -> None:
        """Advance the engine as if ``next`` were called ``count`` times."""
        if count < 0:
            raise ValueError(f"Cannot discard a negative number of draws ({count})")
        for _ in range(count):
            self.next()

    def clone(self) -> "MinStdRand":
        twin = MinStdRand.__new__(MinStdRand)
        twin._state = self._state
        twin._calls = self._calls
        return twin

    __copy__ = clone

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MinStdRand):
            return NotImplemented
        return self._state == other._state

    def __repr__(self) -> str:
        return f"MinStdRand(state={self._state})"
