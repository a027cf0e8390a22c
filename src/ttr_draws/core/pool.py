"""Ordered integer pools supporting destructive, position-based removal."""

from __future__ import annotations

from typing import Iterable, Iterator, List


class PoolIndexError(IndexError):
    """Raised when a pool position is outside ``[0, len(pool))``."""


class PoolLookupError(ValueError):
    """Raised when a value is not present in the pool."""


class Pool:
    """An ordered sequence of distinct integers.

    Removing position ``i`` shifts every later element down by one, so the
    order of the remaining values always reflects creation order.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int] = ()) -> None:
        items = list(values)
        for value in items:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Pool values must be integers, received {value!r}")
        if len(set(items)) != len(items):
            raise ValueError("Pool values must be pairwise distinct")
        self._values: List[int] = items

    @classmethod
    def consecutive(cls, size: int) -> "Pool":
        """Return the pool ``[0, 1, ..., size - 1]``."""
        if size < 0:
            raise ValueError(f"Pool size must be nonnegative, received {size}")
        return cls(range(size))

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise PoolIndexError(f"Position {index} out of range for pool of size {len(self._values)}")

    def at(self, index: int) -> int:
        self._check(index)
        return self._values[index]

    def remove_at(self, index: int) -> int:
        """Remove and return the value at ``index``."""
        self._check(index)
        return self._values.pop(index)

    def find(self, value: int) -> int:
        try:
            return self._values.index(value)
        except ValueError:
            raise PoolLookupError(f"Value {value} is not in the pool") from None

    def remove_value(self, value: int) -> int:
        return self.remove_at(self.find(value))

    def to_list(self) -> List[int]:
        return list(self._values)

    def __getitem__(self, index: int) -> int:
        return self.at(index)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pool):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Pool({self._values!r})"
