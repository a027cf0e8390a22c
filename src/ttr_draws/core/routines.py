"""Sampling routines combining the uniform sampler with destructive pools."""

from __future__ import annotations

from typing import List, MutableSequence, Sequence

from .pool import Pool, PoolIndexError
from .sampler import DEFAULT_SCHEME, Engine, UniformScheme, uniform_index, uniform_int


def pick_one(engine: Engine, pool: Pool, scheme: UniformScheme = DEFAULT_SCHEME) -> int:
    """Draw a uniform position from ``pool`` and remove the value there."""
    if not len(pool):
        raise PoolIndexError("Cannot pick from an empty pool")
    index = uniform_index(engine, len(pool), scheme)
    return pool.remove_at(index)


def pick_many(
    engine: Engine,
    pool: Pool,
    count: int,
    scheme: UniformScheme = DEFAULT_SCHEME,
) -> List[int]:
    """Perform ``count`` successive :func:`pick_one` draws."""
    if count < 0:
        raise ValueError(f"Pick count must be nonnegative, received {count}")
    return [pick_one(engine, pool, scheme) for _ in range(count)]


def repeated_pick_shuffle(
    engine: Engine,
    values: Sequence[int],
    scheme: UniformScheme = DEFAULT_SCHEME,
) -> List[int]:
    """Return a permutation of ``values`` built by draining a copy of them.

    While more than one value remains, a uniformly chosen position is moved
    to the output. The last value is appended without a draw. ``values``
    itself is left untouched.
    """
    source = Pool(values)
    shuffled: List[int] = []
    while len(source) > 1:
        shuffled.append(pick_one(engine, source, scheme))
    shuffled.extend(source)
    return shuffled


def partial_fisher_yates(
    engine: Engine,
    values: MutableSequence[int],
    scheme: UniformScheme = DEFAULT_SCHEME,
) -> MutableSequence[int]:
    """Shuffle ``values`` in place, swapping each position with a later one.

    Positions ``0 .. len - 2`` are visited in order; the last position is
    never drawn for. Returns ``values`` for convenience.
    """
    last = len(values) - 1
    for i in range(last):
        j = uniform_int(engine, i, last, scheme)
        values[i], values[j] = values[j], values[i]
    return values
