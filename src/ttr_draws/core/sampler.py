"""Bounded uniform integer sampling on top of :class:`MinStdRand`.

The value drawn for a given range depends on exactly how engine output is
folded into that range, so the folding rule is selectable. Ranges narrower
than the scheme's ``span`` use rejection downscaling: the engine output
(shifted by ``offset``) is split into ``urange + 1`` buckets of
``span // (urange + 1)`` values each and anything past the last full bucket
is redrawn.

Only ``libstdc++`` goes further. Like GNU ``uniform_int_distribution`` it
returns the shifted output directly when ``urange == span`` and combines
several draws (upscaling) when ``urange > span``. The other two schemes
cannot split ``span`` values into more than ``span`` buckets, so they
reject ``b - a >= m - 1``, which leaves ``b - a == m - 1`` as the single
range below ``m`` they do not cover.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from .lcg import MinStdRand


class Engine(Protocol):
    """Anything with a ``next`` method yielding values in ``[1, m - 1]``."""

    def next(self) -> int: ...


class UniformScheme(str, Enum):
    """Folding rules for mapping engine output into ``[a, b]``."""

    DOWNSCALE = "downscale"
    LIBSTDCXX = "libstdc++"
    ENGINE = "engine"

    @property
    def span(self) -> int:
        """Number of raw values the scheme splits into buckets."""
        if self is UniformScheme.LIBSTDCXX:
            # urngrange = max() - min()
            return MinStdRand.MAX - MinStdRand.MIN
        return MinStdRand.MODULUS - 1

    @property
    def offset(self) -> int:
        """Amount subtracted from each engine output before bucketing."""
        if self is UniformScheme.ENGINE:
            return 0
        return MinStdRand.MIN


DEFAULT_SCHEME = UniformScheme.DOWNSCALE


def uniform_int(engine: Engine, a: int, b: int, scheme: UniformScheme = DEFAULT_SCHEME) -> int:
    """Return an integer uniformly distributed in the closed range ``[a, b]``.

    Always consumes at least one engine output, including when ``a == b``.
    Under ``libstdc++`` any non-empty range is accepted; ranges wider than
    the engine span consume several outputs per value.

    Raises:
        ValueError: If ``a > b``, or if ``b - a >= m - 1`` under a scheme
            other than ``libstdc++``.
    """
    if a > b:
        raise ValueError(f"Empty range: a={a} is greater than b={b}")

    urange = b - a
    span = scheme.span
    offset = scheme.offset
    if urange >= span:
        if scheme is not UniformScheme.LIBSTDCXX:
            raise ValueError(f"Range [{a}, {b}] is wider than the engine span {span}")
        if urange == span:
            return a + (engine.next() - offset)
        return a + _upscale(engine, urange, scheme)

    buckets = urange + 1
    scaling = span // buckets
    limit = scaling * buckets
    while True:
        r = engine.next() - offset
        if r < limit:
            return a + r // scaling


def _upscale(engine: Engine, urange: int, scheme: UniformScheme) -> int:
    # high part in units of span + 1, low part from one more output
    step = scheme.span + 1
    while True:
        high = step * uniform_int(engine, 0, urange // step, scheme)
        value = high + (engine.next() - scheme.offset)
        if value <= urange:
            return value


def uniform_index(engine: Engine, size: int, scheme: UniformScheme = DEFAULT_SCHEME) -> int:
    """Draw a position in ``[0, size)``."""
    if size <= 0:
        raise ValueError(f"Cannot draw an index from an empty range (size={size})")
    return uniform_int(engine, 0, size - 1, scheme)
