"""Seeded train-card and ticket draw reproduction."""

from . import config, core, utils
from .core.drivers import SweepRow, TicketDraw, discard_sweep, iter_discard_sweep, ticket_draw
from .core.lcg import MinStdRand
from .core.pool import Pool, PoolIndexError, PoolLookupError
from .core.routines import partial_fisher_yates, pick_many, pick_one, repeated_pick_shuffle
from .core.sampler import UniformScheme, uniform_int

__all__ = [
    "config",
    "core",
    "utils",
    "MinStdRand",
    "UniformScheme",
    "uniform_int",
    "Pool",
    "PoolIndexError",
    "PoolLookupError",
    "pick_one",
    "pick_many",
    "repeated_pick_shuffle",
    "partial_fisher_yates",
    "SweepRow",
    "TicketDraw",
    "discard_sweep",
    "iter_discard_sweep",
    "ticket_draw",
]
