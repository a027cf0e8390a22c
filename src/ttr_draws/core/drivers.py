"""The two diagnostic draw procedures and their text renderings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

import structlog

from .lcg import MinStdRand
from .pool import Pool
from .routines import pick_many, repeated_pick_shuffle
from .sampler import DEFAULT_SCHEME, UniformScheme

LOGGER = structlog.get_logger(__name__)

SWEEP_ROWS = 200
SWEEP_PICKS = 13
TRAIN_CARDS = 110

TICKET_COUNT = 46
BIG_TICKETS: Tuple[int, ...] = (11, 15, 16, 21, 24, 31)
TICKETS_SHOWN = 6
BIGS_SHOWN = 2
TRAIN_ROWS: Tuple[int, ...] = (5, 4, 4)


@dataclass(slots=True)
class SweepRow:
    """One row of the discard sweep: ``index`` skipped draws, then the picks."""

    index: int
    values: List[int]
    draws: int = 0


@dataclass(slots=True)
class TicketDraw:
    """Shuffled ticket pools and train picks for a single seed."""

    seed: int
    scheme: UniformScheme
    tickets: List[int]
    bigs: List[int]
    trains: List[List[int]] = field(default_factory=list)
    draws: int = 0

    @property
    def shown_tickets(self) -> List[int]:
        return self.tickets[:TICKETS_SHOWN]

    @property
    def shown_bigs(self) -> List[int]:
        return self.bigs[:BIGS_SHOWN]


def _field(value: int) -> str:
    return f"{value:>3} "


def render_sweep_row(row: SweepRow) -> str:
    return f"{row.index}: " + "".join(_field(value) for value in row.values)


def render_ticket_draw(draw: TicketDraw) -> List[str]:
    """Return the five output lines for a ticket draw."""
    lines = [
        " ".join(str(value) for value in draw.shown_tickets),
        " ".join(str(value) for value in draw.shown_bigs),
    ]
    lines.extend("".join(_field(value) for value in row) for row in draw.trains)
    return lines


def iter_discard_sweep(
    seed: int,
    *,
    rows: int = SWEEP_ROWS,
    picks: int = SWEEP_PICKS,
    pool_size: int = TRAIN_CARDS,
    scheme: UniformScheme = DEFAULT_SCHEME,
) -> Iterator[SweepRow]:
    """Yield sweep rows lazily.

    Every row starts from the same seeded engine: it is cloned, advanced by
    ``index`` draws, and then ``picks`` values are taken from a fresh
    ``[0, pool_size)`` pool. The seeded engine itself is never advanced.
    """
    if rows < 0:
        raise ValueError(f"Row count must be nonnegative, received {rows}")
    if picks > pool_size:
        raise ValueError(f"Cannot pick {picks} values from a pool of {pool_size}")

    base = MinStdRand(seed)
    LOGGER.debug("sweep.start", seed=seed, state=base.state, rows=rows, picks=picks, scheme=scheme.value)
    for index in range(rows):
        engine = base.clone()
        engine.discard(index)
        pool = Pool.consecutive(pool_size)
        values = pick_many(engine, pool, picks, scheme)
        draws = engine.calls - index
        if draws > picks:
            LOGGER.debug("sweep.rejections", row=index, rejected=draws - picks)
        yield SweepRow(index=index, values=values, draws=draws)


def discard_sweep(
    seed: int,
    *,
    rows: int = SWEEP_ROWS,
    picks: int = SWEEP_PICKS,
    pool_size: int = TRAIN_CARDS,
    scheme: UniformScheme = DEFAULT_SCHEME,
) -> List[SweepRow]:
    return list(iter_discard_sweep(seed, rows=rows, picks=picks, pool_size=pool_size, scheme=scheme))


def split_big_tickets(count: int = TICKET_COUNT, bigs: Sequence[int] = BIG_TICKETS) -> Tuple[List[int], List[int]]:
    """Remove ``bigs`` from ``[0, count)`` in order; return ``(tickets, bigs)``."""
    tickets = Pool.consecutive(count)
    removed = [tickets.remove_value(value) for value in bigs]
    return tickets.to_list(), removed


def ticket_draw(seed: int, *, scheme: UniformScheme = DEFAULT_SCHEME) -> TicketDraw:
    """Shuffle the ticket pools and pick train rows from one shared engine.

    Generator consumption order is fixed: the small-ticket shuffle, then the
    big-ticket shuffle, then the train picks row by row.
    """
    engine = MinStdRand(seed)
    tickets, bigs = split_big_tickets()

    tickets = repeated_pick_shuffle(engine, tickets, scheme)
    bigs = repeated_pick_shuffle(engine, bigs, scheme)
    LOGGER.debug("tickets.shuffled", seed=seed, draws=engine.calls, scheme=scheme.value)

    trains = Pool.consecutive(TRAIN_CARDS)
    rows = [pick_many(engine, trains, size, scheme) for size in TRAIN_ROWS]
    LOGGER.debug("tickets.trains", seed=seed, draws=engine.calls, remaining=len(trains))

    return TicketDraw(seed=seed, scheme=scheme, tickets=tickets, bigs=bigs, trains=rows, draws=engine.calls)
