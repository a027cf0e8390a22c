"""Discard sweep and ticket draw procedures."""

import pytest

from ttr_draws.core.drivers import (
    BIG_TICKETS,
    SweepRow,
    TicketDraw,
    discard_sweep,
    iter_discard_sweep,
    render_sweep_row,
    render_ticket_draw,
    split_big_tickets,
    ticket_draw,
)
from ttr_draws.core.lcg import MinStdRand
from ttr_draws.core.pool import Pool
from ttr_draws.core.routines import pick_many, repeated_pick_shuffle
from ttr_draws.core.sampler import UniformScheme

# Reference rows produced by std::minstd_rand with std::uniform_int_distribution.
SEED_ONE_ROWS = {
    0: "0:   0  10  66  98 106  21  56  43  29  82   9  62  65 ",
    1: "1:   9  66  98 106  21  56  43  29  81  10  62  64  89 ",
    2: "2:  66  98 106  20  55  42  28  81   9  61  64  89  65 ",
    199: "199:  44  94  67 108  81  19 100  71   3  55  90  78  98 ",
}

SEED_42_ROWS = {
    0: "0:   0  63  28  49  73 106  69  79   5  24  85  58  48 ",
    1: "1:  62  27  49  72 106  69  79   4  24  84  57  47   0 ",
    199: "199:   7  23 109  34  76  97  52 108  58  78  95  93 103 ",
}


@pytest.mark.parametrize("scheme", list(UniformScheme))
def test_seed_one_reference_rows(scheme):
    rows = discard_sweep(1, scheme=scheme)
    assert len(rows) == 200
    for index, line in SEED_ONE_ROWS.items():
        assert render_sweep_row(rows[index]) == line


def test_seed_42_reference_rows():
    rows = discard_sweep(42)
    for index, line in SEED_42_ROWS.items():
        assert render_sweep_row(rows[index]) == line


def test_engine_deal_vector_is_row_44():
    rows = discard_sweep(4100535666, rows=45, scheme=UniformScheme.ENGINE)
    assert rows[44].values == [88, 90, 107, 7, 19, 3, 8, 9, 39, 51, 41, 34, 40]


def test_seed_normalization_matches_seed_one():
    assert discard_sweep(2**32 - 1, rows=3) == discard_sweep(1, rows=3)
    assert discard_sweep(0, rows=3) == discard_sweep(1, rows=3)


@pytest.mark.parametrize("seed", [1, 42, 123456789, 2**32 - 1, 2147483646])
def test_rows_hold_thirteen_distinct_cards(seed):
    for row in iter_discard_sweep(seed):
        assert len(row.values) == 13
        assert len(set(row.values)) == 13
        assert all(0 <= value <= 109 for value in row.values)
        assert row.draws >= 13


@pytest.mark.parametrize("seed", [7, 2238693238])
def test_each_row_equals_discard_then_pick(seed):
    rows = discard_sweep(seed, rows=25)
    for index in (0, 1, 13, 24):
        engine = MinStdRand(seed)
        engine.discard(index)
        assert rows[index].values == pick_many(engine, Pool.consecutive(110), 13)


def test_sweep_is_deterministic():
    assert discard_sweep(987654321) == discard_sweep(987654321)


def test_sweep_row_rendering_pads_fields():
    assert render_sweep_row(SweepRow(index=7, values=[0, 12, 109])) == "7:   0  12 109 "


def test_sweep_argument_validation():
    with pytest.raises(ValueError):
        discard_sweep(1, rows=-1)
    with pytest.raises(ValueError):
        discard_sweep(1, picks=11, pool_size=10)
    assert discard_sweep(1, rows=0) == []


def test_split_big_tickets():
    tickets, bigs = split_big_tickets()
    assert bigs == list(BIG_TICKETS)
    assert len(tickets) == 40
    assert set(tickets).isdisjoint(BIG_TICKETS)
    assert set(tickets) | set(bigs) == set(range(46))


def test_ticket_draw_seed_42():
    draw = ticket_draw(42)
    assert render_ticket_draw(draw) == [
        "0 28 10 22 33 44",
        "31 16",
        " 74  50   1   7  43 ",
        " 86  58  68  99 ",
        " 34   6  22  48 ",
    ]
    assert draw.draws == 57


def test_ticket_draw_seed_one():
    assert render_ticket_draw(ticket_draw(1)) == [
        "0 4 29 41 44 8",
        "11 24",
        " 54  85   7  21  25 ",
        " 86   9  20  68 ",
        " 64  81  36  49 ",
    ]


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 65535, 2147483647, 3000000000, 2**32 - 1])
def test_ticket_draw_pools_and_picks_are_consistent(seed):
    draw = ticket_draw(seed)
    tickets, bigs = split_big_tickets()

    assert sorted(draw.tickets) == sorted(tickets)
    assert sorted(draw.bigs) == sorted(bigs)
    assert set(draw.shown_tickets).isdisjoint(BIG_TICKETS)
    assert set(draw.shown_bigs) <= set(BIG_TICKETS)

    shown = draw.shown_tickets + draw.shown_bigs
    assert len(shown) == len(set(shown)) == 8
    assert all(0 <= value <= 45 for value in shown)

    trains = [value for row in draw.trains for value in row]
    assert [len(row) for row in draw.trains] == [5, 4, 4]
    assert len(set(trains)) == 13
    assert all(0 <= value <= 109 for value in trains)


def test_ticket_draw_is_deterministic():
    assert ticket_draw(31415) == ticket_draw(31415)


def test_ticket_draw_shares_one_engine_in_order():
    engine = MinStdRand(42)
    tickets, bigs = split_big_tickets()
    tickets = repeated_pick_shuffle(engine, tickets)
    bigs = repeated_pick_shuffle(engine, bigs)
    trains = Pool.consecutive(110)
    rows = [pick_many(engine, trains, size) for size in (5, 4, 4)]

    assert ticket_draw(42) == TicketDraw(
        seed=42,
        scheme=UniformScheme.DOWNSCALE,
        tickets=tickets,
        bigs=bigs,
        trains=rows,
        draws=engine.calls,
    )
