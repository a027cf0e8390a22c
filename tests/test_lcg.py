"""Engine tests: recurrence, seeding normalization and discard."""

import copy
import itertools

import pytest

from ttr_draws.core.lcg import MinStdRand

M = 2**31 - 1


def test_first_outputs_from_seed_one():
    engine = MinStdRand(1)
    assert engine.next() == 48271
    assert engine.next() == 182605794


def test_ten_thousandth_output_matches_minstd_rand():
    engine = MinStdRand(1)
    engine.discard(9999)
    assert engine.next() == 399268537


@pytest.mark.parametrize("seed", [0, M, 2 * M, 2**32 - 1])
def test_seeds_reducing_to_zero_or_one_start_at_one(seed):
    assert MinStdRand(seed).state == 1


def test_seed_is_reduced_modulo_m():
    assert MinStdRand(2238693238).state == 91209591
    assert MinStdRand(M - 1).state == M - 1


def test_outputs_stay_in_range():
    engine = MinStdRand(M - 1)
    for value in itertools.islice(engine, 1000):
        assert MinStdRand.MIN <= value <= MinStdRand.MAX


def test_discard_matches_repeated_next():
    stepped = MinStdRand(987654321)
    for _ in range(57):
        stepped.next()
    skipped = MinStdRand(987654321)
    skipped.discard(57)
    assert skipped == stepped
    assert skipped.calls == stepped.calls == 57
    assert skipped.next() == stepped.next()


def test_discard_zero_is_a_no_op():
    engine = MinStdRand(5)
    engine.discard(0)
    assert engine.state == 5
    assert engine.calls == 0


def test_clone_is_independent():
    engine = MinStdRand(77)
    engine.next()
    twin = engine.clone()
    assert twin == engine
    twin.next()
    assert twin != engine
    assert copy.copy(engine).state == engine.state


def test_reseed_resets_call_count():
    engine = MinStdRand(3)
    engine.discard(4)
    engine.seed(3)
    assert engine.state == 3
    assert engine.calls == 0


@pytest.mark.parametrize("bad", [-1, -M])
def test_negative_seed_rejected(bad):
    with pytest.raises(ValueError):
        MinStdRand(bad)


@pytest.mark.parametrize("bad", ["1", 1.0, True, None])
def test_non_integer_seed_rejected(bad):
    with pytest.raises(TypeError):
        MinStdRand(bad)


def test_negative_discard_rejected():
    with pytest.raises(ValueError):
        MinStdRand(1).discard(-1)
