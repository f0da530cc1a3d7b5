import itertools
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from vrp_ranking.config.config import PRIORITY_SCALE
from vrp_ranking.config.enums import MODE_LEXICOGRAPHIC, MODE_PRIORITY
from vrp_ranking.engine.eval import Eval
from vrp_ranking.engine.indicators import SolutionIndicators
from vrp_ranking.engine.ranking import (
    better_than,
    compare,
    population_mode,
    profit,
    resolve_mode,
    uses_priority,
)


def ind(priority=0, assigned=0, cost=0, duration=0, distance=0, vehicles=0, h=0):
    return SolutionIndicators(
        priority_sum=priority,
        assigned=assigned,
        eval=Eval(cost, duration, distance),
        used_vehicles=vehicles,
        routes_hash=h,
    )


def random_population(rng, size, priority):
    return [
        ind(
            priority=rng.randint(1, 3) if priority else 0,
            assigned=rng.randint(8, 10),
            cost=rng.choice([0, 360_000, 500_000, 720_000]),
            duration=rng.randint(0, 2),
            distance=rng.randint(0, 2),
            vehicles=rng.randint(1, 2),
            h=rng.randint(0, 1),
        )
        for _ in range(size)
    ]


def test_assigned_dominates_cost():
    a = ind(assigned=10, cost=500, vehicles=2)
    b = ind(assigned=9, cost=100)
    assert better_than(a, b)
    assert not better_than(b, a)


def test_cost_breaks_assigned_tie():
    a = ind(assigned=10, cost=500)
    b = ind(assigned=10, cost=480)
    assert better_than(b, a)
    assert not better_than(a, b)


def test_profit_mode_example():
    a = ind(priority=5, cost=100_000)
    b = ind(priority=4, cost=50_000)
    assert profit(a, 360_000) == 1_700_000
    assert profit(b, 360_000) == 1_390_000
    assert better_than(a, b, scale=360_000)


def test_hash_is_last_tie_break_in_both_modes():
    for priority in (0, 3):
        a = ind(priority=priority, assigned=4, cost=10, duration=5, distance=6, vehicles=2, h=11)
        b = ind(priority=priority, assigned=4, cost=10, duration=5, distance=6, vehicles=2, h=12)
        assert better_than(a, b)
        assert not better_than(b, a)


def test_identical_indicators_are_equivalent():
    a = ind(priority=2, assigned=4, cost=10, h=3)
    assert not better_than(a, a)
    assert compare(a, a) == 0
    assert compare(a, ind(priority=2, assigned=4, cost=10, h=3)) == 0


def test_zero_priority_uses_lexicographic_order_only():
    # Lower cost would win on profit; more jobs wins lexicographically.
    a = ind(assigned=10, cost=10_000_000)
    b = ind(assigned=9, cost=1)
    assert not uses_priority(a, b)
    assert better_than(a, b)
    assert not better_than(a, b, mode=MODE_PRIORITY)


def test_any_priority_switches_to_profit():
    a = ind(priority=1, assigned=1, cost=0)
    b = ind(priority=0, assigned=10, cost=0)
    assert uses_priority(a, b) and uses_priority(b, a)
    assert better_than(a, b)
    assert better_than(b, a, mode=MODE_LEXICOGRAPHIC)


def test_profit_tie_breaks_in_order():
    base = dict(priority=2, assigned=5, cost=100, duration=50, distance=40, vehicles=2, h=9)
    same_profit = dict(base, priority=3, cost=100 + PRIORITY_SCALE)
    a, b = ind(**base), ind(**same_profit)
    assert profit(a) == profit(b)
    assert compare(a, b) == 0

    assert better_than(ind(**dict(base, assigned=6)), a)
    assert better_than(ind(**dict(base, vehicles=1)), a)
    assert better_than(ind(**dict(base, duration=49)), a)
    assert better_than(ind(**dict(base, distance=39)), a)
    # assigned outranks vehicles
    assert better_than(ind(**dict(base, assigned=6, vehicles=3)), a)
    # vehicles outrank duration
    assert better_than(ind(**dict(base, vehicles=1, duration=99)), a)


def test_lexicographic_tie_breaks_in_order():
    base = dict(assigned=5, cost=100, duration=50, distance=40, vehicles=2, h=9)
    a = ind(**base)
    # cost outranks vehicles
    assert better_than(ind(**dict(base, cost=99, vehicles=3)), a)
    # vehicles outrank duration
    assert better_than(ind(**dict(base, vehicles=1, duration=60)), a)
    # duration outranks distance
    assert better_than(ind(**dict(base, duration=49, distance=90)), a)
    # distance outranks hash
    assert better_than(ind(**dict(base, distance=39, h=99)), a)


@pytest.mark.parametrize("priority", [False, True])
def test_strict_weak_ordering_within_one_regime(priority):
    rng = random.Random(7 if priority else 3)
    pop = random_population(rng, 14, priority)

    for a in pop:
        assert not better_than(a, a)
    for a, b in itertools.product(pop, repeat=2):
        assert not (better_than(a, b) and better_than(b, a))
    for a, b, c in itertools.product(pop, repeat=3):
        if better_than(a, b) and better_than(b, c):
            assert better_than(a, c)
        # incomparability is transitive too
        if compare(a, b) == 0 and compare(b, c) == 0:
            assert compare(a, c) == 0


def test_pairwise_mode_can_cycle_across_regimes_but_fixed_mode_cannot():
    a = ind(priority=0, assigned=10, cost=1000)
    b = ind(priority=0, assigned=9, cost=0)
    c = ind(priority=1, assigned=1, cost=360_500)

    assert better_than(a, b)
    assert better_than(b, c)
    assert better_than(c, a)

    mode = population_mode([a, b, c])
    assert mode == MODE_PRIORITY
    assert better_than(b, c, mode=mode)
    assert better_than(c, a, mode=mode)
    assert not better_than(a, b, mode=mode)


def test_resolve_mode():
    pop = [ind(), ind(priority=2)]
    assert resolve_mode("pairwise", pop) is None
    assert resolve_mode("fixed", pop) == MODE_PRIORITY
    assert resolve_mode("fixed", [ind()]) == MODE_LEXICOGRAPHIC
    with pytest.raises(ValueError):
        resolve_mode("global", pop)
    with pytest.raises(ValueError):
        better_than(ind(), ind(), mode=5)


def test_concurrent_comparisons_are_deterministic():
    rng = random.Random(11)
    pop = random_population(rng, 10, priority=True) + random_population(rng, 10, priority=False)
    pairs = list(itertools.product(pop, repeat=2))
    expected = [better_than(a, b) for a, b in pairs]

    shuffled = list(enumerate(pairs))
    rng.shuffle(shuffled)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda item: (item[0], better_than(*item[1])), shuffled))

    got = [None] * len(pairs)
    for idx, value in results:
        got[idx] = value
    assert got == expected
