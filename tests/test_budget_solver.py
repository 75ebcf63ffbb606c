from __future__ import annotations

import itertools

from surrogate.corpus import CORPORA, LengthIndex, build_corpus
from surrogate.generate import BudgetAllocation, find_closest_pair


def _index_exact(*lengths: int) -> LengthIndex:
    return build_corpus("t", ["abcdefghijklmnopqrstuvwxyz"[:n] for n in lengths]).index


def _brute_force(a: LengthIndex, b: LengthIndex, budget: int) -> tuple[int, int, int]:
    best = (0, 0, 0)
    for x, y in itertools.product((0, *a.lengths), (0, *b.lengths)):
        if x + y > budget:
            continue
        rank = ((x > 0) + (y > 0), x + y, min(x, y))
        best = max(best, rank)
    return best


def test_prefers_full_budget() -> None:
    a = _index_exact(2, 5, 7)
    b = _index_exact(3, 4, 9)
    assert find_closest_pair(a, b, 10) == BudgetAllocation(7, 3)
    assert find_closest_pair(a, b, 6) == BudgetAllocation(2, 4)


def test_single_part_when_pair_does_not_fit() -> None:
    a = _index_exact(2, 5, 7)
    b = _index_exact(3, 4, 9)
    alloc = find_closest_pair(a, b, 4)
    assert alloc == BudgetAllocation(0, 4)
    assert alloc.feasible and not alloc.complete


def test_infeasible() -> None:
    a = _index_exact(2, 5)
    b = _index_exact(3)
    alloc = find_closest_pair(a, b, 1)
    assert alloc == BudgetAllocation(0, 0)
    assert not alloc.feasible
    assert find_closest_pair(a, b, -5) == BudgetAllocation(0, 0)


def test_prefers_balanced_split_on_equal_sum() -> None:
    a = _index_exact(2, 4)
    b = _index_exact(2, 4, 6)
    assert find_closest_pair(a, b, 8) == BudgetAllocation(4, 4)


def test_matches_brute_force() -> None:
    a = _index_exact(1, 3, 4, 8, 11)
    b = _index_exact(2, 5, 6, 9)
    for budget in range(0, 30):
        alloc = find_closest_pair(a, b, budget)
        assert alloc.total <= budget
        assert alloc.first == 0 or alloc.first in a.lengths
        assert alloc.second == 0 or alloc.second in b.lengths
        rank = (alloc.parts, alloc.total, min(alloc.first, alloc.second))
        assert rank == _brute_force(a, b, budget), budget


def test_real_corpora_never_exceed_budget() -> None:
    first = CORPORA["first_names"].index
    last = CORPORA["last_names"].index
    for budget in range(0, 40):
        alloc = find_closest_pair(first, last, budget)
        assert alloc.total <= budget
        assert alloc.complete == (budget >= first.shortest + last.shortest)
