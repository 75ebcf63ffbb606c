"""Closest-pair budget solver.

Composite values such as ``first last`` or ``local@domain`` share one length
budget between two independently sized parts.  :func:`find_closest_pair`
splits that budget so that both parts have a feasible ceiling whenever
possible, and so that as much of the budget as possible is used.

Ceilings returned here are always lengths that actually occur in the
corresponding corpus, or ``0`` when the part is omitted.  Sampling "any entry
no longer than the ceiling" therefore always succeeds for a non-zero ceiling,
exclusions aside.
"""

from __future__ import annotations

from dataclasses import dataclass

from surrogate.corpus import LengthIndex

__all__ = ["BudgetAllocation", "find_closest_pair"]


@dataclass(frozen=True, slots=True)
class BudgetAllocation:
    """Per-part length ceilings; ``0`` means the part is omitted."""

    first: int = 0
    second: int = 0

    @property
    def parts(self) -> int:
        return (self.first > 0) + (self.second > 0)

    @property
    def total(self) -> int:
        return self.first + self.second

    @property
    def feasible(self) -> bool:
        """``True`` when at least one part fits."""

        return self.parts > 0

    @property
    def complete(self) -> bool:
        """``True`` when both parts fit."""

        return self.parts == 2

    def _rank(self) -> tuple[int, int, int]:
        return (self.parts, self.total, min(self.first, self.second))


def find_closest_pair(first: LengthIndex, second: LengthIndex, budget: int) -> BudgetAllocation:
    """Split ``budget`` between the parts indexed by ``first`` and ``second``.

    Among all ceiling pairs with ``a + b <= budget`` the result maximizes, in
    order: the number of non-zero parts, the sum ``a + b`` and the smaller of
    the two ceilings.  Remaining ties go to the earliest candidate, which
    favours a shorter ``first``.  When neither part fits, an empty allocation
    is returned and the caller applies its fallback chain.

    The sweep visits each distinct length of ``first`` once and performs one
    binary search in ``second`` per visit.
    """

    budget = max(budget, 0)
    best = BudgetAllocation()

    single_first = BudgetAllocation(first=first.longest_at_most(budget))
    single_second = BudgetAllocation(second=second.longest_at_most(budget))
    for candidate in (single_first, single_second):
        if candidate._rank() > best._rank():
            best = candidate

    for a in first.lengths:
        if a >= budget:
            break
        b = second.longest_at_most(budget - a)
        if not b:
            # ``budget - a`` only shrinks from here on.
            break
        candidate = BudgetAllocation(first=a, second=b)
        if candidate._rank() > best._rank():
            best = candidate

    return best
