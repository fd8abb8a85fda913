from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from .schema import NUMBER_MAX, TIERS, DrawResult

_PRIMES = frozenset(n for n in range(2, NUMBER_MAX + 1) if all(n % d for d in range(2, n)))


@dataclass(frozen=True)
class TicketStats:
    even_count: int
    odd_count: int
    total: int
    primes: Tuple[int, ...]


def tier_totals(results: Sequence[DrawResult]) -> Dict[int, int]:
    """Total matches per tier across every draw."""

    totals = {tier: 0 for tier in TIERS}
    for result in results:
        for tier in TIERS:
            totals[tier] += result.count(tier)
    return totals


def ticket_stats(numbers: Sequence[int]) -> TicketStats:
    """Balance figures for one ticket: parity split, sum and the primes it holds."""

    evens = sum(1 for n in numbers if n % 2 == 0)
    return TicketStats(
        even_count=evens,
        odd_count=len(numbers) - evens,
        total=sum(numbers),
        primes=tuple(sorted(set(n for n in numbers if n in _PRIMES))),
    )
