from __future__ import annotations

from typing import List, Sequence, Tuple

from .schema import TIERS, DrawResult


def _tier_key(result: DrawResult) -> Tuple[int, ...]:
    # Higher counts first, compared from the 15 tier downwards.
    return tuple(-result.count(tier) for tier in TIERS)


def rank_results(results: Sequence[DrawResult]) -> List[DrawResult]:
    """
    Return draws ordered by their best wins without touching ``results``.

    A draw with any hit at a tier outranks one with none there, whatever the
    lower tiers hold; equal tier vectors keep their input order.
    """

    return sorted(results, key=_tier_key)
