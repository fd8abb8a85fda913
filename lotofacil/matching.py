from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .schema import (
    NUMBER_MAX,
    NUMBER_MIN,
    TIERS,
    DrawResult,
    Match,
    OfficialDraw,
    PrizeTable,
    UserTicket,
)


def _in_range(numbers: Sequence[int]) -> np.ndarray:
    values = np.asarray(numbers, dtype=np.intp)
    return values[(values >= NUMBER_MIN) & (values <= NUMBER_MAX)]


def _presence(numbers: Sequence[int]) -> np.ndarray:
    """Boolean membership table indexed 0..25; slot 0 is never set, out-of-range values are ignored."""

    table = np.zeros(NUMBER_MAX + 1, dtype=bool)
    table[_in_range(numbers)] = True
    return table


def _presence_matrix(tickets: Sequence[UserTicket]) -> np.ndarray:
    matrix = np.zeros((len(tickets), NUMBER_MAX + 1), dtype=bool)
    for row, ticket in enumerate(tickets):
        matrix[row, _in_range(ticket.numbers)] = True
    return matrix


def intersection_size(ticket: Sequence[int], draw: Sequence[int]) -> int:
    """Count the distinct ticket values that also appear in the draw."""

    return int(np.count_nonzero(_presence(ticket) & _presence(draw)))


def total_prize(
    hits: Mapping[int, Sequence[Match]], contest_prizes: Optional[Mapping[int, float]] = None
) -> float:
    """Sum bucket size times payout over every tier; missing payouts count as zero."""

    prizes = contest_prizes or {}
    return float(sum(len(hits.get(tier, ())) * prizes.get(tier, 0) for tier in TIERS))


def check_results(
    draws: Sequence[OfficialDraw],
    tickets: Sequence[UserTicket],
    prizes: Optional[PrizeTable] = None,
) -> List[DrawResult]:
    """
    Score every ticket against every draw and bucket the winners by tier.

    Returns one ``DrawResult`` per draw, in draw order. Inside each tier the
    matches keep batch order; tickets under 11 hits are left out.
    """

    prizes = prizes or {}
    matrix = _presence_matrix(tickets)
    sorted_cache: Dict[int, Tuple[int, ...]] = {}

    results: List[DrawResult] = []
    for draw in draws:
        counts = matrix[:, _presence(draw.numbers)].sum(axis=1)
        hits: Dict[int, Tuple[Match, ...]] = {}
        for tier in TIERS:
            bucket = []
            for idx in np.flatnonzero(counts == tier):
                idx = int(idx)
                if idx not in sorted_cache:
                    sorted_cache[idx] = tuple(sorted(tickets[idx].numbers))
                bucket.append(Match(ticket_index=idx, numbers=sorted_cache[idx], hit_count=tier))
            hits[tier] = tuple(bucket)

        results.append(
            DrawResult(
                contest_id=draw.contest_id,
                draw_date=draw.draw_date,
                hits=hits,
                total_prize=total_prize(hits, prizes.get(draw.contest_id)),
            )
        )
    return results


__all__ = ["check_results", "intersection_size", "total_prize"]
