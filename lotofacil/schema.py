from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Tuple

NUMBER_MIN, NUMBER_MAX = 1, 25
NUMBERS_PER_GAME = 15
TIERS: Tuple[int, ...] = (15, 14, 13, 12, 11)
MIN_PRIZE_HITS = 11
MAX_TICKETS = 50_000
UNKNOWN_CONTEST = "?"

PrizeTable = Mapping[str, Mapping[int, float]]


class PrizeTableError(ValueError):
    """Raised when a payout table cannot be coerced into the expected shape."""


@dataclass(frozen=True)
class OfficialDraw:
    """One official result: contest id, free-form date and 15 numbers as parsed."""

    contest_id: str
    draw_date: str
    numbers: Tuple[int, ...]


@dataclass(frozen=True)
class UserTicket:
    id: str
    numbers: Tuple[int, ...]


@dataclass(frozen=True)
class Match:
    """A ticket that scored at least 11 hits against one draw."""

    ticket_index: int
    numbers: Tuple[int, ...]  # sorted ascending
    hit_count: int


@dataclass(frozen=True)
class DrawResult:
    contest_id: str
    draw_date: str
    hits: Dict[int, Tuple[Match, ...]]
    total_prize: float = 0.0

    def count(self, tier: int) -> int:
        return len(self.hits.get(tier, ()))


def _coerce_payout(contest: str, tier: int, value: object) -> float:
    if isinstance(value, bool):
        raise PrizeTableError(f"Payout for contest {contest} tier {tier} must be numeric")
    try:
        amount = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise PrizeTableError(
            f"Payout for contest {contest} tier {tier} must be numeric, got {value!r}"
        ) from exc
    if amount < 0:
        raise PrizeTableError(f"Payout for contest {contest} tier {tier} is negative: {amount}")
    return amount


def validate_prize_table(raw: Mapping[object, object]) -> Dict[str, Dict[int, float]]:
    """Coerce contest keys to ``str`` and tier keys to ``int``, rejecting bad payouts."""

    if not isinstance(raw, Mapping):
        raise PrizeTableError("Prize table must be a mapping of contest id -> tier payouts")

    table: Dict[str, Dict[int, float]] = {}
    for contest, tiers in raw.items():
        contest_id = str(contest)
        if not isinstance(tiers, Mapping):
            raise PrizeTableError(f"Payouts for contest {contest_id} must be a mapping")
        payouts: Dict[int, float] = {}
        for tier_key, value in tiers.items():
            try:
                tier = int(tier_key)  # JSON object keys arrive as strings
            except (TypeError, ValueError) as exc:
                raise PrizeTableError(
                    f"Contest {contest_id} has a non-numeric tier {tier_key!r}"
                ) from exc
            if tier not in TIERS:
                raise PrizeTableError(
                    f"Contest {contest_id} tier {tier} is outside {MIN_PRIZE_HITS}-{NUMBERS_PER_GAME}"
                )
            payouts[tier] = _coerce_payout(contest_id, tier, value)
        table[contest_id] = payouts
    return table


def load_prize_table(path: str | Path) -> Dict[str, Dict[int, float]]:
    """
    Load a JSON payout table such as ``{"3000": {"15": 1500000, "11": 6}}``.

    Args:
        path: UTF-8 JSON file keyed by contest id.
    """

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PrizeTableError(f"Failed to parse prize table {path}: {exc}") from exc
    return validate_prize_table(raw)
