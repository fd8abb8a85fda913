"""
Public Lotofácil checker API.

Stable surface:
- parse_numbers / parse_official_draws / parse_tickets: text -> records.
- check_results: score tickets against draws, bucketed by tier (15..11).
- rank_results: display order, best wins first.
- export_tsv: spreadsheet-ready tab-separated winners table.

``smart_parse`` (AI fallback) and ``cli`` sit on top of these and are optional.
"""

from __future__ import annotations

from .export import EXPORT_COLUMNS, export_tsv, results_frame
from .matching import check_results, intersection_size, total_prize
from .parse import parse_numbers, parse_official_draws, parse_official_line, parse_tickets
from .ranking import rank_results
from .schema import (
    MAX_TICKETS,
    TIERS,
    DrawResult,
    Match,
    OfficialDraw,
    PrizeTableError,
    UserTicket,
    load_prize_table,
)
from .stats import tier_totals, ticket_stats

__all__ = [
    "EXPORT_COLUMNS",
    "MAX_TICKETS",
    "TIERS",
    "DrawResult",
    "Match",
    "OfficialDraw",
    "PrizeTableError",
    "UserTicket",
    "check_results",
    "export_tsv",
    "intersection_size",
    "load_prize_table",
    "parse_numbers",
    "parse_official_draws",
    "parse_official_line",
    "parse_tickets",
    "rank_results",
    "results_frame",
    "ticket_stats",
    "tier_totals",
    "total_prize",
]
