from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .export import export_tsv
from .matching import check_results
from .parse import parse_tickets
from .ranking import rank_results
from .schema import TIERS, DrawResult, UserTicket, load_prize_table
from .smart_parse import SMART_PARSE_THRESHOLD, GeminiClient, SmartParseError, resolve_official_draws
from .stats import ticket_stats, tier_totals

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _summary_lines(results: Sequence[DrawResult]) -> List[str]:
    lines = []
    for result in rank_results(results):
        counts = "  ".join(f"{tier}:{result.count(tier)}" for tier in TIERS)
        date = f" ({result.draw_date})" if result.draw_date else ""
        lines.append(f"{result.contest_id}{date}  {counts}  prize={result.total_prize:,.2f}")
    totals = tier_totals(results)
    lines.append("total  " + "  ".join(f"{tier}:{totals[tier]}" for tier in TIERS))
    return lines


def _balance_line(tickets: Sequence[UserTicket]) -> str:
    stats = [ticket_stats(ticket.numbers) for ticket in tickets]
    n = len(stats)
    even = sum(s.even_count for s in stats) / n
    odd = sum(s.odd_count for s in stats) / n
    total = sum(s.total for s in stats) / n
    primes = sum(len(s.primes) for s in stats) / n
    return f"balance  tickets={n:,}  even={even:.1f}  odd={odd:.1f}  sum={total:.1f}  primes={primes:.1f}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check Lotofácil tickets against official draws and export the winners"
    )
    parser.add_argument("--draws", type=Path, required=True, help="Text file, one draw per line")
    parser.add_argument("--tickets", type=Path, required=True, help="Text file, one ticket per line")
    parser.add_argument("--prizes", type=Path, default=None, help="JSON payout table by contest")
    parser.add_argument("--out", type=Path, default=None, help="TSV output path (stdout if omitted)")
    parser.add_argument(
        "--smart",
        action="store_true",
        help="Let the Gemini parser replace draws when local parsing finds none or input is large",
    )
    parser.add_argument(
        "--smart-threshold",
        type=int,
        default=SMART_PARSE_THRESHOLD,
        help="Input length (characters) above which --smart is consulted",
    )
    parser.add_argument("--analyze", action="store_true", help="Print an AI balance summary of the tickets")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")
    parser.add_argument("--quiet", action="store_true", help="Suppress summary print")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    draws_text = args.draws.read_text(encoding="utf-8")
    tickets_text = args.tickets.read_text(encoding="utf-8")
    prizes = load_prize_table(args.prizes) if args.prizes else {}

    client = GeminiClient() if (args.smart or args.analyze) else None
    fallback = client.parse_official_draws if (client and args.smart) else None
    draws = resolve_official_draws(draws_text, fallback, threshold=args.smart_threshold)
    tickets = parse_tickets(tickets_text)
    logger.info("Parsed %d draws and %d tickets", len(draws), len(tickets))

    results = check_results(draws, tickets, prizes)
    tsv = export_tsv(results)

    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(tsv, encoding="utf-8")
    else:
        sys.stdout.write(tsv)

    # keep stdout clean for the TSV when no --out is given
    report = sys.stdout if args.out else sys.stderr
    if not args.quiet:
        for line in _summary_lines(results):
            print(line, file=report)
        if args.out:
            print(f"Wrote {len(tsv.splitlines()) - 1:,} winning rows -> {args.out}")

    if args.analyze and client is not None and tickets:
        print(_balance_line(tickets), file=report)
        try:
            print(client.analyze_tickets(tickets), file=report)
        except SmartParseError as exc:
            logger.warning("AI ticket analysis failed: %s", exc)

    return 0


if __name__ == "__main__":
    sys.exit(main())
