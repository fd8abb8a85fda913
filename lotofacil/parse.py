from __future__ import annotations

import re
from typing import List, Optional

from .schema import (
    MAX_TICKETS,
    NUMBER_MAX,
    NUMBER_MIN,
    NUMBERS_PER_GAME,
    UNKNOWN_CONTEST,
    OfficialDraw,
    UserTicket,
)

_SEPARATORS = re.compile(r"[\s,.;]+")
# leading digits only, like a prefix integer parse: "15x" -> 15
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
# e.g. "0001 (29/09/2003) 02 03 05 ..."
_CANONICAL_LINE = re.compile(r"^([0-9]+)\s*\(([^)]+)\)\s*(.*)$")


def parse_numbers(text: str) -> List[int]:
    """Return the values in [1, 25] found in ``text``, in order, duplicates kept."""

    numbers: List[int] = []
    for token in _SEPARATORS.split(text.strip()):
        m = _INTEGER.match(token)
        if not m:
            continue
        value = int(m.group(0))
        if NUMBER_MIN <= value <= NUMBER_MAX:
            numbers.append(value)
    return numbers


def parse_official_line(line: str) -> Optional[OfficialDraw]:
    m = _CANONICAL_LINE.match(line)
    if m:
        numbers = parse_numbers(m.group(3))
        if len(numbers) == NUMBERS_PER_GAME:
            return OfficialDraw(contest_id=m.group(1), draw_date=m.group(2), numbers=tuple(numbers))

    # fallback: a bare line of 15 numbers, contest unknown
    numbers = parse_numbers(line)
    if len(numbers) == NUMBERS_PER_GAME:
        return OfficialDraw(contest_id=UNKNOWN_CONTEST, draw_date="", numbers=tuple(numbers))
    return None


def parse_official_draws(text: str) -> List[OfficialDraw]:
    """Parse one draw per line; lines that do not yield 15 numbers are skipped."""

    draws: List[OfficialDraw] = []
    for line in text.split("\n"):
        draw = parse_official_line(line)
        if draw is not None:
            draws.append(draw)
    return draws


def parse_tickets(text: str, *, limit: int = MAX_TICKETS) -> List[UserTicket]:
    """
    Parse one ticket per line, keeping only lines with exactly 15 valid numbers.

    Ids are ``game-<line index>`` so they still point at the source line after
    non-qualifying lines are dropped. At most ``limit`` tickets are returned.
    """

    tickets: List[UserTicket] = []
    if not text.strip():
        return tickets

    for idx, line in enumerate(text.split("\n")):
        if len(tickets) >= limit:
            break
        numbers = parse_numbers(line)
        if len(numbers) == NUMBERS_PER_GAME:
            tickets.append(UserTicket(id=f"game-{idx}", numbers=tuple(numbers)))
    return tickets
