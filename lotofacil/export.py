from __future__ import annotations

import re
from typing import List, Sequence, Tuple

import pandas as pd

from .schema import NUMBERS_PER_GAME, TIERS, DrawResult

EXPORT_COLUMNS: List[str] = ["Concurso", "Acertos"] + [
    f"Dezena{i}" for i in range(1, NUMBERS_PER_GAME + 1)
]

# tabs and line breaks would shift columns or split rows
_FIELD_BREAKS = re.compile(r"[\t\r\n]+")


def _flatten(results: Sequence[DrawResult]) -> List[Tuple[str, int, Tuple[int, ...]]]:
    rows = []
    for result in results:
        for tier in TIERS:
            for match in result.hits.get(tier, ()):
                rows.append((result.contest_id, tier, match.numbers))
    # sorted() is stable, so equal hit counts keep draw/tier/ticket order.
    return sorted(rows, key=lambda row: -row[1])


def results_frame(results: Sequence[DrawResult]) -> pd.DataFrame:
    """One row per winning ticket/draw pair, highest hit count first."""

    records = [
        [contest_id, hit_count, *numbers] for contest_id, hit_count, numbers in _flatten(results)
    ]
    df = pd.DataFrame(records, columns=EXPORT_COLUMNS)
    df["Concurso"] = df["Concurso"].astype(str).str.replace(_FIELD_BREAKS, " ", regex=True)
    return df


def export_tsv(results: Sequence[DrawResult]) -> str:
    """
    Render the winners as tab-separated text ready to paste into a spreadsheet.

    Fields are written as-is, without CSV quoting, so ``30"01`` stays ``30"01``.
    """

    df = results_frame(results)
    lines = ["\t".join(EXPORT_COLUMNS)]
    lines.extend("\t".join(str(value) for value in row) for row in df.itertuples(index=False))
    return "\n".join(lines) + "\n"


__all__ = ["EXPORT_COLUMNS", "export_tsv", "results_frame"]
