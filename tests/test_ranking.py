from lotofacil.ranking import rank_results
from lotofacil.schema import TIERS, DrawResult, Match

_NUMBERS = tuple(range(1, 16))


def _result(contest, **counts):
    hits = {}
    for tier in TIERS:
        n = counts.get(f"t{tier}", 0)
        hits[tier] = tuple(Match(i, _NUMBERS, tier) for i in range(n))
    return DrawResult(contest_id=contest, draw_date="", hits=hits)


def test_top_tier_win_beats_many_lower_wins():
    a = _result("A", t15=1)
    b = _result("B", t14=5)

    assert [r.contest_id for r in rank_results([b, a])] == ["A", "B"]


def test_larger_count_wins_at_first_differing_tier():
    a = _result("A", t14=1, t11=20)
    b = _result("B", t14=2)
    c = _result("C", t13=9)

    assert [r.contest_id for r in rank_results([a, c, b])] == ["B", "A", "C"]


def test_ties_keep_input_order_and_input_is_not_mutated():
    results = [_result("X", t12=1), _result("Y"), _result("Z", t12=1), _result("W")]

    ranked = rank_results(results)

    assert [r.contest_id for r in ranked] == ["X", "Z", "Y", "W"]
    assert [r.contest_id for r in results] == ["X", "Y", "Z", "W"]
