from lotofacil.matching import check_results
from lotofacil.schema import OfficialDraw, UserTicket
from lotofacil.stats import ticket_stats, tier_totals


def test_ticket_stats_balance():
    stats = ticket_stats(range(1, 16))

    assert stats.even_count == 7
    assert stats.odd_count == 8
    assert stats.total == 120
    assert stats.primes == (2, 3, 5, 7, 11, 13)


def test_tier_totals_sum_over_draws():
    draws = [OfficialDraw("1", "", tuple(range(1, 16))), OfficialDraw("2", "", tuple(range(2, 17)))]
    tickets = [UserTicket("game-0", tuple(range(1, 16))), UserTicket("game-1", tuple(range(3, 18)))]

    totals = tier_totals(check_results(draws, tickets))

    # game-0: 15 vs draw 1, 14 vs draw 2; game-1: 13 vs draw 1, 14 vs draw 2
    assert totals == {15: 1, 14: 2, 13: 1, 12: 0, 11: 0}
