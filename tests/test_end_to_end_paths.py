import pandas as pd

from lotofacil import check_results, export_tsv, parse_official_draws, parse_tickets, rank_results


def test_pipeline_from_pasted_text_to_export():
    draws_text = (
        "3001 (02/01/2024) 01 02 03 04 05 06 07 08 09 10 11 12 13 14 16\n"
        "3002 (04/01/2024) 01 02 03 04 05 06 07 08 09 10 11 12 13 14 15\n"
        "resultado ilegível\n"
    )
    tickets_text = (
        "01 02 03 04 05 06 07 08 09 10 11 12 13 14 15\n"
        "11;12;13;14;15;16;17;18;19;20;21;22;23;24;25\n"
    )

    draws = parse_official_draws(draws_text)
    tickets = parse_tickets(tickets_text)
    results = check_results(draws, tickets, {"3002": {15: 2_000_000}})
    ranked = rank_results(results)

    assert [r.contest_id for r in results] == ["3001", "3002"]
    assert [r.contest_id for r in ranked] == ["3002", "3001"]
    assert ranked[0].total_prize == 2_000_000
    assert results[0].total_prize == 0

    rows = export_tsv(results).splitlines()
    frame = pd.DataFrame([r.split("\t") for r in rows[1:]], columns=rows[0].split("\t"))
    assert list(frame["Acertos"]) == ["15", "14"]
    assert list(frame["Concurso"]) == ["3002", "3001"]
