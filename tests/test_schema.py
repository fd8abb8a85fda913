import json

import pytest

from lotofacil.schema import PrizeTableError, load_prize_table, validate_prize_table


def test_validate_prize_table_coerces_keys():
    table = validate_prize_table({3000: {"15": "1500000.50", "11": 6}})

    assert table == {"3000": {15: 1500000.5, 11: 6.0}}


@pytest.mark.parametrize(
    "raw,error",
    [
        ([1, 2], "must be a mapping"),
        ({"3000": [6]}, "must be a mapping"),
        ({"3000": {"ten": 6}}, "non-numeric tier"),
        ({"3000": {"10": 6}}, "outside 11-15"),
        ({"3000": {"11": "six"}}, "must be numeric"),
        ({"3000": {"11": True}}, "must be numeric"),
        ({"3000": {"11": -1}}, "negative"),
    ],
)
def test_validate_prize_table_errors(raw, error):
    with pytest.raises(PrizeTableError, match=error):
        validate_prize_table(raw)


def test_load_prize_table_roundtrip(tmp_path):
    path = tmp_path / "prizes.json"
    path.write_text(json.dumps({"0001": {"15": 50000, "14": 1200}}), encoding="utf-8")

    assert load_prize_table(path) == {"0001": {15: 50000.0, 14: 1200.0}}


def test_load_prize_table_rejects_bad_json(tmp_path):
    path = tmp_path / "prizes.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PrizeTableError):
        load_prize_table(path)
