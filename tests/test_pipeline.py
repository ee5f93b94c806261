# tests/test_pipeline.py

from datetime import date, timedelta
from unittest.mock import patch

import pytest

import lunarfive
from lunarfive.core.errors import (
    EraOutOfSupportedRange,
    FutureDate,
    InvalidFormat,
    InvalidGenderParam,
    MissingField,
)
from lunarfive.core.types import ComputationInput
from lunarfive.pipeline import DEFAULT_KUA_NOTE, compute, compute_query, compute_result


def test_full_result(oracle):
    birth = oracle.to_gregorian(2005, 3, 10)
    today = oracle.to_gregorian(2010, 5, 1)

    result = compute(ComputationInput(birth.isoformat(), "male"), today=today, oracle=oracle)

    assert result.solar_birthday == birth.isoformat()
    assert result.lunar_birthday == "L2005-3-10（3月10日）"
    assert result.today_solar == today.isoformat()
    assert result.today_lunar == "L2010-5-1（5月1日）"
    assert result.lunar_age == "5 歲"
    assert result.virtual_age == "6 歲"
    assert result.roc_year == f"{birth.year - 1911} 年"
    assert result.kua_note == DEFAULT_KUA_NOTE
    assert result.personality_text.startswith("個性：")
    assert result.health_text.startswith("健康提醒：")
    assert result.as_dict()["profile_key"] == result.profile_key


def test_leap_birthday_text(oracle):
    birth = oracle.to_gregorian(2001, 4, 5, True)
    today = oracle.to_gregorian(2010, 6, 1)

    result = compute(ComputationInput(birth.isoformat(), "female"), today=today, oracle=oracle)

    assert result.lunar_birthday.endswith("（閏4月5日）")


def test_lunar_text_comes_from_oracle_display(oracle):
    birth = oracle.to_gregorian(2005, 3, 10)
    today = oracle.to_gregorian(2010, 5, 1)

    with patch.object(oracle, "format_lunar_display", side_effect=lambda d: f"display {d.isoformat()}"):
        result = compute(ComputationInput(birth.isoformat(), "male"), today=today, oracle=oracle)

    assert result.lunar_birthday == f"display {birth.isoformat()}（3月10日）"
    assert result.today_lunar == f"display {today.isoformat()}（5月1日）"


def test_female_kua_five_transition(oracle):
    birth = date(2008, 6, 1)  # ROC 97
    result = compute(ComputationInput(birth.isoformat(), "female"), today=date(2010, 6, 1), oracle=oracle)

    assert result.gua_number == "5 → 8"
    assert result.profile_key == 8
    assert result.element_gua == "土 / 艮☶"
    assert result.active_element == "土"
    assert result.kua_note != DEFAULT_KUA_NOTE


def test_male_kua_five_transition(oracle):
    birth = date(2004, 6, 1)  # ROC 93
    result = compute(ComputationInput(birth.isoformat(), "male"), today=date(2010, 6, 1), oracle=oracle)

    assert result.gua_number == "5 → 2"
    assert result.profile_key == 2


def test_idempotent(oracle):
    inp = ComputationInput(oracle.to_gregorian(2003, 7, 15).isoformat(), "female")
    today = date(2012, 3, 3)

    assert compute(inp, today=today, oracle=oracle) == compute(inp, today=today, oracle=oracle)


def test_future_date_rejected_before_computation(oracle):
    today = date(2010, 6, 1)
    inp = ComputationInput((today + timedelta(days=1)).isoformat(), "male")
    oracle.calls = 0

    with pytest.raises(FutureDate):
        compute(inp, today=today, oracle=oracle)
    assert oracle.calls == 0

    outcome = compute_result(inp, today=today, oracle=oracle)
    assert outcome.result is None
    assert outcome.error == FutureDate().message


def test_pre_roc_birth_rejected(oracle):
    with pytest.raises(EraOutOfSupportedRange):
        compute(ComputationInput("1911-12-31", "male"), today=date(2010, 6, 1), oracle=oracle)


@pytest.mark.parametrize(
    "inp, exc",
    [
        (ComputationInput("", "male"), MissingField),
        (ComputationInput("2005-01-01", ""), MissingField),
        (ComputationInput("2005-02-30", "male"), InvalidFormat),
        (ComputationInput("yesterday", "male"), InvalidFormat),
        (ComputationInput("2005-01-01", "robot"), InvalidGenderParam),
    ],
)
def test_input_errors(oracle, inp, exc):
    with pytest.raises(exc):
        compute(inp, today=date(2010, 6, 1), oracle=oracle)


def test_missing_gender_never_reaches_engines(oracle):
    with patch("lunarfive.pipeline.calculate_lunar_ages") as ages, patch("lunarfive.pipeline.kua_result") as kua:
        outcome = compute_result(ComputationInput("2005-01-01", ""), today=date(2010, 6, 1), oracle=oracle)

    assert outcome.result is None
    assert outcome.error
    ages.assert_not_called()
    kua.assert_not_called()


# ---------------------------------------------------------
# Query entry point and public API
# ---------------------------------------------------------

def test_compute_query(oracle):
    birth = oracle.to_gregorian(2005, 3, 10)
    params = {"year": str(birth.year), "month": str(birth.month), "day": str(birth.day), "gender": "male"}

    outcome = compute_query(params, today=date(2010, 6, 1), oracle=oracle)

    assert outcome.ok
    assert outcome.error == ""


def test_compute_query_errors(oracle):
    assert compute_query({}, today=date(2010, 6, 1), oracle=oracle) == lunarfive.ComputeOutcome("", None)
    assert compute_query({"year": "2005"}, today=date(2010, 6, 1), oracle=oracle).error
    bad_date = {"year": "2005", "month": "2", "day": "30", "gender": "male"}
    assert "不存在" in compute_query(bad_date, today=date(2010, 6, 1), oracle=oracle).error


def test_public_api_with_registered_oracle(registered_oracle):
    birth = registered_oracle.to_gregorian(2005, 3, 10)
    inp = lunarfive.validate_input(str(birth.year), str(birth.month), str(birth.day), "male")

    result = lunarfive.compute(inp, today=date(2010, 6, 1), oracle="table")
    outcome = lunarfive.compute_result(inp, today=date(2010, 6, 1), oracle="table")

    assert outcome.result == result
    assert "table" in lunarfive.list_oracles()
    assert lunarfive.oracle_info("table")["backend"] == "table"


def test_registry_rejects_duplicates_and_unknown(registered_oracle):
    with pytest.raises(KeyError):
        lunarfive.register_oracle("table", registered_oracle)
    with pytest.raises(KeyError):
        lunarfive.get_oracle("no-such-oracle")
