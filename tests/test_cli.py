# tests/test_cli.py

import json

import pytest

from lunarfive.cli import main


def test_kua_command(capsys):
    assert main(["kua", "1990", "--gender", "female"]) == 0
    out = capsys.readouterr().out
    assert "raw Kua       = 5" in out
    assert "normalized    = 8" in out


def test_date_shorthand(capsys):
    assert main(["2020-05-23"]) == 0
    assert "閏4月1日" in capsys.readouterr().out


def test_compute_json(capsys):
    rc = main(["compute", "--year", "79", "--era", "roc", "--month", "5", "--day", "20",
               "--gender", "male", "--today", "2026-10-19", "--json"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["profile_key"] == 1
    assert data["roc_year"] == "79 年"


def test_compute_validation_error(capsys):
    rc = main(["compute", "--year", "1990", "--month", "2", "--day", "30", "--gender", "male"])
    assert rc == 2
    assert "不存在" in capsys.readouterr().err


def test_query_command(capsys):
    rc = main(["query", "?year=1990&month=5&day=20&gender=male", "--today", "2026-10-19"])
    assert rc == 0
    assert "後天卦數: 1" in capsys.readouterr().out


def test_query_incomplete(capsys):
    assert main(["query", "year=1990", "--today", "2026-10-19"]) == 2
    assert "網址參數不完整" in capsys.readouterr().err


def test_birthday_command(capsys):
    assert main(["birthday", "2020-05-23", "--today", "2021-08-01"]) == 0
    out = capsys.readouterr().out
    assert "今年無對應閏月" in out


def test_elements_command(capsys):
    assert main(["elements"]) == 0
    assert "錢財" in capsys.readouterr().out


def test_transcripts_command(capsys):
    assert main(["transcripts"]) == 0
    lines = capsys.readouterr().out.splitlines()
    headers = [line for line in lines if not line.startswith("  ")]
    assert [h.split("｜")[0] for h in headers] == ["1", "2", "3", "4", "6", "7", "8", "9"]
    assert headers[0].startswith("1｜水坎")
    assert "一坎水" in lines[1]


def test_compute_era_is_case_insensitive(capsys):
    rc = main(["compute", "--year", "79", "--era", "ROC", "--month", "5", "--day", "20",
               "--gender", "male", "--today", "2026-10-19", "--json"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["solar_birthday"] == "1990年5月20日"


@pytest.mark.parametrize(
    "argv",
    [
        ["lunar", "2020-13-01"],
        ["2020-02-30"],
        ["birthday", "2020-05-23", "--today", "2021-8"],
        ["birthday", "2020-05-23", "--today", "2021-08-01", "--radius", "-1"],
        ["query", "year=1990", "--today", "yesterday"],
    ],
)
def test_bad_arguments_exit_with_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2
    assert "error:" in capsys.readouterr().err
