"""
lunarfive.validation
--------------------
Turns raw form or query-string fields into a validated birth date.

Every check raises the first failing condition as a ValidationError
subclass; callers that need an error string catch ValidationError and use
`.message`.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Mapping, Optional

from .core.errors import (
    IncompleteQuery,
    InvalidCalendarDate,
    InvalidEra,
    InvalidFormat,
    InvalidGenderParam,
    MissingField,
    OutOfRange,
)
from .core.time import to_ad_year, to_roc_year
from .core.types import BirthdateParts, ComputationInput, QueryState

_DIGITS_RE = re.compile(r"[0-9]+")

GENDERS = ("male", "female")


def _is_integer_string(value: str) -> bool:
    return _DIGITS_RE.fullmatch(value) is not None


def build_birthdate_from_parts(year: str, month: str, day: str, *, era: str = "ad") -> BirthdateParts:
    if not year or not month or not day:
        raise MissingField("請完整輸入年、月、日。")

    if not (_is_integer_string(year) and _is_integer_string(month) and _is_integer_string(day)):
        raise InvalidFormat()

    y, m, d = int(year), int(month), int(day)

    if y < 1:
        raise OutOfRange("年份需大於 0。")
    if not 1 <= m <= 12:
        raise OutOfRange("月份需介於 1 到 12。")
    if not 1 <= d <= 31:
        raise OutOfRange("日期需介於 1 到 31。")

    ad_year = to_ad_year(era, y)
    if ad_year < 1:
        raise InvalidEra()

    try:
        date(ad_year, m, d)
    except ValueError:
        raise InvalidCalendarDate() from None

    return BirthdateParts(
        birthdate=f"{ad_year:04d}-{m:02d}-{d:02d}",
        ad_year=ad_year,
        roc_year=to_roc_year(ad_year),
    )


def validate_gender(gender: Optional[str]) -> str:
    if not gender:
        raise MissingField("請先選擇性別。")
    if gender not in GENDERS:
        raise InvalidGenderParam()
    return gender


def validate_input(
    year: str,
    month: str,
    day: str,
    gender: Optional[str],
    *,
    era: str = "ad",
) -> ComputationInput:
    """Validate all raw fields; nothing downstream runs unless this succeeds."""
    if not year or not month or not day or not gender:
        raise MissingField()
    gender = validate_gender(gender)
    parts = build_birthdate_from_parts(year, month, day, era=era)
    return ComputationInput(birthdate=parts.birthdate, gender=gender)


def parse_query(params: Mapping[str, str]) -> QueryState:
    """Read year/month/day/gender (and legacy adYear/yearMode) from a query mapping."""
    year_mode = params.get("yearMode") or ""
    year = params["adYear"] if "adYear" in params else params.get("year") or ""
    month = params.get("month") or ""
    day = params.get("day") or ""
    gender_raw = params.get("gender") or ""

    if not (year_mode or year or month or day or gender_raw):
        return QueryState(has_any_query=False, is_complete=False)

    if year_mode == "roc" and _is_integer_string(year):
        year = str(to_ad_year("roc", int(year)))

    gender = gender_raw if gender_raw in GENDERS else ""
    state = dict(has_any_query=True, year=year, month=month, day=day, gender=gender)

    if gender_raw and not gender:
        return QueryState(is_complete=False, error=InvalidGenderParam().message, **state)

    if not (year and month and day and gender):
        return QueryState(is_complete=False, error=IncompleteQuery().message, **state)

    return QueryState(is_complete=True, **state)
