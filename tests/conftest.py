# tests/conftest.py

from datetime import date, timedelta
from typing import Any, Dict, Tuple

import pytest

import lunarfive
from lunarfive.core.types import LunarDateParts

# Synthetic lunisolar calendar: lunar 2000-01-01 falls on 2000-02-05, regular
# month lengths alternate by (month + year) parity, and leap months sit in
# the same years as the real Chinese calendar.
ANCHOR = date(2000, 2, 5)
FIRST_YEAR, LAST_YEAR = 2000, 2030
LEAP_MONTHS = {2001: 4, 2004: 2, 2006: 7, 2009: 5, 2012: 4, 2014: 9, 2017: 6, 2020: 4, 2023: 2, 2025: 6, 2028: 5}


def month_length(year: int, month: int, is_leap: bool) -> int:
    if is_leap:
        return 30 if year % 2 else 29
    return 30 if (month + year) % 2 else 29


class TableOracle:
    """Forward lookup table with a test-only inverse and a call counter."""

    name = "table"

    def __init__(self):
        self.calls = 0
        self._by_date: Dict[date, Tuple[int, int, int, bool]] = {}
        self._by_lunar: Dict[Tuple[int, int, int, bool], date] = {}
        d = ANCHOR
        for y in range(FIRST_YEAR, LAST_YEAR + 1):
            for m in range(1, 13):
                months = [False, True] if LEAP_MONTHS.get(y) == m else [False]
                for leap in months:
                    for day in range(1, month_length(y, m, leap) + 1):
                        key = (y, m, day, leap)
                        self._by_date[d] = key
                        self._by_lunar[key] = d
                        d += timedelta(days=1)

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "backend": "table"}

    def lunar_info(self, d: date) -> LunarDateParts:
        self.calls += 1
        y, m, day, leap = self._by_date[d]
        return LunarDateParts(y, m, day, leap, f"L{y}-{'閏' if leap else ''}{m}-{day}")

    def format_solar(self, d: date) -> str:
        return d.isoformat()

    def format_lunar_display(self, d: date) -> str:
        return self.lunar_info(d).display_text

    def to_gregorian(self, year: int, month: int, day: int, is_leap: bool = False) -> date:
        return self._by_lunar[(year, month, day, is_leap)]


@pytest.fixture
def oracle():
    return TableOracle()


@pytest.fixture
def registered_oracle(oracle):
    lunarfive.register_oracle(oracle.name, oracle, overwrite=True)
    return oracle
