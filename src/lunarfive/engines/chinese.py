"""
lunarfive.engines.chinese
-------------------------
Default CalendarOracle: the Chinese lunisolar calendar as computed by
`lunar_python`. Forward conversion only; lunar_python's lunar->solar
direction is not used.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Any, Dict

from lunar_python import Solar

from ..core.types import LunarDateParts

# lunar_python emits simplified forms; displays are Traditional Chinese.
_TO_TRADITIONAL = str.maketrans({"闰": "閏", "腊": "臘"})


@lru_cache(maxsize=8192)
def _lunar_parts(d: date) -> LunarDateParts:
    lunar = Solar.fromYmd(d.year, d.month, d.day).getLunar()
    month = lunar.getMonth()
    display = f"{lunar.getYearInGanZhi()}年{lunar.getMonthInChinese()}月{lunar.getDayInChinese()}"
    return LunarDateParts(
        lunar_year=lunar.getYear(),
        month=abs(month),
        day=lunar.getDay(),
        # lunar_python marks leap months with a negative month number
        is_leap_month=month < 0,
        display_text=display.translate(_TO_TRADITIONAL),
    )


class ChineseCalendarOracle:
    name = "chinese"

    def info(self) -> Dict[str, Any]:
        return {"name": self.name, "backend": "lunar_python", "cache": _lunar_parts.cache_info()._asdict()}

    def lunar_info(self, d: date) -> LunarDateParts:
        return _lunar_parts(d)

    def format_solar(self, d: date) -> str:
        return f"{d.year}年{d.month}月{d.day}日"

    def format_lunar_display(self, d: date) -> str:
        return _lunar_parts(d).display_text
