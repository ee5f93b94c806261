from __future__ import annotations

from datetime import date

from ..core.oracle import CalendarOracle
from ..core.time import DEFAULT_WINDOW, SearchWindow
from ..core.types import LunarAges, LunarDateParts, ResolvedBirthday
from .resolver import resolve_birthday_in_year

DEFAULT_AGE_NOTE = "足歲以今年農曆生日是否已到為準。"


def nominal_age(birth: LunarDateParts, today: LunarDateParts) -> int:
    """虛歲: one at birth, plus one at every lunar new year."""
    return max(1, today.lunar_year - birth.lunar_year + 1)


def floor_age(
    birth: LunarDateParts,
    today_parts: LunarDateParts,
    today: date,
    resolved: ResolvedBirthday,
) -> int:
    """足歲: completed lunar years, counting this year's birthday once reached."""
    age = today_parts.lunar_year - birth.lunar_year

    if resolved.date is not None:
        if today < resolved.date:
            age -= 1
    else:
        # Approximation: ordinal month/day comparison, leap flag ignored.
        month_reached = today_parts.month > birth.month
        same_month_day_reached = today_parts.month == birth.month and today_parts.day >= birth.day
        if not (month_reached or same_month_day_reached):
            age -= 1

    return max(0, age)


def calculate_lunar_ages(
    birth_date: date,
    today: date,
    oracle: CalendarOracle,
    window: SearchWindow = DEFAULT_WINDOW,
) -> LunarAges:
    birth = oracle.lunar_info(birth_date)
    today_parts = oracle.lunar_info(today)
    resolved = resolve_birthday_in_year(oracle, birth, today, window)

    return LunarAges(
        birth=birth,
        today=today_parts,
        floor_age=floor_age(birth, today_parts, today, resolved),
        nominal_age=nominal_age(birth, today_parts),
        note=resolved.note or DEFAULT_AGE_NOTE,
        resolved=resolved,
    )
