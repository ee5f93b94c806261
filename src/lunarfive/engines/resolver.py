"""
lunarfive.engines.resolver
--------------------------
Inverts a forward-only CalendarOracle by bounded search.

Given a birth lunar date and a reference day, find the Gregorian date on
which the reference day's lunar year reaches the birth month/day. Leap
months that do not recur and months shorter than the birth day are handled
by an ordered list of fallback attempts (see `build_attempts`). The scan
covers a fixed SearchWindow, so the loop is always bounded:

    oracle calls <= len(attempts) * window.size
                 <= (2 * birth.day) * (2 * radius + 1)
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from ..core.oracle import CalendarOracle
from ..core.time import DEFAULT_WINDOW, SearchWindow
from ..core.types import LunarDateParts, ResolutionAttempt, ResolvedBirthday

logger = logging.getLogger(__name__)

NO_LEAP_MONTH_NOTE = "今年無對應閏月，改用同月同日。"
SHORT_MONTH_NOTE = "本年該月無 {birth_day} 日，改用該月 {day} 日計算。"
SHORT_LEAP_MONTH_NOTE = "本年該閏月無 {birth_day} 日，改用同月 {day} 日計算。"
NOT_FOUND_NOTE = "無法準確定位本年農曆生日，足歲改為近似估算。"


def build_attempts(birth: LunarDateParts) -> List[ResolutionAttempt]:
    """Candidate (month, day, leap) targets, most faithful first."""
    attempts = [ResolutionAttempt(birth.month, birth.day, birth.is_leap_month)]

    if birth.is_leap_month:
        attempts.append(ResolutionAttempt(birth.month, birth.day, False, NO_LEAP_MONTH_NOTE))

    for day in range(birth.day - 1, 0, -1):
        attempts.append(
            ResolutionAttempt(
                birth.month, day, birth.is_leap_month,
                SHORT_MONTH_NOTE.format(birth_day=birth.day, day=day),
            )
        )
        if birth.is_leap_month:
            attempts.append(
                ResolutionAttempt(
                    birth.month, day, False,
                    SHORT_LEAP_MONTH_NOTE.format(birth_day=birth.day, day=day),
                )
            )
    return attempts


def find_date_by_lunar(
    oracle: CalendarOracle,
    lunar_year: int,
    month: int,
    day: int,
    is_leap_month: bool,
    center: date,
    window: SearchWindow = DEFAULT_WINDOW,
) -> Optional[date]:
    """First date in the window (ascending) whose lunar parts match exactly."""
    for candidate in window.dates(center):
        if oracle.lunar_info(candidate).matches(lunar_year, month, day, is_leap_month):
            return candidate
    return None


def resolve_birthday_in_year(
    oracle: CalendarOracle,
    birth: LunarDateParts,
    today: date,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ResolvedBirthday:
    """Locate this lunar year's birthday for `birth`, relative to `today`."""
    target_year = oracle.lunar_info(today).lunar_year

    for attempt in build_attempts(birth):
        found = find_date_by_lunar(
            oracle, target_year, attempt.month, attempt.day, attempt.is_leap_month,
            today, window,
        )
        if found is not None:
            if attempt.fallback_note:
                logger.debug("lunar birthday %s in %d resolved by fallback to %s: %s",
                             birth.label(), target_year, found, attempt.fallback_note)
            else:
                logger.debug("lunar birthday %s in %d resolved to %s", birth.label(), target_year, found)
            return ResolvedBirthday(found, attempt.fallback_note)

    logger.info("lunar birthday %s not found in lunar year %d within ±%d days of %s",
                birth.label(), target_year, window.radius_days, today)
    return ResolvedBirthday(None, NOT_FOUND_NOTE)
