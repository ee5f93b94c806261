"""
lunarfive.pipeline
------------------
One call from a validated input to a display-ready ComputationResult.

`today` is always passed in; nothing here reads the clock, so identical
arguments always produce identical results.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional

from .core.errors import EraOutOfSupportedRange, FutureDate, InvalidFormat, MissingField, ValidationError
from .core.oracle import CalendarOracle
from .core.time import DEFAULT_WINDOW, SearchWindow, to_roc_year
from .core.types import ComputationInput, ComputationResult, ComputeOutcome, LunarDateParts
from .engines.age import calculate_lunar_ages
from .engines.kua import kua_profile, kua_result
from .validation import parse_query, validate_gender, validate_input

logger = logging.getLogger(__name__)

DEFAULT_KUA_NOTE = "命卦以民國出生年與性別對照圖表推算。"


def _lunar_text(oracle: CalendarOracle, d: date, parts: LunarDateParts) -> str:
    return f"{oracle.format_lunar_display(d)}（{parts.label()}）"


def _parse_birthdate(inp: ComputationInput) -> date:
    if not inp.birthdate or not inp.gender:
        raise MissingField("請先輸入生日並選擇性別。")
    try:
        birth_date = date.fromisoformat(inp.birthdate)
    except ValueError:
        raise InvalidFormat("生日格式有誤，請重新選擇。") from None
    validate_gender(inp.gender)
    return birth_date


def compute(
    inp: ComputationInput,
    *,
    today: date,
    oracle: Optional[CalendarOracle] = None,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ComputationResult:
    """Validate `inp` against `today` and compute ages and Kua.

    Raises the first ValidationError encountered; never returns a partial result.
    """
    if oracle is None:
        from .api import get_oracle
        oracle = get_oracle()

    birth_date = _parse_birthdate(inp)
    if birth_date > today:
        raise FutureDate()
    if to_roc_year(birth_date.year) < 1:
        raise EraOutOfSupportedRange()

    ages = calculate_lunar_ages(birth_date, today, oracle, window)
    kua = kua_result(inp.gender, birth_date)
    profile = kua_profile(kua.profile_key)

    if kua.raw_number == kua.normalized_number:
        gua_number = f"{kua.normalized_number}"
    else:
        gua_number = f"{kua.raw_number} → {kua.normalized_number}"

    logger.debug("computed %s/%s: floor=%d nominal=%d kua=%s",
                 inp.birthdate, inp.gender, ages.floor_age, ages.nominal_age, gua_number)

    return ComputationResult(
        solar_birthday=oracle.format_solar(birth_date),
        lunar_birthday=_lunar_text(oracle, birth_date, ages.birth),
        today_solar=oracle.format_solar(today),
        today_lunar=_lunar_text(oracle, today, ages.today),
        lunar_age=f"{ages.floor_age} 歲",
        virtual_age=f"{ages.nominal_age} 歲",
        age_note=ages.note,
        roc_year=f"{kua.roc_year} 年",
        gua_number=gua_number,
        element_gua=f"{profile.element} / {profile.gua}{profile.symbol}",
        personality_type=profile.type,
        personality_text=f"個性：{profile.personality}",
        health_text=f"健康提醒：{profile.health}",
        kua_note=kua.note or DEFAULT_KUA_NOTE,
        active_element=profile.element,
        profile_key=kua.profile_key,
    )


def compute_result(
    inp: ComputationInput,
    *,
    today: date,
    oracle: Optional[CalendarOracle] = None,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ComputeOutcome:
    """Presentation boundary: an error message or a complete result, never both."""
    try:
        result = compute(inp, today=today, oracle=oracle, window=window)
    except ValidationError as e:
        logger.debug("computation rejected: %s (%s)", e.code, e.message)
        return ComputeOutcome(error=e.message, result=None)
    return ComputeOutcome(error="", result=result)


def compute_query(
    params: Mapping[str, str],
    *,
    today: date,
    oracle: Optional[CalendarOracle] = None,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ComputeOutcome:
    """Query-string entry point: parse -> validate -> compute."""
    state = parse_query(params)
    if not state.has_any_query:
        return ComputeOutcome(error="", result=None)
    if not state.is_complete:
        return ComputeOutcome(error=state.error, result=None)

    try:
        inp = validate_input(state.year, state.month, state.day, state.gender)
    except ValidationError as e:
        logger.debug("query rejected: %s (%s)", e.code, e.message)
        return ComputeOutcome(error=e.message, result=None)

    return compute_result(inp, today=today, oracle=oracle, window=window)
