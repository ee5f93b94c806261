from __future__ import annotations

from datetime import date
from typing import Union

from ..core.errors import InvalidGenderParam
from ..core.time import to_roc_year
from ..core.types import KuaProfile, KuaResult
from ..data.tables import HOUTIAN_PROFILES, KUA_FIVE_SUBSTITUTE, KUA_MAP_BY_GENDER


def raw_kua_number(gender: str, roc_year: int) -> int:
    if gender not in KUA_MAP_BY_GENDER:
        raise InvalidGenderParam(f"未知的性別參數：{gender!r}")
    # Python's % is already non-negative for a positive modulus.
    return KUA_MAP_BY_GENDER[gender][roc_year % 9]


def kua_result(gender: str, birth: Union[date, int]) -> KuaResult:
    """Kua number for a birth date (or Gregorian year) and gender.

    A raw 5 is normalized to the gender's Earth trigram, so the returned
    `normalized_number` is always one of 1,2,3,4,6,7,8,9.
    """
    ad_year = birth.year if isinstance(birth, date) else int(birth)
    roc_year = to_roc_year(ad_year)
    raw = raw_kua_number(gender, roc_year)

    normalized, note = raw, ""
    if raw == 5:
        normalized, note = KUA_FIVE_SUBSTITUTE[gender]

    return KuaResult(roc_year=roc_year, raw_number=raw, normalized_number=normalized, note=note)


def kua_profile(key: int) -> KuaProfile:
    if key not in HOUTIAN_PROFILES:
        raise KeyError(f"No profile for Kua {key}. Available: {sorted(HOUTIAN_PROFILES)}")
    return HOUTIAN_PROFILES[key]
