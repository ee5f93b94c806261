from __future__ import annotations
from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Literal, Optional

Gender = Literal["male", "female"]
ElementKey = Literal["木", "火", "土", "金", "水"]

@dataclass(frozen=True)
class LunarDateParts:
    lunar_year: int
    month: int
    day: int
    is_leap_month: bool
    display_text: str = ""

    def matches(self, lunar_year: int, month: int, day: int, is_leap_month: bool) -> bool:
        return (
            self.lunar_year == lunar_year
            and self.month == month
            and self.day == day
            and self.is_leap_month == is_leap_month
        )

    def label(self) -> str:
        """Short numeric label, e.g. '閏4月1日'."""
        return f"{'閏' if self.is_leap_month else ''}{self.month}月{self.day}日"

@dataclass(frozen=True)
class ResolutionAttempt:
    month: int
    day: int
    is_leap_month: bool
    fallback_note: str = ""

@dataclass(frozen=True)
class ResolvedBirthday:
    date: Optional[date]
    note: str

    @property
    def found(self) -> bool:
        return self.date is not None

@dataclass(frozen=True)
class LunarAges:
    birth: LunarDateParts
    today: LunarDateParts
    floor_age: int
    nominal_age: int
    note: str
    resolved: ResolvedBirthday

@dataclass(frozen=True)
class KuaProfile:
    element: ElementKey
    gua: str
    symbol: str
    type: str
    personality: str
    health: str
    transcript: str

@dataclass(frozen=True)
class ElementInsight:
    title: str
    summary: str
    system: str
    suitable_colors: str
    unsuitable_colors: str

@dataclass(frozen=True)
class KuaResult:
    roc_year: int
    raw_number: int
    normalized_number: int
    note: str

    @property
    def profile_key(self) -> int:
        return self.normalized_number

@dataclass(frozen=True)
class BirthdateParts:
    birthdate: str
    ad_year: int
    roc_year: int

@dataclass(frozen=True)
class ComputationInput:
    birthdate: str
    gender: Gender

@dataclass(frozen=True)
class ComputationResult:
    """Display-ready record handed to the presentation layer."""
    solar_birthday: str
    lunar_birthday: str
    today_solar: str
    today_lunar: str
    lunar_age: str
    virtual_age: str
    age_note: str
    roc_year: str
    gua_number: str
    element_gua: str
    personality_type: str
    personality_text: str
    health_text: str
    kua_note: str
    active_element: ElementKey
    profile_key: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class ComputeOutcome:
    error: str
    result: Optional[ComputationResult]

    @property
    def ok(self) -> bool:
        return self.result is not None

@dataclass(frozen=True)
class QueryState:
    has_any_query: bool
    is_complete: bool
    year: str = ""
    month: str = ""
    day: str = ""
    gender: str = ""
    error: str = ""
