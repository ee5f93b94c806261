from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .core.oracle import CalendarOracle, OracleRegistry
from .core.time import DEFAULT_WINDOW, SearchWindow
from .core.types import (
    ComputationInput,
    ComputationResult,
    ComputeOutcome,
    KuaProfile,
    KuaResult,
    LunarAges,
    LunarDateParts,
    ResolvedBirthday,
)
from .engines.age import calculate_lunar_ages
from .engines.kua import kua_result
from .data.tables import HOUTIAN_PROFILES, TRANSCRIPT_ORDER
from .engines.resolver import resolve_birthday_in_year
from . import pipeline as _pipeline

DEFAULT_ORACLE = "chinese"
_registry: Optional[OracleRegistry] = None

def set_registry(reg: OracleRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> OracleRegistry:
    if _registry is None:
        raise RuntimeError("Oracle registry not initialized")
    return _registry

def list_oracles() -> List[str]:
    return _reg().list()

def oracle_info(oracle: str = DEFAULT_ORACLE) -> Dict[str, Any]:
    return _reg().get(oracle).info()

def get_oracle(name: str = DEFAULT_ORACLE) -> CalendarOracle:
    return _reg().get(name)

def register_oracle(name: str, oracle: CalendarOracle, *, overwrite: bool = False) -> None:
    _reg().register(name, oracle, overwrite=overwrite)

# ============================================================
# Engine steps
# ============================================================

def lunar_info(d: date, *, oracle: str = DEFAULT_ORACLE) -> LunarDateParts:
    return _reg().get(oracle).lunar_info(d)

def resolve_birthday(
    birth_date: date,
    today: date,
    *,
    oracle: str = DEFAULT_ORACLE,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ResolvedBirthday:
    """Gregorian date of this lunar year's birthday (or an approximation note)."""
    orc = _reg().get(oracle)
    return resolve_birthday_in_year(orc, orc.lunar_info(birth_date), today, window)

def lunar_ages(
    birth_date: date,
    today: date,
    *,
    oracle: str = DEFAULT_ORACLE,
    window: SearchWindow = DEFAULT_WINDOW,
) -> LunarAges:
    return calculate_lunar_ages(birth_date, today, _reg().get(oracle), window)

def kua(gender: str, birth: date | int) -> KuaResult:
    return kua_result(gender, birth)

def transcripts() -> List[Tuple[int, KuaProfile]]:
    """The eight trigram profiles (no 5) in transcript display order."""
    return [(n, HOUTIAN_PROFILES[n]) for n in TRANSCRIPT_ORDER]

# ============================================================
# Pipeline
# ============================================================

def compute(
    inp: ComputationInput,
    *,
    today: date,
    oracle: str = DEFAULT_ORACLE,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ComputationResult:
    return _pipeline.compute(inp, today=today, oracle=_reg().get(oracle), window=window)

def compute_result(
    inp: ComputationInput,
    *,
    today: date,
    oracle: str = DEFAULT_ORACLE,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ComputeOutcome:
    return _pipeline.compute_result(inp, today=today, oracle=_reg().get(oracle), window=window)

def compute_query(
    params: Mapping[str, str],
    *,
    today: date,
    oracle: str = DEFAULT_ORACLE,
    window: SearchWindow = DEFAULT_WINDOW,
) -> ComputeOutcome:
    return _pipeline.compute_query(params, today=today, oracle=_reg().get(oracle), window=window)
