from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol

from .types import LunarDateParts

class CalendarOracle(Protocol):
    """Forward-only Gregorian -> lunar conversion.

    Must be total and deterministic over the dates the resolver visits:
    one Gregorian day maps to exactly one lunar date. No inverse is assumed.
    """
    def info(self) -> Dict[str, Any]: ...
    def lunar_info(self, d: date) -> LunarDateParts: ...
    def format_solar(self, d: date) -> str: ...
    def format_lunar_display(self, d: date) -> str: ...

@dataclass
class OracleRegistry:
    _oracles: Dict[str, CalendarOracle]

    def get(self, name: str) -> CalendarOracle:
        if name not in self._oracles:
            raise KeyError(f"Unknown oracle '{name}'. Available: {sorted(self._oracles)}")
        return self._oracles[name]

    def list(self) -> List[str]:
        return sorted(self._oracles.keys())

    def register(self, name: str, oracle: CalendarOracle, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._oracles):
            raise KeyError(f"Oracle '{name}' already exists. Use overwrite=True to replace.")
        self._oracles[name] = oracle
