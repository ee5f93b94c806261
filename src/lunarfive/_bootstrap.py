from __future__ import annotations
from lunarfive.core.oracle import OracleRegistry
from lunarfive.engines.chinese import ChineseCalendarOracle

def build_registry() -> OracleRegistry:
    oracles = {ChineseCalendarOracle.name: ChineseCalendarOracle()}
    return OracleRegistry(oracles)
