"""
lunarfive.engines.elements
--------------------------
Five-element cycles used by the profile guide.

Generating: 木 → 火 → 土 → 金 → 水 → 木
Controlling: 木剋土, 土剋水, 水剋火, 火剋金, 金剋木 (two steps ahead).
"""

from __future__ import annotations

from ..core.errors import UnknownElementError
from ..core.types import ElementInsight
from ..data.tables import ELEMENT_INSIGHTS, ELEMENT_ORDER, RELATION_LABELS


def _index(element: str) -> int:
    try:
        return ELEMENT_ORDER.index(element)
    except ValueError:
        raise UnknownElementError(f"Unknown element '{element}'. Available: {list(ELEMENT_ORDER)}") from None


def generates(element: str) -> str:
    return ELEMENT_ORDER[(_index(element) + 1) % 5]


def controls(element: str) -> str:
    return ELEMENT_ORDER[(_index(element) + 2) % 5]


def element_relation(me: str, other: str) -> str:
    """Six-relations label of `other` as seen from `me` (e.g. 父母, 錢財)."""
    if _index(me) == _index(other):
        key = "same"
    elif generates(other) == me:
        key = "generates_me"
    elif generates(me) == other:
        key = "i_generate"
    elif controls(other) == me:
        key = "controls_me"
    else:
        key = "i_control"
    return RELATION_LABELS[key]


def element_insight(element: str) -> ElementInsight:
    _index(element)
    return ELEMENT_INSIGHTS[element]
