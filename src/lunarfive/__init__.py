"""lunarfive public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_oracles,
    oracle_info,
    get_oracle,
    register_oracle,
    lunar_info,
    resolve_birthday,
    lunar_ages,
    kua,
    transcripts,
    compute,
    compute_result,
    compute_query,
)
from .core.errors import LunarFiveError, ValidationError
from .core.time import SearchWindow
from .core.types import ComputationInput, ComputationResult, ComputeOutcome, LunarDateParts
from .engines.elements import element_insight, element_relation
from .validation import build_birthdate_from_parts, parse_query, validate_input

__all__ = [
    "list_oracles",
    "oracle_info",
    "get_oracle",
    "register_oracle",
    "lunar_info",
    "resolve_birthday",
    "lunar_ages",
    "kua",
    "transcripts",
    "compute",
    "compute_result",
    "compute_query",
    "element_insight",
    "element_relation",
    "build_birthdate_from_parts",
    "parse_query",
    "validate_input",
    "LunarFiveError",
    "ValidationError",
    "SearchWindow",
    "ComputationInput",
    "ComputationResult",
    "ComputeOutcome",
    "LunarDateParts",
]
