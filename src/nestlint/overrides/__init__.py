from nestlint.overrides.matcher import Override, find_overrides
from nestlint.overrides.scope import own_declarations
from nestlint.overrides.selectors import is_exempt
from nestlint.overrides.shorthands import SHORTHANDS, expands_to, overrides
from nestlint.overrides.walker import RULE_NAME, check_overrides, collect_overrides

__all__ = [
    "RULE_NAME",
    "SHORTHANDS",
    "Override",
    "check_overrides",
    "collect_overrides",
    "expands_to",
    "find_overrides",
    "is_exempt",
    "overrides",
    "own_declarations",
]
