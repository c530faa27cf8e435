from .packaging import DeploymentResult, UNKNOWN_ERROR, package_world
from .suggestions import MAX_SUGGESTIONS, RULES, SuggestionRule, generate_suggestions, matching_rules

__all__ = [
    "DeploymentResult",
    "UNKNOWN_ERROR",
    "package_world",
    "MAX_SUGGESTIONS",
    "RULES",
    "SuggestionRule",
    "generate_suggestions",
    "matching_rules",
]
