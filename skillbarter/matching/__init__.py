from .compatibility import calculate_compatibility, level_ordinal
from .finder import (
    MatchFinder,
    MatchLookupError,
    find_broad_matches,
    find_mutual_matches,
)

__all__ = [
    "calculate_compatibility",
    "level_ordinal",
    "MatchFinder",
    "MatchLookupError",
    "find_broad_matches",
    "find_mutual_matches",
]
