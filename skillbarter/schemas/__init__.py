# skillbarter/schemas/__init__.py

# Auth schemas
from .auth import UserContext

# Profile schemas
from .profile import Profile, ProfileSummary, ProfileUpdate

# Skill schemas
from .skill import Skill, SkillBase, UserSkill, UserSkillCreate

# Match schemas
from .match import MatchResult, CompatibilityResponse

# Swap schemas
from .swap import SwapCreate, SwapStatusUpdate, SwapRating, SwapResponse

# Reward schemas
from .reward import RewardResponse, LeaderboardEntry, UserRank

__all__ = [
    "UserContext",
    "Profile",
    "ProfileSummary",
    "ProfileUpdate",
    "Skill",
    "SkillBase",
    "UserSkill",
    "UserSkillCreate",
    "MatchResult",
    "CompatibilityResponse",
    "SwapCreate",
    "SwapStatusUpdate",
    "SwapRating",
    "SwapResponse",
    "RewardResponse",
    "LeaderboardEntry",
    "UserRank",
]
