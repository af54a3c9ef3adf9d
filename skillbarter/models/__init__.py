# skillbarter/models/__init__.py
# Import models in dependency order
from .profile import Profile
from .skill import Skill, UserSkill, SkillDirection, ProficiencyLevel
from .swap import Swap, SwapStatus
from .reward import Reward, RewardType

__all__ = [
    "Profile",
    "Skill",
    "UserSkill",
    "SkillDirection",
    "ProficiencyLevel",
    "Swap",
    "SwapStatus",
    "Reward",
    "RewardType",
]
