from pydantic import BaseModel, ConfigDict
from typing import Optional

from skillbarter.models.skill import ProficiencyLevel, SkillDirection

# ======================
# SKILL SCHEMAS
# ======================

# skillbarter/schemas/skill.py
class SkillBase(BaseModel):
    name: str
    category: Optional[str] = "General"
    description: Optional[str] = None


class Skill(SkillBase):
    id: str

    model_config = ConfigDict(from_attributes=True)


# ======================
# USER_SKILL SCHEMAS
# ======================

class UserSkillCreate(BaseModel):
    skill_id: str
    type: SkillDirection
    proficiency_level: ProficiencyLevel = ProficiencyLevel.BEGINNER


class UserSkill(BaseModel):
    id: str
    user_id: str
    skill_id: str
    type: str
    proficiency_level: Optional[str] = None
    skill: Optional[Skill] = None

    model_config = ConfigDict(from_attributes=True)
