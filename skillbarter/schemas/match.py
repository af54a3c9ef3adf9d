# skillbarter/schemas/match.py
"""
Match Pydantic Schemas
Response models for compatibility scoring and match discovery
"""

from pydantic import BaseModel, Field

from skillbarter.schemas.profile import ProfileSummary
from skillbarter.schemas.skill import Skill


# ======================
# MATCH RESULT
# ======================

class MatchResult(BaseModel):
    """One counterparty with the skill pairing that qualified them"""
    profile: ProfileSummary = Field(..., description="Counterparty profile")
    skill: Skill = Field(..., description="Skill the pairing is about")
    score: int = Field(..., ge=0, le=100, description="Compatibility score")
    match_type: str = Field(
        ...,
        description="'offered' when the counterparty needs what the caller offers, "
                    "'needed' when they offer what the caller needs",
    )


# ======================
# COMPATIBILITY LOOKUP
# ======================

class CompatibilityResponse(BaseModel):
    """Score for a single teacher/learner level pairing"""
    teacher_level: str
    learner_level: str
    score: int = Field(..., description="Compatibility score (40, 60, 80 or 100)")

    class Config:
        json_schema_extra = {
            "example": {
                "teacher_level": "advanced",
                "learner_level": "beginner",
                "score": 100,
            }
        }
