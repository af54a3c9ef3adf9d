from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================
# PROFILE SCHEMAS
# ======================

class ProfileSummary(BaseModel):
    id: str
    full_name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    skill_coins: int = 0
    total_swaps_completed: int = 0

    model_config = ConfigDict(from_attributes=True)


class Profile(ProfileSummary):
    email: str


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    bio: Optional[str] = None
