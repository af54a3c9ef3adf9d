# skillbarter/schemas/reward.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =====================================
# REWARD LEDGER
# =====================================

class RewardResponse(BaseModel):
    """Single ledger entry (coins or badge)"""
    id: str
    user_id: str
    type: str
    amount: int
    badge_name: Optional[str] = None
    badge_description: Optional[str] = None
    earned_for: str
    swap_id: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# =====================================
# LEADERBOARD
# =====================================

class LeaderboardEntry(BaseModel):
    rank: int = Field(..., ge=1, description="1 = most skill coins")
    id: str
    full_name: str
    skill_coins: int
    total_swaps_completed: int
    avatar_url: Optional[str] = None


class UserRank(BaseModel):
    """Caller's own leaderboard position"""
    rank: int = Field(..., ge=1)
    skill_coins: int
    total_swaps_completed: int
