# skillbarter/api/reward.py
"""
Rewards API Router

Endpoints:
- GET /rewards/my - Current user's reward ledger (coins and badges)
- GET /rewards/leaderboard - Profiles ranked by skill coins
- GET /rewards/my-rank - Current user's leaderboard position
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from skillbarter.database import get_db
from skillbarter.schemas.auth import UserContext
from skillbarter.schemas.reward import LeaderboardEntry, RewardResponse, UserRank
from skillbarter.services import reward_service
from skillbarter.utils.security import get_current_user

router = APIRouter(prefix="/rewards", tags=["rewards"])


# ======================
# REWARD LEDGER
# ======================
@router.get("/my", response_model=List[RewardResponse])
def get_my_rewards(
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Newest first."""
    return reward_service.list_rewards(db, current_user.user_id)


# ======================
# LEADERBOARD
# ======================
@router.get("/leaderboard", response_model=List[LeaderboardEntry])
def get_leaderboard(
    limit: Optional[int] = Query(None, ge=1, le=100, description="Number of profiles (default 50)"),
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return reward_service.get_leaderboard(db, limit=limit)


@router.get("/my-rank", response_model=UserRank)
def get_my_rank(
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return reward_service.get_user_rank(db, current_user.user_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
