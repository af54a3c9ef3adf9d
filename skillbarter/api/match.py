# skillbarter/api/match.py
"""
Match API Router

Endpoints:
- GET /matches/ - Broad matches (they need what I offer, or offer what I need)
- GET /matches/mutual - Mutual matches (both directions hold)
- GET /matches/compatibility - Score a single teacher/learner level pairing
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List

from skillbarter.database import get_db
from skillbarter.matching import MatchFinder, MatchLookupError, calculate_compatibility
from skillbarter.models.skill import ProficiencyLevel
from skillbarter.schemas.auth import UserContext
from skillbarter.schemas.match import CompatibilityResponse, MatchResult
from skillbarter.utils.security import get_current_user

router = APIRouter(prefix="/matches", tags=["matches"])

LOOKUP_FAILED_DETAIL = "Match lookup failed; try again shortly"


def get_match_finder() -> MatchFinder:
    return MatchFinder()


# ======================
# BROAD MATCHES
# ======================
@router.get("/", response_model=List[MatchResult])
async def get_matches(
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db),
    finder: MatchFinder = Depends(get_match_finder),
):
    """
    Counterparties who need a skill you offer or offer a skill you need.

    An empty list means no matches exist; a failed lookup answers 503.
    """
    try:
        return await finder.collect_broad_matches(db, current_user.user_id)
    except MatchLookupError:
        raise HTTPException(status_code=503, detail=LOOKUP_FAILED_DETAIL)


# ======================
# MUTUAL MATCHES
# ======================
@router.get("/mutual", response_model=List[MatchResult])
async def get_mutual_matches(
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db),
    finder: MatchFinder = Depends(get_match_finder),
):
    """Counterparties who need a skill you offer and offer a skill you need."""
    try:
        return await finder.collect_mutual_matches(db, current_user.user_id)
    except MatchLookupError:
        raise HTTPException(status_code=503, detail=LOOKUP_FAILED_DETAIL)


# ======================
# COMPATIBILITY SCORE
# ======================
@router.get("/compatibility", response_model=CompatibilityResponse)
def get_compatibility(
    teacher_level: ProficiencyLevel = Query(..., description="Level of the side offering the skill"),
    learner_level: ProficiencyLevel = Query(..., description="Level of the side needing the skill"),
):
    return CompatibilityResponse(
        teacher_level=teacher_level.value,
        learner_level=learner_level.value,
        score=calculate_compatibility(teacher_level, learner_level),
    )
