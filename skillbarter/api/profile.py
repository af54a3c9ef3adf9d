# skillbarter/api/profile.py
"""
Profile API Router

Endpoints:
- GET /profile/ - My profile
- PATCH /profile/ - Update full name and bio
- GET /profile/skills - My offered and needed skills
- POST /profile/skills - List a catalog skill as offered or needed
- DELETE /profile/skills/{user_skill_id} - Remove one of my skills
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from skillbarter.database import get_db
from skillbarter.schemas.auth import UserContext
from skillbarter.schemas.profile import Profile, ProfileUpdate
from skillbarter.schemas.skill import UserSkill, UserSkillCreate
from skillbarter.services import profile_service
from skillbarter.utils.security import get_current_user

router = APIRouter(prefix="/profile", tags=["profile"])


def _not_found_or_bad_request(exc: ValueError) -> HTTPException:
    message = str(exc)
    if message.endswith("not found"):
        return HTTPException(status_code=404, detail=message)
    return HTTPException(status_code=400, detail=message)


# ======================
# PROFILE FIELDS
# ======================
@router.get("/", response_model=Profile)
def get_my_profile(
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return profile_service.get_my_profile(db, current_user.user_id)
    except ValueError as e:
        raise _not_found_or_bad_request(e)


@router.patch("/", response_model=Profile)
def update_my_profile(
    payload: ProfileUpdate,
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return profile_service.update_profile(
            db,
            current_user.user_id,
            full_name=payload.full_name,
            bio=payload.bio,
        )
    except ValueError as e:
        raise _not_found_or_bad_request(e)


# ======================
# MY SKILLS
# ======================
@router.get("/skills", response_model=List[UserSkill])
def get_my_skills(
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return profile_service.list_my_skills(db, current_user.user_id)


@router.post("/skills", response_model=UserSkill, status_code=status.HTTP_201_CREATED)
def add_my_skill(
    payload: UserSkillCreate,
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return profile_service.add_user_skill(
            db,
            current_user.user_id,
            skill_id=payload.skill_id,
            skill_type=payload.type.value,
            proficiency_level=payload.proficiency_level.value,
        )
    except ValueError as e:
        raise _not_found_or_bad_request(e)


@router.delete("/skills/{user_skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_my_skill(
    user_skill_id: str,
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        profile_service.remove_user_skill(db, current_user.user_id, user_skill_id)
    except ValueError as e:
        raise _not_found_or_bad_request(e)
