# skillbarter/services/profile_service.py
"""
Profile Management - Business Logic Service

Skill catalog, the caller's offered/needed skill list and the editable
profile fields (full name and bio).
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from skillbarter import models
from skillbarter.crud import profile as profile_crud
from skillbarter.crud import skill as skill_crud
from skillbarter.models.skill import ProficiencyLevel, SkillDirection

logger = logging.getLogger(__name__)

VALID_DIRECTIONS = {d.value for d in SkillDirection}
VALID_LEVELS = {level.value for level in ProficiencyLevel}


def _get_profile_or_raise(db: Session, user_id: str) -> models.Profile:
    profile = profile_crud.get_profile(db, user_id)
    if not profile:
        raise ValueError(f"Profile {user_id} not found")
    return profile


# =====================================
# SKILL CATALOG
# =====================================

def list_skill_catalog(db: Session) -> List[models.Skill]:
    return skill_crud.list_skills(db)


# =====================================
# MY SKILLS
# =====================================

def list_my_skills(db: Session, user_id: str) -> List[models.UserSkill]:
    return skill_crud.get_user_skills(db, user_id)


def add_user_skill(
    db: Session,
    user_id: str,
    skill_id: str,
    skill_type: str,
    proficiency_level: str = ProficiencyLevel.BEGINNER.value,
) -> models.UserSkill:
    """
    List a catalog skill as offered or needed.

    Args:
        skill_type: 'offered' or 'needed'
        proficiency_level: 'beginner', 'intermediate' or 'advanced'

    Raises:
        ValueError: Unknown direction/level/skill/profile, or the skill is
            already listed in that direction
    """
    if skill_type not in VALID_DIRECTIONS:
        raise ValueError(f"Skill type must be one of: {', '.join(sorted(VALID_DIRECTIONS))}")
    if proficiency_level not in VALID_LEVELS:
        raise ValueError(f"Proficiency level must be one of: {', '.join(sorted(VALID_LEVELS))}")

    _get_profile_or_raise(db, user_id)
    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise ValueError(f"Skill {skill_id} not found")

    if skill_crud.user_has_skill(db, user_id=user_id, skill_id=skill_id, skill_type=skill_type):
        raise ValueError(f"You already have {skill.name} in your {skill_type} list")

    user_skill = skill_crud.create_user_skill(
        db,
        user_id=user_id,
        skill_id=skill_id,
        skill_type=skill_type,
        proficiency_level=proficiency_level,
    )
    db.commit()
    db.refresh(user_skill)
    logger.info("User %s added %s skill %s (%s)", user_id, skill_type, skill.name, proficiency_level)
    return user_skill


def remove_user_skill(db: Session, user_id: str, user_skill_id: str) -> None:
    """Only the owner's own rows can be removed."""
    if not skill_crud.delete_user_skill(db, user_skill_id, user_id):
        raise ValueError(f"Skill link {user_skill_id} not found")
    db.commit()
    logger.info("User %s removed skill link %s", user_id, user_skill_id)


# =====================================
# PROFILE FIELDS
# =====================================

def get_my_profile(db: Session, user_id: str) -> models.Profile:
    return _get_profile_or_raise(db, user_id)


def update_profile(
    db: Session,
    user_id: str,
    full_name: Optional[str] = None,
    bio: Optional[str] = None,
) -> models.Profile:
    """Fields left as None are untouched."""
    profile = _get_profile_or_raise(db, user_id)

    changes = {}
    if full_name is not None:
        clean_name = full_name.strip()
        if not clean_name:
            raise ValueError("Full name cannot be empty")
        changes["full_name"] = clean_name
    if bio is not None:
        changes["bio"] = bio.strip()

    if changes:
        profile_crud.update_profile(db, profile, **changes)
        db.commit()
        db.refresh(profile)
    return profile
