from typing import List, Optional

from sqlalchemy.orm import Session, joinedload
from skillbarter import models


# ============================
# SKILL TABLE
# ============================

def get_skill(db: Session, skill_id: str) -> Optional[models.Skill]:
    return db.query(models.Skill).filter(models.Skill.id == skill_id).first()


def list_skills(db: Session) -> List[models.Skill]:
    """Skill catalog, alphabetical."""
    return db.query(models.Skill).order_by(models.Skill.name.asc()).all()


# ============================
# USER SKILLS (OFFERED / NEEDED)
# ============================

def get_user_skills(db: Session, user_id: str) -> List[models.UserSkill]:
    """All skills a user lists, both directions, with the skill row loaded."""
    return db.query(models.UserSkill).options(
        joinedload(models.UserSkill.skill)
    ).filter(
        models.UserSkill.user_id == user_id
    ).all()


def find_counterpart_skills(
    db: Session,
    *,
    skill_id: str,
    skill_type: str,
    exclude_user_id: str,
) -> List[models.UserSkill]:
    """Other users listing `skill_id` in direction `skill_type`, with profile and skill loaded."""
    return db.query(models.UserSkill).options(
        joinedload(models.UserSkill.profile),
        joinedload(models.UserSkill.skill),
    ).filter(
        models.UserSkill.skill_id == skill_id,
        models.UserSkill.type == skill_type,
        models.UserSkill.user_id != exclude_user_id,
    ).all()


def user_has_skill(db: Session, *, user_id: str, skill_id: str, skill_type: str) -> bool:
    return db.query(models.UserSkill.id).filter(
        models.UserSkill.user_id == user_id,
        models.UserSkill.skill_id == skill_id,
        models.UserSkill.type == skill_type,
    ).first() is not None


def create_user_skill(
    db: Session,
    *,
    user_id: str,
    skill_id: str,
    skill_type: str,
    proficiency_level: str,
) -> models.UserSkill:
    user_skill = models.UserSkill(
        user_id=user_id,
        skill_id=skill_id,
        type=skill_type,
        proficiency_level=proficiency_level,
    )
    db.add(user_skill)
    db.flush()
    return user_skill


def delete_user_skill(db: Session, user_skill_id: str, user_id: str) -> bool:
    user_skill = db.query(models.UserSkill).filter(
        models.UserSkill.id == user_skill_id,
        models.UserSkill.user_id == user_id
    ).first()

    if not user_skill:
        return False

    db.delete(user_skill)
    db.flush()
    return True
