from typing import List, Optional

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session
from skillbarter import models


def get_profile(db: Session, user_id: str) -> Optional[models.Profile]:
    return db.query(models.Profile).filter(models.Profile.id == user_id).first()


def get_top_profiles(db: Session, limit: int) -> List[models.Profile]:
    return db.query(models.Profile).order_by(
        models.Profile.skill_coins.desc(),
        models.Profile.id.asc(),
    ).limit(limit).all()


def increment_skill_coins(db: Session, user_id: str, amount: int) -> int:
    """Atomic balance bump; returns the number of rows touched."""
    return db.query(models.Profile).filter(
        models.Profile.id == user_id
    ).update(
        {models.Profile.skill_coins: models.Profile.skill_coins + amount},
        synchronize_session=False,
    )


def increment_swaps_completed(db: Session, user_id: str) -> int:
    return db.query(models.Profile).filter(
        models.Profile.id == user_id
    ).update(
        {models.Profile.total_swaps_completed: models.Profile.total_swaps_completed + 1},
        synchronize_session=False,
    )


def update_profile(db: Session, profile: models.Profile, **fields) -> models.Profile:
    for key, value in fields.items():
        setattr(profile, key, value)
    db.flush()
    return profile


def count_profiles_ranked_above(db: Session, profile: models.Profile) -> int:
    """Profiles ahead of `profile` in leaderboard order (coins desc, id asc)."""
    coins = profile.skill_coins or 0
    return db.query(func.count(models.Profile.id)).filter(
        or_(
            models.Profile.skill_coins > coins,
            and_(models.Profile.skill_coins == coins, models.Profile.id < profile.id),
        )
    ).scalar() or 0
