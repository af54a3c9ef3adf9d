# skillbarter/crud/reward.py
from typing import List, Optional

from sqlalchemy.orm import Session
from skillbarter import models


def create_reward(
    db: Session,
    *,
    user_id: str,
    reward_type: str,
    amount: int,
    earned_for: str,
    swap_id: Optional[str] = None,
    badge_name: Optional[str] = None,
    badge_description: Optional[str] = None,
) -> models.Reward:
    reward = models.Reward(
        user_id=user_id,
        type=reward_type,
        amount=amount,
        earned_for=earned_for,
        swap_id=swap_id,
        badge_name=badge_name,
        badge_description=badge_description,
    )
    db.add(reward)
    db.flush()
    return reward


def list_rewards_for_user(db: Session, user_id: str) -> List[models.Reward]:
    return db.query(models.Reward).filter(
        models.Reward.user_id == user_id
    ).order_by(models.Reward.created_at.desc()).all()


def has_badge(db: Session, user_id: str, badge_name: str) -> bool:
    return db.query(models.Reward.id).filter(
        models.Reward.user_id == user_id,
        models.Reward.type == models.RewardType.BADGE.value,
        models.Reward.badge_name == badge_name,
    ).first() is not None
