# skillbarter/services/reward_service.py
"""
Rewards Module - Business Logic Service

Skill coin grants, the reward ledger, badges and the leaderboard.
"""

import logging
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillbarter import models
from skillbarter.config import settings
from skillbarter.crud import profile as profile_crud
from skillbarter.crud import reward as reward_crud
from skillbarter.crud import swap as swap_crud
from skillbarter.models.reward import RewardType
from skillbarter.schemas.reward import LeaderboardEntry, UserRank

logger = logging.getLogger(__name__)


# =====================================
# CONFIGURATION CONSTANTS
# =====================================

def _swaps_completed(db: Session, profile: models.Profile) -> int:
    return profile.total_swaps_completed or 0


def _skill_coins(db: Session, profile: models.Profile) -> int:
    return profile.skill_coins or 0


def _skills_received(db: Session, profile: models.Profile) -> int:
    return swap_crud.count_distinct_skills_received(db, profile.id)


def _people_helped(db: Session, profile: models.Profile) -> int:
    return swap_crud.count_distinct_people_helped(db, profile.id)


class BadgeRule:
    def __init__(
        self,
        name: str,
        description: str,
        metric: Callable[[Session, models.Profile], int],
        requirement: int,
    ):
        self.name = name
        self.description = description
        self.metric = metric
        self.requirement = requirement

    def is_met(self, db: Session, profile: models.Profile) -> bool:
        return self.metric(db, profile) >= self.requirement


BADGE_RULES = [
    BadgeRule("First Exchange", "Complete your first work swap", _swaps_completed, 1),
    BadgeRule("Exchange Master", "Complete 10 work swaps", _swaps_completed, 10),
    BadgeRule("Work Seeker", "Get 5 different types of work done", _skills_received, 5),
    BadgeRule("Service Provider", "Help 15 different professionals", _people_helped, 15),
    BadgeRule("Coin Collector", "Earn 100 SkillCoins", _skill_coins, 100),
    BadgeRule("Exchange Champion", "Complete 25 work swaps", _swaps_completed, 25),
]


# =====================================
# SKILL COINS
# =====================================

def award_skill_coins(db: Session, user_id: str, amount: int, reason: str) -> bool:
    """
    Credit skill coins to a profile.

    Failures are logged and rolled back, never raised.

    Args:
        db: Database session
        user_id: Profile ID
        amount: Coins to add
        reason: Why the coins were granted

    Returns:
        True if the balance was updated
    """
    try:
        updated = profile_crud.increment_skill_coins(db, user_id, amount)
        if not updated:
            logger.error("Error awarding skill coins: profile %s not found", user_id)
            db.rollback()
            return False
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Error awarding skill coins to %s (%s): %s", user_id, reason, exc)
        return False

    logger.info("Awarded %s skill coins to %s: %s", amount, user_id, reason)
    return True


def record_reward(
    db: Session,
    user_id: str,
    amount: int,
    earned_for: str,
    swap_id: Optional[str] = None,
) -> models.Reward:
    """Append a skill-coin entry to the reward ledger."""
    reward = reward_crud.create_reward(
        db,
        user_id=user_id,
        reward_type=RewardType.SKILL_COINS.value,
        amount=amount,
        earned_for=earned_for,
        swap_id=swap_id,
    )
    db.commit()
    db.refresh(reward)
    return reward


# =====================================
# BADGES
# =====================================

def grant_badge(
    db: Session,
    user_id: str,
    badge_name: str,
    badge_description: str,
    earned_for: str,
) -> models.Reward:
    reward = reward_crud.create_reward(
        db,
        user_id=user_id,
        reward_type=RewardType.BADGE.value,
        amount=0,
        earned_for=earned_for,
        badge_name=badge_name,
        badge_description=badge_description,
    )
    db.commit()
    db.refresh(reward)
    logger.info("Badge '%s' granted to %s", badge_name, user_id)
    return reward


def evaluate_badges(db: Session, user_id: str) -> List[models.Reward]:
    """
    Grant every badge whose requirement the profile now meets and
    which it does not hold yet.

    Returns:
        Newly granted badge entries
    """
    profile = profile_crud.get_profile(db, user_id)
    if not profile:
        raise ValueError(f"Profile not found for user {user_id}")
    db.refresh(profile)

    granted = []
    for rule in BADGE_RULES:
        if not rule.is_met(db, profile):
            continue
        if reward_crud.has_badge(db, user_id, rule.name):
            continue
        granted.append(grant_badge(db, user_id, rule.name, rule.description, rule.description))
    return granted


# =====================================
# QUERIES
# =====================================

def list_rewards(db: Session, user_id: str) -> List[models.Reward]:
    return reward_crud.list_rewards_for_user(db, user_id)


def get_leaderboard(db: Session, limit: Optional[int] = None) -> List[LeaderboardEntry]:
    """Profiles ranked by skill coins, richest first."""
    if limit is None:
        limit = settings.LEADERBOARD_SIZE

    return [
        LeaderboardEntry(
            rank=position,
            id=profile.id,
            full_name=profile.full_name,
            skill_coins=profile.skill_coins or 0,
            total_swaps_completed=profile.total_swaps_completed or 0,
            avatar_url=profile.avatar_url,
        )
        for position, profile in enumerate(profile_crud.get_top_profiles(db, limit), start=1)
    ]


def get_user_rank(db: Session, user_id: str) -> UserRank:
    """
    The caller's position on the full leaderboard, using the same
    ordering as `get_leaderboard` (coins desc, then id).

    Raises:
        ValueError: Unknown profile
    """
    profile = profile_crud.get_profile(db, user_id)
    if not profile:
        raise ValueError(f"Profile {user_id} not found")

    return UserRank(
        rank=profile_crud.count_profiles_ranked_above(db, profile) + 1,
        skill_coins=profile.skill_coins or 0,
        total_swaps_completed=profile.total_swaps_completed or 0,
    )
