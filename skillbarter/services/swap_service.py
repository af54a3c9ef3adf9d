# skillbarter/services/swap_service.py
"""
Swap Lifecycle - Business Logic Service

Requests, status transitions, completion payouts and ratings for swaps
between two profiles.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillbarter import models
from skillbarter.config import settings
from skillbarter.crud import profile as profile_crud
from skillbarter.crud import reward as reward_crud
from skillbarter.crud import skill as skill_crud
from skillbarter.crud import swap as swap_crud
from skillbarter.models.reward import RewardType
from skillbarter.models.swap import SwapStatus
from skillbarter.services import reward_service

logger = logging.getLogger(__name__)


ALLOWED_TRANSITIONS = {
    SwapStatus.PENDING.value: {SwapStatus.ACCEPTED.value, SwapStatus.CANCELLED.value},
    SwapStatus.ACCEPTED.value: {SwapStatus.IN_PROGRESS.value, SwapStatus.CANCELLED.value},
    SwapStatus.IN_PROGRESS.value: {SwapStatus.COMPLETED.value, SwapStatus.CANCELLED.value},
}

SWAP_VIEWS = ("all", "incoming", "outgoing", "active", "completed")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _require_participant(swap: models.Swap, actor_id: str) -> None:
    if actor_id not in (swap.requester_id, swap.provider_id):
        raise PermissionError("Only swap participants can change this swap")


# =====================================
# REQUESTS
# =====================================

def request_swap(
    db: Session,
    requester_id: str,
    provider_id: str,
    skill_id: str,
    message: Optional[str] = None,
) -> models.Swap:
    """
    Open a pending swap asking `provider_id` to share `skill_id`.

    Raises:
        ValueError: Self-swap, unknown provider or unknown skill
    """
    if requester_id == provider_id:
        raise ValueError("Cannot request a swap with yourself")

    if not profile_crud.get_profile(db, provider_id):
        raise ValueError(f"Profile {provider_id} not found")

    skill = skill_crud.get_skill(db, skill_id)
    if not skill:
        raise ValueError(f"Skill {skill_id} not found")

    if not message:
        message = f"Hi! I'd love to learn {skill.name} from you."

    swap = swap_crud.create_swap(db, requester_id, provider_id, skill_id, message)
    db.commit()
    db.refresh(swap)
    logger.info("Swap %s requested by %s from %s", swap.id, requester_id, provider_id)
    return swap


def list_user_swaps(db: Session, user_id: str, view: str = "all") -> List[models.Swap]:
    """Swaps the user takes part in, newest first, narrowed by dashboard view."""
    if view not in SWAP_VIEWS:
        raise ValueError(f"Unknown swap view '{view}'")

    swaps = swap_crud.list_swaps_for_user(db, user_id)
    if view == "incoming":
        return [s for s in swaps if s.provider_id == user_id and s.status == SwapStatus.PENDING.value]
    if view == "outgoing":
        return [s for s in swaps if s.requester_id == user_id and s.status == SwapStatus.PENDING.value]
    if view == "active":
        return [s for s in swaps if s.status in (SwapStatus.ACCEPTED.value, SwapStatus.IN_PROGRESS.value)]
    if view == "completed":
        return [s for s in swaps if s.status == SwapStatus.COMPLETED.value]
    return swaps


# =====================================
# STATUS TRANSITIONS
# =====================================

class SwapUpdateError(Exception):
    """The swap update could not be written; nothing was changed."""


def update_swap_status(db: Session, swap_id: str, actor_id: str, new_status: str) -> models.Swap:
    """
    Move a swap along its lifecycle.

    pending -> accepted -> in_progress -> completed, with cancelled
    reachable from any open state. Completing pays both participants.

    The status move is a conditional update on the status that was read,
    and for completion it shares one transaction with the payout: either
    the swap is completed and both sides are paid, or nothing changes.

    Raises:
        ValueError: Unknown swap or illegal transition
        PermissionError: Actor is not a participant
        SwapUpdateError: The write failed and was rolled back
    """
    swap = swap_crud.get_swap(db, swap_id)
    if not swap:
        raise ValueError(f"Swap {swap_id} not found")
    _require_participant(swap, actor_id)

    current_status = swap.status
    if new_status not in ALLOWED_TRANSITIONS.get(current_status, set()):
        raise ValueError(f"Cannot move swap from '{current_status}' to '{new_status}'")

    completing = new_status == SwapStatus.COMPLETED.value
    try:
        moved = swap_crud.transition_swap_status(
            db,
            swap_id,
            from_status=current_status,
            to_status=new_status,
            completed_at=_utcnow() if completing else None,
        )
        if moved != 1:
            raise ValueError(f"Cannot move swap from '{current_status}' to '{new_status}'")

        if completing:
            _pay_out_completion(db, swap)
        db.commit()
    except ValueError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Swap %s update to %s failed: %s", swap_id, new_status, exc)
        raise SwapUpdateError(f"Swap update failed: {exc}") from exc

    db.refresh(swap)
    logger.info("Swap %s moved to %s by %s", swap.id, new_status, actor_id)

    if completing:
        for participant_id in (swap.requester_id, swap.provider_id):
            reward_service.evaluate_badges(db, participant_id)

    return swap


def _pay_out_completion(db: Session, swap: models.Swap) -> None:
    """Stage both participants' payouts; the caller commits or rolls back."""
    amount = settings.SWAP_COMPLETION_REWARD
    reason = f"Completed skill swap: {swap.skill.name}"

    for participant_id in (swap.requester_id, swap.provider_id):
        if not profile_crud.increment_swaps_completed(db, participant_id):
            raise ValueError(f"Profile {participant_id} not found")
        profile_crud.increment_skill_coins(db, participant_id, amount)
        reward_crud.create_reward(
            db,
            user_id=participant_id,
            reward_type=RewardType.SKILL_COINS.value,
            amount=amount,
            earned_for=reason,
            swap_id=swap.id,
        )


# =====================================
# RATINGS
# =====================================

def rate_swap(db: Session, swap_id: str, actor_id: str, rating: int) -> models.Swap:
    """
    Rate a completed swap (1-5).

    Raises:
        ValueError: Unknown swap, swap not completed, or rating out of range
        PermissionError: Actor is not a participant
    """
    if rating < 1 or rating > 5:
        raise ValueError("Rating must be between 1 and 5")

    swap = swap_crud.get_swap(db, swap_id)
    if not swap:
        raise ValueError(f"Swap {swap_id} not found")
    _require_participant(swap, actor_id)

    if swap.status != SwapStatus.COMPLETED.value:
        raise ValueError("Only completed swaps can be rated")

    swap.rating = rating
    db.commit()
    db.refresh(swap)
    return swap
