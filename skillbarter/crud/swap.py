# skillbarter/crud/swap.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload
from skillbarter import models


def create_swap(db: Session, requester_id: str, provider_id: str, skill_id: str, message: str = "") -> models.Swap:
    swap = models.Swap(
        requester_id=requester_id,
        provider_id=provider_id,
        skill_id=skill_id,
        status=models.SwapStatus.PENDING.value,
        message=message,
    )
    db.add(swap)
    db.flush()
    return swap


def get_swap(db: Session, swap_id: str) -> Optional[models.Swap]:
    return db.query(models.Swap).options(
        joinedload(models.Swap.skill)
    ).filter(models.Swap.id == swap_id).first()


def list_swaps_for_user(db: Session, user_id: str) -> List[models.Swap]:
    return db.query(models.Swap).filter(
        or_(
            models.Swap.requester_id == user_id,
            models.Swap.provider_id == user_id,
        )
    ).order_by(models.Swap.created_at.desc()).all()


def transition_swap_status(
    db: Session,
    swap_id: str,
    *,
    from_status: str,
    to_status: str,
    completed_at: Optional[datetime] = None,
) -> int:
    """Conditional status move; 0 rows means the swap was no longer in from_status."""
    values = {models.Swap.status: to_status}
    if completed_at is not None:
        values[models.Swap.completed_at] = completed_at
    return db.query(models.Swap).filter(
        models.Swap.id == swap_id,
        models.Swap.status == from_status,
    ).update(values, synchronize_session=False)


def count_distinct_skills_received(db: Session, user_id: str) -> int:
    """Different skills the user has had shared with them in completed swaps."""
    return db.query(func.count(func.distinct(models.Swap.skill_id))).filter(
        models.Swap.requester_id == user_id,
        models.Swap.status == models.SwapStatus.COMPLETED.value,
    ).scalar() or 0


def count_distinct_people_helped(db: Session, user_id: str) -> int:
    """Different requesters the user has completed swaps for."""
    return db.query(func.count(func.distinct(models.Swap.requester_id))).filter(
        models.Swap.provider_id == user_id,
        models.Swap.status == models.SwapStatus.COMPLETED.value,
    ).scalar() or 0
