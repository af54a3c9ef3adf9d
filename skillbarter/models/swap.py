# skillbarter/models/swap.py
import enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, CheckConstraint, func
from sqlalchemy.orm import relationship
from skillbarter.database import Base
from skillbarter.models.profile import new_id


class SwapStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Swap(Base):
    __tablename__ = "swaps"

    id = Column(String(36), primary_key=True, default=new_id)
    requester_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    provider_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = Column(String(36), ForeignKey("skills.id"), nullable=False)
    status = Column(String(20), default=SwapStatus.PENDING.value, nullable=False)
    message = Column(Text, default="")
    scheduled_at = Column(TIMESTAMP, nullable=True)
    completed_at = Column(TIMESTAMP, nullable=True)
    rating = Column(Integer, nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        CheckConstraint('rating IS NULL OR (rating >= 1 AND rating <= 5)', name='check_swap_rating_range'),
    )

    # Relationships
    requester = relationship("Profile", foreign_keys=[requester_id], back_populates="requested_swaps")
    provider = relationship("Profile", foreign_keys=[provider_id], back_populates="provided_swaps")
    skill = relationship("Skill", back_populates="swaps")
