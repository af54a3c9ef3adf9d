# skillbarter/models/reward.py
import enum

from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillbarter.database import Base
from skillbarter.models.profile import new_id


class RewardType(str, enum.Enum):
    SKILL_COINS = "skill_coins"
    BADGE = "badge"


class Reward(Base):
    __tablename__ = "rewards"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String(20), nullable=False)
    amount = Column(Integer, default=0, nullable=False)
    badge_name = Column(String(100), nullable=True)
    badge_description = Column(String(255), nullable=True)
    earned_for = Column(String(255), nullable=False)
    swap_id = Column(String(36), ForeignKey("swaps.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    profile = relationship("Profile", back_populates="rewards")
    swap = relationship("Swap", foreign_keys=[swap_id])
