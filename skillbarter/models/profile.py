import uuid

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillbarter.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


# ---------------- PROFILE (one row per auth user) ----------------
class Profile(Base):
    __tablename__ = "profiles"

    # Same id as the hosted auth user
    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    full_name = Column(String(100), nullable=False)
    bio = Column(Text, default="")
    avatar_url = Column(String(255), default="")
    skill_coins = Column(Integer, default=0, nullable=False)
    total_swaps_completed = Column(Integer, default=0, nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())

    user_skills = relationship("UserSkill", back_populates="profile", cascade="all, delete-orphan")
    rewards = relationship("Reward", back_populates="profile", cascade="all, delete-orphan")
    requested_swaps = relationship("Swap", foreign_keys="Swap.requester_id", back_populates="requester")
    provided_swaps = relationship("Swap", foreign_keys="Swap.provider_id", back_populates="provider")
