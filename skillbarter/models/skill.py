import enum

from sqlalchemy import Column, String, Text, ForeignKey, TIMESTAMP, func
from sqlalchemy.orm import relationship
from skillbarter.database import Base
from skillbarter.models.profile import new_id


class SkillDirection(str, enum.Enum):
    OFFERED = "offered"
    NEEDED = "needed"


class ProficiencyLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# skillbarter/models/skill.py
class Skill(Base):
    __tablename__ = "skills"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(100), unique=True, nullable=False, index=True)
    category = Column(String(50), default="General")
    description = Column(Text, default="")
    created_at = Column(TIMESTAMP, server_default=func.now())

    user_skills = relationship("UserSkill", back_populates="skill", cascade="all, delete-orphan")
    swaps = relationship("Swap", back_populates="skill")


class UserSkill(Base):
    __tablename__ = "user_skills"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    skill_id = Column(
        String(36),
        ForeignKey("skills.id", ondelete="CASCADE"),
        index=True,
        nullable=False
    )
    type = Column(String(20), nullable=False)  # 'offered' or 'needed'
    proficiency_level = Column(String(20), default=ProficiencyLevel.BEGINNER.value)
    created_at = Column(TIMESTAMP, server_default=func.now())

    # Relationships
    skill = relationship("Skill", back_populates="user_skills")
    profile = relationship("Profile", back_populates="user_skills")
