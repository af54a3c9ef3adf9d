# skillbarter/api/skill.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillbarter.database import get_db
from skillbarter.schemas.skill import Skill
from skillbarter.services import profile_service

router = APIRouter(prefix="/skills", tags=["skills"])


# ======================
# GET: Skill catalog
# ======================
@router.get("/", response_model=List[Skill])
def get_all_skills(db: Session = Depends(get_db)):
    return profile_service.list_skill_catalog(db)
