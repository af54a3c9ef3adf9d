from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

# ======================
# SWAP REQUEST MODELS
# ======================

class SwapCreate(BaseModel):
    provider_id: str
    skill_id: str
    message: Optional[str] = None

# ======================
# SWAP UPDATE MODELS
# ======================

class SwapStatusUpdate(BaseModel):
    status: str  # "accepted", "in_progress", "completed", "cancelled"

class SwapRating(BaseModel):
    rating: int = Field(..., ge=1, le=5)

# ======================
# SWAP RESPONSE MODELS
# ======================

class SwapResponse(BaseModel):
    id: str
    requester_id: str
    provider_id: str
    skill_id: str
    status: str
    message: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    rating: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
