from pydantic import BaseModel, EmailStr
from typing import Optional

# ======================
# CALLER CONTEXT
# ======================

class UserContext(BaseModel):
    """Identity of the caller, taken from a verified access token."""
    user_id: str
    email: Optional[EmailStr] = None
    role: Optional[str] = None
