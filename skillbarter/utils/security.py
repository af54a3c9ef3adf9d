from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from skillbarter.config import settings
from skillbarter.schemas.auth import UserContext


# ==========================
# AUTH CONFIG
# ==========================

# Tokens come from the hosted auth provider; this service never issues
# them to end users.
bearer_scheme = HTTPBearer(auto_error=False)


# ==========================
# JWT TOKEN
# ==========================

def create_access_token(user_id: str, email: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    """Mint a token shaped like the provider's, for local runs and tests."""
    if expires_delta is None:
        expires_delta = timedelta(hours=1)

    to_encode = {
        "sub": user_id,
        "email": email,
        "role": "authenticated",
        "aud": settings.AUTH_JWT_AUDIENCE,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.AUTH_JWT_SECRET,
        algorithm=settings.AUTH_JWT_ALGORITHM
    )


def decode_access_token(token: str) -> UserContext:
    """
    Verify a provider token and extract the caller.

    Raises:
        JWTError: Bad signature, wrong audience, expired, or no subject
    """
    payload = jwt.decode(
        token,
        settings.AUTH_JWT_SECRET,
        algorithms=[settings.AUTH_JWT_ALGORITHM],
        audience=settings.AUTH_JWT_AUDIENCE,
    )

    user_id = payload.get("sub")
    if not user_id:
        raise JWTError("Token has no subject")

    return UserContext(
        user_id=user_id,
        email=payload.get("email"),
        role=payload.get("role"),
    )


# ==========================
# AUTH HELPERS
# ==========================

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserContext:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise credentials_exception

    try:
        return decode_access_token(credentials.credentials)
    except JWTError:
        raise credentials_exception
