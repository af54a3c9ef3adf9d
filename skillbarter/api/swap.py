# skillbarter/api/swap.py
"""
Swap API Router

Endpoints:
- POST /swaps/ - Request a swap from another profile
- GET /swaps/my - List my swaps (view: all, incoming, outgoing, active, completed)
- PATCH /swaps/{swap_id}/status - Accept, start, complete or cancel
- PATCH /swaps/{swap_id}/rating - Rate a completed swap
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List

from skillbarter.database import get_db
from skillbarter.schemas.auth import UserContext
from skillbarter.schemas.swap import SwapCreate, SwapRating, SwapResponse, SwapStatusUpdate
from skillbarter.services import swap_service
from skillbarter.utils.security import get_current_user

router = APIRouter(prefix="/swaps", tags=["swaps"])


def _not_found_or_bad_request(exc: ValueError) -> HTTPException:
    message = str(exc)
    if message.endswith("not found"):
        return HTTPException(status_code=404, detail=message)
    return HTTPException(status_code=400, detail=message)


@router.post("/", response_model=SwapResponse, status_code=status.HTTP_201_CREATED)
def create_swap(
    payload: SwapCreate,
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return swap_service.request_swap(
            db,
            requester_id=current_user.user_id,
            provider_id=payload.provider_id,
            skill_id=payload.skill_id,
            message=payload.message,
        )
    except ValueError as e:
        raise _not_found_or_bad_request(e)


@router.get("/my", response_model=List[SwapResponse])
def get_my_swaps(
    view: str = Query("all", pattern="^(all|incoming|outgoing|active|completed)$"),
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return swap_service.list_user_swaps(db, current_user.user_id, view=view)


@router.patch("/{swap_id}/status", response_model=SwapResponse)
def update_swap_status(
    swap_id: str,
    payload: SwapStatusUpdate,
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return swap_service.update_swap_status(db, swap_id, current_user.user_id, payload.status)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except swap_service.SwapUpdateError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ValueError as e:
        raise _not_found_or_bad_request(e)


@router.patch("/{swap_id}/rating", response_model=SwapResponse)
def rate_swap(
    swap_id: str,
    payload: SwapRating,
    current_user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return swap_service.rate_swap(db, swap_id, current_user.user_id, payload.rating)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except ValueError as e:
        raise _not_found_or_bad_request(e)
