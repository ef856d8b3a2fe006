"""
app/api/identity.py

Purpose: National ID application endpoint

- POST /id/apply with {token}
"""

from fastapi import APIRouter
from typing import Optional

from app.schemas.services import IdApplicationRequest, IdApplicationReceipt
from app.services import citizen_service

router = APIRouter()


@router.post("/apply", response_model=IdApplicationReceipt)
async def apply(payload: Optional[IdApplicationRequest] = None):
    payload = payload or IdApplicationRequest()
    return citizen_service.apply_for_id(payload.token)
