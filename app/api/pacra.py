"""
app/api/pacra.py

Purpose: Business registration endpoint (Patents and Companies Registration Agency)

- POST /pacra/register with {token, data}
"""

from fastapi import APIRouter
from typing import Optional

from app.schemas.services import RegistrationRequest, RegistrationReceipt
from app.services import citizen_service

router = APIRouter()


@router.post("/register", response_model=RegistrationReceipt)
async def register(payload: Optional[RegistrationRequest] = None):
    payload = payload or RegistrationRequest()
    return citizen_service.register_business(payload.token, payload.data)
