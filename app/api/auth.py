"""
app/api/auth.py

Purpose: Login endpoint

- POST /auth/login with {phone}
- 200 {name, nrc, token}; 400 {error} when phone is missing
"""

from fastapi import APIRouter
from typing import Optional

from app.models.user import User
from app.schemas.auth import LoginRequest
from app.services import auth_service

router = APIRouter()


@router.post("/login", response_model=User)
async def login(payload: Optional[LoginRequest] = None):
    """
    Mock login. Any non-empty phone number is accepted.
    """
    payload = payload or LoginRequest()
    return auth_service.login(payload.phone)
