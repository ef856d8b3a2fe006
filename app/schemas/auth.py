"""
app/schemas/auth.py

Purpose: Login request schema

- Every field optional so presence checks return 400 instead of 422
"""

from pydantic import BaseModel, Field
from typing import Optional


class LoginRequest(BaseModel):
    """Body of POST /auth/login."""

    phone: Optional[str] = Field(default=None, description="Phone number used as the citizen identifier")

    class Config:
        json_schema_extra = {
            "example": {"phone": "12345678"}
        }
