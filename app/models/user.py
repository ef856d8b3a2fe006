"""
app/models/user.py

Purpose: Logged-in citizen model

- Display name and NRC (phone-derived identifier)
- Mock session token issued by auth.login
- Serialized as-is into the durable client-side store
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    The authenticated citizen. Only the client keeps one; the backend
    issues it on login and never looks it up again.
    """
    name: str = Field(..., description="Citizen display name")
    nrc: str = Field(..., description="Identifier derived from the login phone number")
    token: str = Field(..., description="Mock session token sent with every action")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "nrc": "12345678",
                "token": "mock-token-abc"
            }
        }
