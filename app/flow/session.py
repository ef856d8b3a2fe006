"""
app/flow/session.py

Purpose: Front-end session value

- Current user (or None), active screen and the inline message
- Immutable: navigation functions return a new Session
"""

from dataclasses import dataclass, replace
from typing import Optional

from app.flow.states import Screen
from app.models.user import User


@dataclass(frozen=True)
class Session:
    user: Optional[User] = None
    screen: Screen = Screen.LOGIN
    message: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def token(self) -> Optional[str]:
        return self.user.token if self.user else None

    def with_message(self, message: Optional[str]) -> "Session":
        return replace(self, message=message)

    def on(self, screen: Screen, message: Optional[str] = None) -> "Session":
        """Same user on another screen; keeps the current message unless one is given."""
        return replace(self, screen=screen, message=message if message is not None else self.message)


LOGGED_OUT = Session()
