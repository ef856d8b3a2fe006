"""
app/services/session_store.py

Purpose: Durable client-side key-value storage

- JSON file standing in for the browser's localStorage
- get_item / set_item / remove_item over string values
- load_user / save_user / clear_user for the one session entry

Only the session lifecycle (start, login, logout) touches the user entry.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from app.core.config import settings
from app.core.logging import get_logger
from app.models.user import User

logger = get_logger(__name__)


class SessionStore:
    """
    A flat string-to-string map persisted as one JSON document.
    """

    def __init__(self, path: Union[str, Path, None] = None, key: Optional[str] = None):
        self.path = Path(path or settings.SESSION_STORE_PATH)
        self.key = key or settings.SESSION_STORAGE_KEY

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            # Covers both invalid JSON and invalid UTF-8
            logger.warning(f"⚠️ Ignoring unreadable storage file {self.path}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str):
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str):
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def load_user(self) -> Optional[User]:
        """
        Restores the saved user, if any.

        Returns:
            User, or None when nothing (or nothing valid) is stored
        """
        raw = self.get_item(self.key)
        if not raw:
            return None
        try:
            return User.model_validate_json(raw)
        except ValueError:
            logger.warning("⚠️ Discarding corrupt saved session")
            self.remove_item(self.key)
            return None

    def save_user(self, user: User):
        self.set_item(self.key, user.model_dump_json())
        logger.debug("Session saved", extra={"nrc": user.nrc})

    def clear_user(self):
        self.remove_item(self.key)
        logger.debug("Session cleared")
