"""
app/flow/handlers/register.py

Handles: Register Business screen (PACRA)

- Sends whatever business details were captured
- Shows the PACRA- registration number and returns to HOME
"""

from typing import Any, Dict, Optional

from app.core.exceptions import SmartGovError
from app.core.logging import get_logger, LogContext
from app.flow.session import Session
from app.flow.states import Screen
from app.services.smartgov_client import SmartGovClient
from utils.constants import REGISTRATION_SUCCESS, ACTION_FAILED

logger = get_logger(__name__)


def handle_register(session: Session, client: SmartGovClient, data: Optional[Dict[str, Any]] = None) -> Session:
    with LogContext(nrc=session.user.nrc, screen=Screen.REGISTER.value):
        try:
            receipt = client.register_business(session.token, data)
        except SmartGovError as e:
            logger.warning(f"Registration failed: {e.message}")
            return session.with_message(ACTION_FAILED.format(error=e.message))

        logger.info(f"Business registered: {receipt['regNo']}")
        return session.on(Screen.HOME, REGISTRATION_SUCCESS.format(reg_no=receipt["regNo"]))
