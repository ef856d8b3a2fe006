"""
app/flow/handlers/id_application.py

Handles: National ID Application screen
"""

from app.core.exceptions import SmartGovError
from app.core.logging import get_logger, LogContext
from app.flow.session import Session
from app.flow.states import Screen
from app.services.smartgov_client import SmartGovClient
from utils.constants import ID_APPLICATION_SUCCESS, ACTION_FAILED

logger = get_logger(__name__)


def handle_id_application(session: Session, client: SmartGovClient) -> Session:
    with LogContext(nrc=session.user.nrc, screen=Screen.ID.value):
        try:
            receipt = client.apply_for_id(session.token)
        except SmartGovError as e:
            logger.warning(f"ID application failed: {e.message}")
            return session.with_message(ACTION_FAILED.format(error=e.message))

        return session.on(Screen.HOME, ID_APPLICATION_SUCCESS.format(app_id=receipt["appId"]))
