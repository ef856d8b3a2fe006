"""
app/flow/handlers/report.py

Handles: Report Corruption screen

- Details are optional; the token goes along when the user is signed in
- The backend accepts anonymous reports, so this only fails if unreachable
"""

from typing import Optional

from app.core.exceptions import SmartGovError
from app.core.logging import get_logger, LogContext
from app.flow.session import Session
from app.flow.states import Screen
from app.services.smartgov_client import SmartGovClient
from utils.constants import REPORT_SUCCESS, ACTION_FAILED
from utils.validation_utils import sanitize_input

logger = get_logger(__name__)


def handle_report(session: Session, client: SmartGovClient, details: Optional[str] = None) -> Session:
    with LogContext(screen=Screen.REPORT.value):
        try:
            receipt = client.submit_report(sanitize_input(details, max_length=2000) or None, token=session.token)
        except SmartGovError as e:
            logger.warning(f"Report submission failed: {e.message}")
            return session.with_message(ACTION_FAILED.format(error=e.message))

        logger.info(f"Report filed: {receipt['caseId']}")
        return session.on(Screen.HOME, REPORT_SUCCESS.format(case_id=receipt["caseId"]))
