"""
app/flow/dispatcher.py

Purpose: Central form dispatcher

- Receives a submitted form from the active screen
- Routes to the handler for that screen
- Ignores submissions from unauthenticated sessions
"""

from typing import Any, Dict, Optional

from app.flow.session import Session
from app.flow.states import Screen
from app.flow.handlers.pay import handle_pay
from app.flow.handlers.register import handle_register
from app.flow.handlers.id_application import handle_id_application
from app.flow.handlers.report import handle_report
from app.services.smartgov_client import SmartGovClient
from app.core.logging import get_logger

logger = get_logger(__name__)


def dispatch_submit(session: Session, client: SmartGovClient, form: Optional[Dict[str, Any]] = None) -> Session:
    """
    Submits the active screen's form.

    Args:
        session: Current session
        client: API client
        form: Field values typed by the user

    Returns:
        Updated session
    """
    form = form or {}

    if not session.is_authenticated:
        logger.warning("⚠️ Submit without a signed-in user ignored")
        return session

    screen = session.screen
    logger.info(f"🚦 Routing submit: screen={screen.value}")

    if screen == Screen.PAY:
        return handle_pay(session, client, amount=form.get("amount"), tax_type=form.get("tax_type"))
    elif screen == Screen.REGISTER:
        return handle_register(session, client, data=form.get("data"))
    elif screen == Screen.ID:
        return handle_id_application(session, client)
    elif screen == Screen.REPORT:
        return handle_report(session, client, details=form.get("details"))
    elif screen in (Screen.LOGIN, Screen.HOME, Screen.DOCS):
        # Nothing to submit on these screens
        return session
    else:
        raise ValueError(f"Unhandled screen: {screen}")
