"""
app/flow/handlers/pay.py

Handles: Pay Taxes screen

- Checks an amount was entered
- Calls payments.pay with the session token
- Shows the ZMTAX- reference and returns to HOME
"""

from typing import Any, Optional

from app.core.exceptions import SmartGovError
from app.core.logging import get_logger, LogContext
from app.flow.session import Session
from app.flow.states import Screen
from app.services.smartgov_client import SmartGovClient
from utils.constants import PAYMENT_SUCCESS, PAYMENT_AMOUNT_MISSING, ACTION_FAILED
from utils.validation_utils import is_present

logger = get_logger(__name__)


def handle_pay(session: Session, client: SmartGovClient, amount: Any = None, tax_type: Optional[str] = None) -> Session:
    """
    Submits a tax payment.

    Args:
        session: Current session (must be authenticated)
        client: API client
        amount: Amount typed by the user
        tax_type: Selected tax type

    Returns:
        Session on HOME with the receipt message, or on PAY with the error
    """
    if isinstance(amount, str):
        amount = amount.strip()
    if not is_present(amount):
        return session.with_message(PAYMENT_AMOUNT_MISSING)

    with LogContext(nrc=session.user.nrc, screen=Screen.PAY.value):
        try:
            receipt = client.pay(session.token, amount, tax_type)
        except SmartGovError as e:
            logger.warning(f"Payment failed: {e.message}")
            return session.with_message(ACTION_FAILED.format(error=e.message))

        logger.info(f"Payment completed: {receipt['ref']}")
        return session.on(
            Screen.HOME,
            PAYMENT_SUCCESS.format(ref=receipt["ref"], amount=receipt.get("amount"), tax_type=receipt.get("taxType") or "")
        )
