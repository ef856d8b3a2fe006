"""
app/services/citizen_service.py

Purpose: Mock citizen services

- Tax payments (ZRA)
- Business registration (PACRA)
- National ID applications
- Corruption reports (anonymous allowed)

Every call is computed independently; nothing is persisted.
"""

from typing import Any

from app.core.logging import get_logger
from app.schemas.services import (
    PaymentReceipt,
    RegistrationReceipt,
    IdApplicationReceipt,
    ReportReceipt,
)
from app.services.auth_service import require_token
from app.services.reference_service import (
    generate_payment_ref,
    generate_registration_number,
    generate_application_id,
    generate_case_id,
)
from utils.constants import STATUS_OK

logger = get_logger(__name__)


def pay_tax(token: Any, amount: Any = None, tax_type: Any = None) -> PaymentReceipt:
    """
    Records a mock tax payment and echoes the amount and tax type.

    Raises:
        UnauthenticatedError: If token is missing
    """
    require_token(token)
    receipt = PaymentReceipt(status=STATUS_OK, ref=generate_payment_ref(), amount=amount, tax_type=tax_type)
    logger.info(f"Payment accepted: {receipt.ref}", extra={"endpoint": "payments.pay"})
    return receipt


def register_business(token: Any, data: Any = None) -> RegistrationReceipt:
    """
    Issues a mock PACRA registration number. `data` is accepted but not inspected.

    Raises:
        UnauthenticatedError: If token is missing
    """
    require_token(token)
    receipt = RegistrationReceipt(status=STATUS_OK, reg_no=generate_registration_number())
    logger.info(
        f"Business registered: {receipt.reg_no}",
        extra={"endpoint": "pacra.register"}
    )
    return receipt


def apply_for_id(token: Any) -> IdApplicationReceipt:
    """
    Issues a mock national ID application id.

    Raises:
        UnauthenticatedError: If token is missing
    """
    require_token(token)
    receipt = IdApplicationReceipt(status=STATUS_OK, app_id=generate_application_id())
    logger.info(f"ID application received: {receipt.app_id}", extra={"endpoint": "id.apply"})
    return receipt


def submit_report(details: Any = None) -> ReportReceipt:
    """Opens a corruption case. Never fails; the token is not required."""
    receipt = ReportReceipt(status=STATUS_OK, case_id=generate_case_id())
    logger.info(
        f"Report submitted: {receipt.case_id}",
        extra={"endpoint": "reports.submit"}
    )
    return receipt
