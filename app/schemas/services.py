"""
app/schemas/services.py

Purpose: Request/response schemas for the citizen service endpoints

- Tax payment, PACRA business registration, ID application, corruption report
- Wire names stay camelCase (taxType, regNo, appId, caseId) through aliases
- Request fields are optional and untyped; handlers only check presence
"""

from pydantic import BaseModel, Field
from typing import Any, Optional


class TokenRequest(BaseModel):
    """Any request that may carry the mock session token."""

    token: Optional[Any] = Field(default=None, description="Session token from auth.login, only its presence is checked")

    class Config:
        populate_by_name = True


class PaymentRequest(TokenRequest):
    """Body of POST /payments/pay."""

    amount: Optional[Any] = Field(default=None, description="Amount to pay, echoed back untouched")
    tax_type: Optional[Any] = Field(default=None, alias="taxType", description="Tax type, e.g. income, echoed back untouched")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {"token": "mock-token-abc", "amount": 100, "taxType": "income"}
        }


class RegistrationRequest(TokenRequest):
    """Body of POST /pacra/register."""

    data: Optional[Any] = Field(default=None, description="Business details (not inspected)")


class IdApplicationRequest(TokenRequest):
    """Body of POST /id/apply."""


class ReportRequest(TokenRequest):
    """Body of POST /reports/submit. Token is optional, reports may be anonymous."""

    details: Optional[Any] = Field(default=None, description="Description of the incident (not inspected)")


class ServiceReceipt(BaseModel):
    status: str = Field(default="OK")

    class Config:
        populate_by_name = True


class PaymentReceipt(ServiceReceipt):
    ref: str = Field(..., description="ZMTAX- payment reference")
    amount: Optional[Any] = None
    tax_type: Optional[Any] = Field(default=None, alias="taxType")


class RegistrationReceipt(ServiceReceipt):
    reg_no: str = Field(..., alias="regNo", description="PACRA- registration number")


class IdApplicationReceipt(ServiceReceipt):
    app_id: str = Field(..., alias="appId", description="IDAPP- application id")


class ReportReceipt(ServiceReceipt):
    case_id: str = Field(..., alias="caseId", description="CASE- case id")
