"""
app/api/payments.py

Purpose: Tax payment endpoint

- POST /payments/pay with {token, amount, taxType}
- Echoes amount and taxType with a ZMTAX- reference
"""

from fastapi import APIRouter
from typing import Optional

from app.schemas.services import PaymentRequest, PaymentReceipt
from app.services import citizen_service

router = APIRouter()


@router.post("/pay", response_model=PaymentReceipt, response_model_exclude_none=True)
async def pay(payload: Optional[PaymentRequest] = None):
    payload = payload or PaymentRequest()
    return citizen_service.pay_tax(payload.token, payload.amount, payload.tax_type)
