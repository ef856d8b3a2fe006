"""
app/api/reports.py

Purpose: Corruption report endpoint

- POST /reports/submit with {details?, token?}
- Anonymous reports are allowed, so this endpoint never returns 401
"""

from fastapi import APIRouter
from typing import Optional

from app.schemas.services import ReportRequest, ReportReceipt
from app.services import citizen_service

router = APIRouter()


@router.post("/submit", response_model=ReportReceipt)
async def submit(payload: Optional[ReportRequest] = None):
    payload = payload or ReportRequest()
    return citizen_service.submit_report(payload.details)
