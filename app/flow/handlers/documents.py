"""
app/flow/handlers/documents.py

Handles: My Documents screen

- Static document wallet for the signed-in citizen, no API call
"""

from typing import Dict, List

from app.flow.session import Session
from utils.constants import CITIZEN_DOCUMENTS


def list_documents(session: Session) -> List[Dict[str, str]]:
    """
    Documents shown for the current user, each tagged with their NRC.

    Returns:
        Empty list when nobody is signed in
    """
    if not session.is_authenticated:
        return []
    return [{**doc, "holder": session.user.name, "nrc": session.user.nrc} for doc in CITIZEN_DOCUMENTS]
