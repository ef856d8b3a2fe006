"""
app/services/reference_service.py

Purpose: Receipt identifier generation

- ZMTAX- payment references (8 URL-safe characters)
- PACRA- registration numbers (5 digits)
- IDAPP- application ids (millisecond timestamp)
- CASE- corruption case ids (7 upper-case alphanumerics)

Identifiers are independent per call. Nothing is stored, so uniqueness is
only as good as the random source.
"""

import secrets

from utils.constants import (
    PAYMENT_REF_PREFIX,
    REGISTRATION_PREFIX,
    ID_APPLICATION_PREFIX,
    CASE_PREFIX,
    PAYMENT_REF_LENGTH,
    CASE_ID_LENGTH,
    URL_SAFE_ALPHABET,
    CASE_ID_ALPHABET,
    REGISTRATION_NUMBER_MIN,
    REGISTRATION_NUMBER_MAX,
)
from utils.time_utils import epoch_millis


def random_token(length: int, alphabet: str = URL_SAFE_ALPHABET) -> str:
    """
    Draws `length` characters from `alphabet` using a CSPRNG.

    Args:
        length: Number of characters
        alphabet: Characters to pick from

    Returns:
        Random string
    """
    return ''.join(secrets.choice(alphabet) for _ in range(length))


def generate_payment_ref() -> str:
    return f"{PAYMENT_REF_PREFIX}{random_token(PAYMENT_REF_LENGTH)}"


def generate_registration_number() -> str:
    span = REGISTRATION_NUMBER_MAX - REGISTRATION_NUMBER_MIN + 1
    return f"{REGISTRATION_PREFIX}{REGISTRATION_NUMBER_MIN + secrets.randbelow(span)}"


def generate_application_id() -> str:
    return f"{ID_APPLICATION_PREFIX}{epoch_millis()}"


def generate_case_id() -> str:
    return f"{CASE_PREFIX}{random_token(CASE_ID_LENGTH, CASE_ID_ALPHABET)}"
