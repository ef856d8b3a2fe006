"""
utils/validation_utils.py

Purpose: Input presence checks

- The mock backend only checks that required fields are present
- Front-end forms use the same checks before calling the API
"""

from typing import Any, Optional


def is_present(value: Any) -> bool:
    """
    True when a value counts as supplied.

    None and the empty string are absent; any other value (including 0
    and whitespace) is present. Callers that want whitespace treated as
    empty strip first.

    Args:
        value: Field value from a request body or form

    Returns:
        True if the field was supplied
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True


def sanitize_input(text: Optional[str], max_length: int = 500) -> str:
    """
    Trims free text typed by the user.

    Args:
        text: Raw input
        max_length: Longest string kept

    Returns:
        Stripped text, cut to max_length
    """
    if not text:
        return ""
    return text.strip()[:max_length]
