"""
utils/time_utils.py

Purpose: Time helpers

- Epoch milliseconds for time-based identifiers
"""

import time

def epoch_millis() -> int:
    """
    Current Unix time in whole milliseconds.
    """
    return int(time.time() * 1000)

