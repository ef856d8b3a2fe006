"""
app/flow/states.py

Purpose: Defines all front-end screens

- Enum for each screen (LOGIN, HOME, PAY, REGISTER, ID, DOCS, REPORT)
- Single source of truth for navigation
- Screen transition validation
- Metadata for each screen (title, auth requirement, back target)
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass


class Screen(str, Enum):
    """
    Mutually exclusive views of the SmartGov front end.
    Values match the screen identifiers the web client uses.
    """

    LOGIN = "login"
    HOME = "home"

    # Action screens, reachable from HOME only
    PAY = "pay"
    REGISTER = "register"
    ID = "id"
    DOCS = "docs"
    REPORT = "report"


@dataclass
class ScreenMetadata:
    """
    Metadata associated with each screen.
    """
    name: Screen
    display_name: str
    menu_label: Optional[str] = None  # Label on the home menu, None if not listed
    requires_auth: bool = True
    can_go_back: bool = True  # Whether "back" returns to HOME
    calls_api: bool = True  # Whether the screen submits to the mock backend
    description: str = ""


SCREEN_METADATA: Dict[Screen, ScreenMetadata] = {
    Screen.LOGIN: ScreenMetadata(
        name=Screen.LOGIN,
        display_name="Sign in",
        requires_auth=False,
        can_go_back=False,
        description="Phone number login"
    ),
    Screen.HOME: ScreenMetadata(
        name=Screen.HOME,
        display_name="Home",
        can_go_back=False,
        calls_api=False,
        description="Service menu"
    ),
    Screen.PAY: ScreenMetadata(
        name=Screen.PAY,
        display_name="Pay Taxes",
        menu_label="💰 Pay Taxes",
        description="Pay a tax through payments.pay"
    ),
    Screen.REGISTER: ScreenMetadata(
        name=Screen.REGISTER,
        display_name="Register a Business",
        menu_label="🏢 Register Business",
        description="PACRA business registration"
    ),
    Screen.ID: ScreenMetadata(
        name=Screen.ID,
        display_name="National ID Application",
        menu_label="🪪 Apply for ID",
        description="Apply for a national registration card"
    ),
    Screen.DOCS: ScreenMetadata(
        name=Screen.DOCS,
        display_name="My Documents",
        menu_label="📄 My Documents",
        calls_api=False,
        description="Static document wallet"
    ),
    Screen.REPORT: ScreenMetadata(
        name=Screen.REPORT,
        display_name="Report Corruption",
        menu_label="🚨 Report Corruption",
        description="Anonymous corruption report"
    ),
}

ACTION_SCREENS: List[Screen] = [Screen.PAY, Screen.REGISTER, Screen.ID, Screen.DOCS, Screen.REPORT]


# Valid navigation targets. Logout (any -> LOGIN) is handled separately.
SCREEN_TRANSITIONS: Dict[Screen, List[Screen]] = {
    Screen.LOGIN: [Screen.HOME],
    Screen.HOME: list(ACTION_SCREENS),
    Screen.PAY: [Screen.HOME],
    Screen.REGISTER: [Screen.HOME],
    Screen.ID: [Screen.HOME],
    Screen.DOCS: [Screen.HOME],
    Screen.REPORT: [Screen.HOME],
}


def is_valid_transition(from_screen: Screen, to_screen: Screen) -> bool:
    """
    Checks if a navigation step is allowed.

    Args:
        from_screen: Current screen
        to_screen: Target screen

    Returns:
        True if transition is allowed, False otherwise
    """
    return to_screen in SCREEN_TRANSITIONS.get(from_screen, [])


def get_screen_metadata(screen: Screen) -> ScreenMetadata:
    return SCREEN_METADATA[screen]


def menu_entries() -> List[ScreenMetadata]:
    """Home menu entries, in display order."""
    return [SCREEN_METADATA[screen] for screen in ACTION_SCREENS]
