"""
app/flow/views.py

Purpose: Render boundary

- Turns a Session into the View the front end should show
- Every Screen is handled explicitly
- A session without a user always renders the login view
"""

from dataclasses import dataclass, field
from typing import List, Optional

from app.flow.handlers.documents import list_documents
from app.flow.session import Session
from app.flow.states import Screen, get_screen_metadata, menu_entries
from utils.constants import APP_TITLE, APP_FOOTER, LOGIN_PROMPT, TAX_TYPES


@dataclass
class View:
    screen: Screen
    title: str
    lines: List[str] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)  # Form inputs the screen collects
    header: Optional[str] = None
    message: Optional[str] = None
    footer: str = APP_FOOTER


def render(session: Session) -> View:
    """
    Derives the view for a session.

    Args:
        session: Current session

    Returns:
        View for the active screen
    """
    if not session.is_authenticated:
        return View(
            screen=Screen.LOGIN,
            title=APP_TITLE,
            lines=[LOGIN_PROMPT],
            fields=["phone"],
            message=session.message,
        )

    screen = session.screen
    header = f"{session.user.name} ({session.user.nrc})"
    title = get_screen_metadata(screen).display_name

    if screen in (Screen.LOGIN, Screen.HOME):
        # A signed-in user never sees the login form
        lines = [entry.menu_label for entry in menu_entries()]
        return View(Screen.HOME, get_screen_metadata(Screen.HOME).display_name, lines, header=header, message=session.message)
    elif screen == Screen.PAY:
        lines = [f"Tax types: {', '.join(TAX_TYPES)}"]
        fields = ["amount", "tax_type"]
    elif screen == Screen.REGISTER:
        lines = ["Business details are sent to PACRA for registration."]
        fields = ["business_name", "business_type"]
    elif screen == Screen.ID:
        lines = ["Submit an application for a National Registration Card."]
        fields = []
    elif screen == Screen.DOCS:
        lines = [f"{doc['title']} - {doc['holder']}" for doc in list_documents(session)]
        fields = []
    elif screen == Screen.REPORT:
        lines = ["Reports can be made anonymously."]
        fields = ["details"]
    else:
        raise ValueError(f"Unhandled screen: {screen}")

    return View(screen, title, lines, fields, header=header, message=session.message)
