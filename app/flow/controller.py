"""
app/flow/controller.py

Purpose: Session/navigation controller for the front end

- start / login / logout / navigate / back / submit
- Every operation takes a Session and returns a new one
- The durable store is touched only at start, login and logout
"""

from typing import Any, Dict, Optional

from app.core.exceptions import SmartGovError, ValidationError
from app.core.logging import get_logger, LogContext
from app.flow.dispatcher import dispatch_submit
from app.flow.session import Session, LOGGED_OUT
from app.flow.states import Screen, is_valid_transition
from app.services.session_store import SessionStore
from app.services.smartgov_client import SmartGovClient
from utils.constants import LOGIN_PHONE_MISSING, LOGIN_SUCCESS, LOGOUT_MESSAGE

logger = get_logger(__name__)


class SessionController:
    """
    Holds the collaborators (API client, durable store); session state
    itself lives in the Session values passed through.
    """

    def __init__(self, client: SmartGovClient, store: SessionStore):
        self.client = client
        self.store = store

    def start(self) -> Session:
        """
        Restores a saved user at startup.

        Returns:
            Session on HOME if a user was saved, otherwise the logged-out session
        """
        user = self.store.load_user()
        if user is None:
            logger.info("No saved session, showing login")
            return LOGGED_OUT

        with LogContext(nrc=user.nrc):
            logger.info("Saved session restored")
        return Session(user=user, screen=Screen.HOME)

    def login(self, session: Session, identifier: Optional[str]) -> Session:
        """
        Signs in with a phone number.

        An empty identifier or a backend failure only sets the message;
        user and screen stay as they were.
        """
        identifier = (identifier or "").strip()
        try:
            if not identifier:
                raise ValidationError(LOGIN_PHONE_MISSING)
            user = self.client.login(identifier)
        except SmartGovError as e:
            logger.info(f"Login rejected: {e.message}")
            return session.with_message(e.message)

        self.store.save_user(user)
        with LogContext(nrc=user.nrc, screen=Screen.HOME.value):
            logger.info("✅ Logged in")
        return Session(user=user, screen=Screen.HOME, message=LOGIN_SUCCESS.format(name=user.name))

    def logout(self, session: Session) -> Session:
        """Clears memory and durable state unconditionally."""
        self.store.clear_user()
        if session.user is not None:
            with LogContext(nrc=session.user.nrc):
                logger.info("👋 Logged out")
        return LOGGED_OUT.with_message(LOGOUT_MESSAGE)

    def navigate(self, session: Session, screen: Screen) -> Session:
        """
        Moves to another screen. Ignored without a signed-in user, and for
        targets the current screen cannot reach.
        """
        if not session.is_authenticated:
            logger.debug(f"Navigation to {screen.value} ignored: not signed in")
            return session

        if not is_valid_transition(session.screen, screen):
            logger.warning(f"⚠️ Invalid navigation attempted: {session.screen.value} -> {screen.value}")
            return session

        return session.on(screen)

    def back(self, session: Session) -> Session:
        """Any action screen returns to HOME."""
        if not session.is_authenticated or session.screen == Screen.HOME:
            return session
        return session.on(Screen.HOME)

    def submit(self, session: Session, form: Optional[Dict[str, Any]] = None) -> Session:
        return dispatch_submit(session, self.client, form)
