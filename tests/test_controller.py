import pytest
from fastapi.testclient import TestClient

from app.flow.controller import SessionController
from app.flow.session import Session, LOGGED_OUT
from app.flow.states import Screen
from app.main import app
from app.models.user import User
from app.services.session_store import SessionStore
from app.services.smartgov_client import SmartGovClient
from utils.constants import LOGIN_PHONE_MISSING, PAYMENT_AMOUNT_MISSING


@pytest.fixture
def store(tmp_path):
    return SessionStore(tmp_path / "storage.json", key="smartgov_user")


@pytest.fixture
def controller(store):
    return SessionController(SmartGovClient(http_client=TestClient(app)), store)


@pytest.fixture
def home(controller):
    return controller.login(controller.start(), "12345678")


def test_start_without_saved_user_shows_login(controller):
    session = controller.start()
    assert session.user is None
    assert session.screen == Screen.LOGIN


def test_login_with_empty_identifier_changes_nothing_but_message(controller, store):
    session = controller.login(controller.start(), "   ")
    assert session.user is None
    assert session.screen == Screen.LOGIN
    assert session.message == LOGIN_PHONE_MISSING
    assert store.load_user() is None


def test_login_moves_home_and_saves_user(home, store):
    assert home.screen == Screen.HOME
    assert home.user.nrc == "12345678"
    assert home.user.token
    assert store.load_user() == home.user


def test_reload_restores_session(home, store):
    restarted = SessionController(SmartGovClient(http_client=TestClient(app)), store)
    session = restarted.start()
    assert session.user == home.user
    assert session.screen == Screen.HOME


def test_logout_clears_memory_and_storage(controller, home, store):
    session = controller.logout(home)
    assert session.user is None
    assert session.screen == Screen.LOGIN
    assert store.get_item("smartgov_user") is None
    assert controller.start().screen == Screen.LOGIN


def test_logout_when_logged_out_is_harmless(controller):
    assert controller.logout(LOGGED_OUT).screen == Screen.LOGIN


def test_navigate_ignored_without_user(controller):
    session = controller.navigate(LOGGED_OUT, Screen.PAY)
    assert session == LOGGED_OUT


def test_navigate_and_back(controller, home):
    for screen in (Screen.PAY, Screen.REGISTER, Screen.ID, Screen.DOCS, Screen.REPORT):
        on_screen = controller.navigate(home, screen)
        assert on_screen.screen == screen
        assert controller.back(on_screen).screen == Screen.HOME


def test_navigate_between_action_screens_is_ignored(controller, home):
    on_pay = controller.navigate(home, Screen.PAY)
    assert controller.navigate(on_pay, Screen.REPORT).screen == Screen.PAY
    assert controller.navigate(on_pay, Screen.LOGIN).screen == Screen.PAY


def test_pay_returns_home_with_reference(controller, home):
    session = controller.submit(controller.navigate(home, Screen.PAY), {"amount": "150", "tax_type": "income"})
    assert session.screen == Screen.HOME
    assert "ZMTAX-" in session.message
    assert "150" in session.message


def test_pay_requires_amount(controller, home):
    on_pay = controller.navigate(home, Screen.PAY)
    session = controller.submit(on_pay, {"amount": " ", "tax_type": "income"})
    assert session.screen == Screen.PAY
    assert session.message == PAYMENT_AMOUNT_MISSING


def test_missing_token_surfaces_backend_error(controller):
    session = Session(user=User(name="John Doe", nrc="1", token=""), screen=Screen.ID)
    result = controller.submit(session, {})
    assert result.screen == Screen.ID
    assert "Not authenticated" in result.message


def test_register_id_and_report(controller, home):
    registered = controller.submit(controller.navigate(home, Screen.REGISTER), {"data": {"business_name": "Acme"}})
    assert "PACRA-" in registered.message

    applied = controller.submit(controller.navigate(registered, Screen.ID))
    assert "IDAPP-" in applied.message

    reported = controller.submit(controller.navigate(applied, Screen.REPORT), {"details": "Bribe requested"})
    assert reported.screen == Screen.HOME
    assert "CASE-" in reported.message


def test_submit_without_user_is_ignored(controller):
    assert controller.submit(LOGGED_OUT, {"amount": 10}) == LOGGED_OUT


def test_end_to_end_login_logout_reload(controller, store):
    session = controller.login(controller.start(), "12345678")
    assert session.user.token
    controller.logout(session)

    reloaded = SessionController(SmartGovClient(http_client=TestClient(app)), store).start()
    assert reloaded.screen == Screen.LOGIN
    assert reloaded.user is None
