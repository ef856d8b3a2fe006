"""
SmartGov Zambia console front end

Walks through the screens against a running mock backend:
    python -m app.main                    # terminal 1
    python scripts/smartgov_console.py    # terminal 2

The signed-in user is kept in SESSION_STORE_PATH, so quitting without
logging out resumes on the home menu next time.
"""

import sys
from pathlib import Path
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from app.core.logging import setup_logging
from app.flow.controller import SessionController
from app.flow.states import Screen, menu_entries
from app.flow.views import render
from app.services.session_store import SessionStore
from app.services.smartgov_client import SmartGovClient


def print_section(title):
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def show(session):
    view = render(session)
    print_section(view.title)
    if view.header:
        print(f"👤 {view.header}")
    for line in view.lines:
        print(f"  {line}")
    if view.message:
        print(f"\n💬 {view.message}")
    print(f"\n{view.footer}")
    return view


def read_form(view):
    form = {name: input(f"{name}: ").strip() for name in view.fields}
    if view.screen == Screen.REGISTER:
        return {"data": form}
    return form


def main():
    setup_logging()
    store = SessionStore()

    with SmartGovClient() as client:
        controller = SessionController(client, store)
        session = controller.start()

        while True:
            view = show(session)

            if view.screen == Screen.LOGIN:
                phone = input("\nphone (or q to quit): ").strip()
                if phone.lower() == "q":
                    break
                session = controller.login(session, phone)
                continue

            if view.screen == Screen.HOME:
                entries = menu_entries()
                print("\nChoose a service by number, l to log out, q to quit:")
                for index, entry in enumerate(entries, start=1):
                    print(f"  {index}. {entry.menu_label}")
                choice = input("> ").strip().lower()
                if choice == "q":
                    break
                if choice == "l":
                    session = controller.logout(session)
                elif choice.isdigit() and 1 <= int(choice) <= len(entries):
                    session = controller.navigate(session, entries[int(choice) - 1].name)
                else:
                    session = session.with_message("Unknown option")
                continue

            if view.screen == Screen.DOCS:
                input("\nPress Enter to go back")
                session = controller.back(session)
                continue

            choice = input("\ns to submit, b to go back: ").strip().lower()
            if choice == "b":
                session = controller.back(session)
            elif choice == "s":
                session = controller.submit(session, read_form(view))

    print("\n👋 Goodbye")


if __name__ == "__main__":
    main()
