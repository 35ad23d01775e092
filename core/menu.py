"""
Menu prompts for the interactive CLI.

Plain numbered prompts read with input(). Invalid input re-prompts;
EOFError and KeyboardInterrupt propagate so the main loop can say goodbye.
"""

from typing import Any, Callable, List, Optional, Sequence, Tuple

AUTH = "auth"
CREATE_ACTIVITIES = "create_activities"
LIST_USERS = "list_users"
LIST_ACTIVITIES = "list_activities"
REGISTER_USER = "register_user"
VIEW_REGISTRATIONS = "view_registrations"
VIEW_STATUS = "view_status"
CLEAR_SESSION = "clear_session"
EXIT = "exit"

# (action, label, requires authentication)
MENU_CHOICES: List[Tuple[str, str, bool]] = [
    (AUTH, "Authenticate (Get Client ID + Login)", False),
    (CREATE_ACTIVITIES, "Create Activities", True),
    (LIST_USERS, "List Users", True),
    (LIST_ACTIVITIES, "List Activities", True),
    (REGISTER_USER, "Register User for Activity", True),
    (VIEW_REGISTRATIONS, "View User Registrations", True),
    (VIEW_STATUS, "View Session Status", False),
    (CLEAR_SESSION, "Clear Session", False),
    (EXIT, "Exit", False),
]

BANNER_WIDTH = 60


def show_main_menu(is_authenticated: bool) -> str:
    """Print the menu and return the chosen action.

    Actions that need authentication are listed but refused until the
    session holds a token.
    """
    print("\nWhat would you like to do?")
    for number, (_, label, needs_auth) in enumerate(MENU_CHOICES, start=1):
        suffix = " (requires authentication)" if needs_auth and not is_authenticated else ""
        print(f"  [{number}] {label}{suffix}")

    while True:
        choice = input(f"\nEnter choice [1-{len(MENU_CHOICES)}]: ").strip()
        if not choice.isdigit() or not 1 <= int(choice) <= len(MENU_CHOICES):
            print(f"  Invalid choice. Please enter a number from 1 to {len(MENU_CHOICES)}.")
            continue

        action, label, needs_auth = MENU_CHOICES[int(choice) - 1]
        if needs_auth and not is_authenticated:
            print(f"  '{label}' requires authentication. Authenticate first.")
            continue
        return action


def choose_from_list(
    items: Sequence[Any],
    describe: Callable[[Any], str],
    title: str,
) -> Optional[Any]:
    """Let the user pick one item; returns None when they go back.

    Args:
        items: The entries to choose from.
        describe: Renders one entry as a menu line.
        title: Prompt heading, e.g. "Select a user".
    """
    if not items:
        print(f"\n  {title}: nothing to choose from.")
        return None

    print(f"\n{title}:")
    for number, item in enumerate(items, start=1):
        print(f"  [{number}] {describe(item)}")
    print("  [0] Go back")

    while True:
        choice = input(f"\nEnter choice [0-{len(items)}]: ").strip()
        if choice.isdigit() and 0 <= int(choice) <= len(items):
            if int(choice) == 0:
                return None
            return items[int(choice) - 1]
        print(f"  Invalid choice. Please enter a number from 0 to {len(items)}.")


def confirm_action(message: str, default: bool = True) -> bool:
    hint = "Y/n" if default else "y/N"
    while True:
        answer = input(f"\n{message} [{hint}]: ").strip().lower()
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("  Please answer y or n.")


def pause():
    input("\nPress Enter to continue...")


def display_welcome(api_base_url: str):
    print("\n" + "═" * BANNER_WIDTH)
    print("  Database Seeder - Interactive CLI")
    print("═" * BANNER_WIDTH)
    print(f"  API: {api_base_url}")
    print("═" * BANNER_WIDTH + "\n")


def display_action_header(action_name: str):
    print("\n" + "─" * BANNER_WIDTH)
    print(f"  {action_name}")
    print("─" * BANNER_WIDTH)


def display_goodbye():
    print("\n" + "═" * BANNER_WIDTH)
    print("  Thank you for using Database Seeder!")
    print("═" * BANNER_WIDTH + "\n")
