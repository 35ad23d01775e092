"""
CLI Action Handlers — Wrap steps for the interactive CLI.

Each action runs one step, or a short sub-pipeline of steps, against the
session's persistent context. Selection actions follow the same shape:

    fetch list step -> choose entry (or go back) -> store selection -> dependent step

Choosing "Go back" ends the action quietly: no selection key is written
and no error is raised. Step errors propagate to the main loop.
"""

from steps import (
    ACTIVITIES_LIST_STEP,
    AUTHENTICATION_STEPS,
    CREATE_ACTIVITIES_STEP,
    REGISTER_USER_STEP,
    USER_REGISTRATIONS_STEP,
    USERS_LIST_STEP,
)

from . import menu
from .context import (
    ACTIVITIES_LIST,
    SELECTED_ACTIVITY_ID,
    SELECTED_USER_ID,
    USERS_LIST,
)


def describe_user(user: dict) -> str:
    name = " ".join(p for p in (user.get("firstName"), user.get("lastName")) if p)
    label = name or user.get("username") or user.get("email") or str(user.get("id"))
    email = user.get("email")
    return f"{label} <{email}>" if email and email != label else label


def describe_activity(activity: dict) -> str:
    title = activity.get("title") or str(activity.get("id"))
    supplier = activity.get("supplier")
    return f"{title} ({supplier})" if supplier else title


def authenticate_action(session) -> bool:
    """Domain + Auth steps."""
    menu.display_action_header("Authentication")
    for step in AUTHENTICATION_STEPS:
        step.run(session.client, session.context)
    print("\n✓ Authentication completed successfully!")
    return True


def create_activities_action(session) -> bool:
    menu.display_action_header("Create Activities")
    CREATE_ACTIVITIES_STEP.run(session.client, session.context)
    print("\n✓ Activities created successfully!")
    return True


def list_users_action(session) -> bool:
    menu.display_action_header("Users")
    USERS_LIST_STEP.run(session.client, session.context)
    for number, user in enumerate(session.context.get(USERS_LIST, []), start=1):
        print(f"  {number}. {describe_user(user)}")
    return True


def list_activities_action(session) -> bool:
    menu.display_action_header("Activities")
    ACTIVITIES_LIST_STEP.run(session.client, session.context)
    for number, activity in enumerate(session.context.get(ACTIVITIES_LIST, []), start=1):
        print(f"  {number}. {describe_activity(activity)}")
    return True


def _select_user(session):
    USERS_LIST_STEP.run(session.client, session.context)
    return menu.choose_from_list(
        session.context.get(USERS_LIST, []), describe_user, "Select a user"
    )


def register_user_action(session) -> bool:
    """Pick a user, pick an activity, confirm, register.

    Returns False when the user went back or declined, True once registered.
    """
    menu.display_action_header("Register User for Activity")

    user = _select_user(session)
    if user is None:
        print("Going back to main menu...")
        return False

    ACTIVITIES_LIST_STEP.run(session.client, session.context)
    activity = menu.choose_from_list(
        session.context.get(ACTIVITIES_LIST, []), describe_activity, "Select an activity"
    )
    if activity is None:
        print("Going back to main menu...")
        return False

    if not menu.confirm_action(
        f"Register {describe_user(user)} for '{describe_activity(activity)}'?"
    ):
        print("Registration cancelled.")
        return False

    session.context.set(SELECTED_USER_ID, user.get("id"))
    session.context.set(SELECTED_ACTIVITY_ID, activity.get("id"))
    REGISTER_USER_STEP.run(session.client, session.context)
    return True


def view_registrations_action(session) -> bool:
    """Pick a user and show their activity registrations."""
    menu.display_action_header("View User Registrations")

    user = _select_user(session)
    if user is None:
        print("Going back to main menu...")
        return False

    session.context.set(SELECTED_USER_ID, user.get("id"))
    USER_REGISTRATIONS_STEP.run(session.client, session.context)
    return True


def view_status_action(session) -> bool:
    menu.display_action_header("Session Status")
    session.display_status()
    menu.pause()
    return True


def clear_session_action(session) -> bool:
    menu.display_action_header("Clear Session")
    if menu.confirm_action("Clear all session variables (token included)?", default=False):
        session.clear()
        return True
    return False


ACTIONS = {
    menu.AUTH: authenticate_action,
    menu.CREATE_ACTIVITIES: create_activities_action,
    menu.LIST_USERS: list_users_action,
    menu.LIST_ACTIVITIES: list_activities_action,
    menu.REGISTER_USER: register_user_action,
    menu.VIEW_REGISTRATIONS: view_registrations_action,
    menu.VIEW_STATUS: view_status_action,
    menu.CLEAR_SESSION: clear_session_action,
}


def handle_action(action: str, session) -> bool:
    handler = ACTIONS.get(action)
    if handler is None:
        print(f"Unknown action: {action}")
        return False
    return handler(session)
