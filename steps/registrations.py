"""
Registration steps: register the selected user for the selected activity,
and show a user's registrations.

Both read their selections from the context (selectedUserId,
selectedActivityId); the interactive CLI stores them after the user picks
from a list.
"""

from core.context import (
    LAST_REGISTRATION,
    SELECTED_ACTIVITY_ID,
    SELECTED_USER_ID,
    USER_REGISTRATION_COUNT,
    USER_REGISTRATIONS,
)
from core.errors import MissingPrerequisite


def register_user_for_activity(client, context) -> None:
    """POST /registrations/bulk for selectedUserId on selectedActivityId."""
    print("\n[Register User] Registering user for activity...")

    user_id = context.require(SELECTED_USER_ID, "No user selected. Please select a user first.")
    activity_id = context.require(
        SELECTED_ACTIVITY_ID, "No activity selected. Please select an activity first."
    )

    print(f"[Register User] User ID: {user_id}")
    print(f"[Register User] Activity ID: {activity_id}")

    bulk_register_request = {
        "action": "REGISTER",
        "activityId": activity_id,
        "userIds": [user_id],
    }

    def store_registration(response, ctx):
        try:
            data = response.json()
        except ValueError:
            data = None
        if data:
            ctx.set(LAST_REGISTRATION, data)

    client.post("/registrations/bulk", bulk_register_request, store_registration)
    print("[Register User] ✓ User successfully registered for activity")


def _print_registration(index: int, reg: dict) -> None:
    title = (
        reg.get("title") or reg.get("activityTitle") or reg.get("activityName")
        or reg.get("activityId") or "Unknown"
    )
    print(f"\n  {index}. Activity: {title}")
    reg_id = reg.get("id") or reg.get("registrationId")
    if reg_id:
        print(f"     Registration ID: {reg_id}")
    if reg.get("status") is not None:
        print(f"     Status: {reg['status']}")
    if reg.get("progress") is not None:
        print(f"     Progress: {reg['progress']}%")
    for field, label in (("startDate", "Start Date"), ("endDate", "End Date"),
                         ("completedAt", "Completed At")):
        if reg.get(field):
            print(f"     {label}: {reg[field]}")


def fetch_user_registrations(client, context) -> None:
    """GET /users/{selectedUserId}/registrations, print and store them."""
    print("\n[User Registrations] Fetching activity registrations...")

    context.unset(USER_REGISTRATIONS)
    user_id = context.require(SELECTED_USER_ID, "No user selected. Please select a user first.")
    print(f"[User Registrations] Fetching registrations for user: {user_id}")

    def store_registrations(response, ctx):
        registrations = response.json() or []
        print(f"\n[User Registrations] Found {len(registrations)} registration(s):")
        if not registrations:
            print("  No registrations found for this user.")
        for index, reg in enumerate(registrations, start=1):
            _print_registration(index, reg)
        ctx.set(USER_REGISTRATIONS, registrations)
        ctx.set(USER_REGISTRATION_COUNT, len(registrations))

    client.get(f"/users/{user_id}/registrations", store_registrations)

    if not context.has(USER_REGISTRATIONS):
        raise MissingPrerequisite(USER_REGISTRATIONS, "Failed to extract registrations from response")
    print("\n[User Registrations] ✓ Successfully retrieved registrations")
