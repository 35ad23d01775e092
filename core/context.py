"""
Seeder Context — Key/value store shared by every step of a run.

Works like a Postman environment: one step stores a value (a bearer token,
a client ID, a fetched list, a user's selection) and later steps read it.
One context exists per session or batch run; steps receive a reference to it
and never keep it beyond their call. Nothing is persisted.

Well-known keys are defined below so steps and hooks agree on spelling.
KEY_TYPES records the type each well-known key is expected to hold; set()
warns when a value does not match but stores it anyway.
"""

from typing import Any, Dict, Optional

from .errors import MissingPrerequisite

BEARER_TOKEN = "bearerToken"
CLIENT_ID = "clientId"
CURRENT_USER = "currentUser"
USER_ID = "userId"
USERS_LIST = "usersList"
USERS_COUNT = "usersCount"
ACTIVITIES_LIST = "activitiesList"
ACTIVITIES_COUNT = "activitiesCount"
CREATED_ACTIVITIES = "createdActivities"
CREATED_USERS = "createdUsers"
SELECTED_USER_ID = "selectedUserId"
SELECTED_ACTIVITY_ID = "selectedActivityId"
LAST_REGISTRATION = "lastRegistration"
USER_REGISTRATIONS = "userRegistrations"
USER_REGISTRATION_COUNT = "userRegistrationCount"

KEY_TYPES = {
    BEARER_TOKEN: str,
    CLIENT_ID: (str, int),
    USER_ID: (str, int),
    CURRENT_USER: dict,
    USERS_LIST: list,
    USERS_COUNT: int,
    ACTIVITIES_LIST: list,
    ACTIVITIES_COUNT: int,
    CREATED_ACTIVITIES: list,
    CREATED_USERS: list,
    SELECTED_USER_ID: (str, int),
    SELECTED_ACTIVITY_ID: (str, int),
    USER_REGISTRATIONS: list,
    USER_REGISTRATION_COUNT: int,
}

# Strings longer than this are cut in log lines
MAX_LOGGED_STRING = 50


def describe_value(value: Any) -> str:
    """Short, log-friendly rendering of a context value."""
    if isinstance(value, list):
        return f"[list with {len(value)} item(s)]"
    if isinstance(value, dict):
        return f"{{dict with {len(value)} key(s)}}"
    if isinstance(value, str) and len(value) > MAX_LOGGED_STRING:
        return value[:MAX_LOGGED_STRING] + "..."
    return str(value)


class SeederContext:
    """Mutable string-keyed store passed explicitly to every step."""

    def __init__(self):
        self._variables: Dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one, and log it."""
        expected = KEY_TYPES.get(key)
        if expected is not None and value is not None and not isinstance(value, expected):
            print(
                f"  [Context] Warning: {key} expected {_type_names(expected)}, "
                f"got {type(value).__name__}"
            )
        self._variables[key] = value
        print(f"  [Context] Set {key}: {describe_value(value)}")

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._variables.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._variables

    def require(self, key: str, message: str = "") -> Any:
        """Return the value under key, or raise MissingPrerequisite.

        None and the empty string count as missing: a hook that stored a
        blank token has not produced a usable prerequisite.
        """
        value = self._variables.get(key)
        if value is None or value == "":
            raise MissingPrerequisite(key, message)
        return value

    def unset(self, key: str) -> None:
        if key in self._variables:
            del self._variables[key]
            print(f"  [Context] Unset {key}")

    def clear(self) -> None:
        self._variables = {}
        print("  [Context] Cleared all variables")

    def get_all(self) -> Dict[str, Any]:
        """Shallow snapshot; changing it does not touch the context."""
        return dict(self._variables)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._variables)


def _type_names(expected) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__
