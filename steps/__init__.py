"""
Seeder steps package.

Each step is a plain function (client, context) -> None that performs one
logical task against the backend and records its outputs in the context.

Steps:
  Domain              fetch_client_id             -> clientId
  Auth                authenticate                -> bearerToken
  Users List          fetch_users                 -> usersList, usersCount
  Activities List     fetch_activities            -> activitiesList, activitiesCount
  Create Activities   create_activities           -> createdActivities
  Create Users        create_users                -> createdUsers
  Register User       register_user_for_activity  -> lastRegistration
  User Registrations  fetch_user_registrations    -> userRegistrations
"""

from core.orchestrator import Step

from steps.domain import fetch_client_id
from steps.auth import authenticate, token_from_body, token_from_header, TOKEN_EXTRACTORS
from steps.users import fetch_users, create_users
from steps.activities import fetch_activities, create_activities, activity_key
from steps.registrations import register_user_for_activity, fetch_user_registrations

DOMAIN_STEP = Step("Domain", fetch_client_id)
AUTH_STEP = Step("Auth", authenticate)
USERS_LIST_STEP = Step("Users List", fetch_users)
ACTIVITIES_LIST_STEP = Step("Activities List", fetch_activities)
CREATE_ACTIVITIES_STEP = Step("Create Activities", create_activities)
CREATE_USERS_STEP = Step("Create Users", create_users)
REGISTER_USER_STEP = Step("Register User", register_user_for_activity)
USER_REGISTRATIONS_STEP = Step("User Registrations", fetch_user_registrations)

# The domain step must run first: authenticate needs the client ID
AUTHENTICATION_STEPS = [DOMAIN_STEP, AUTH_STEP]

# Steps run.py can append after authentication (--include)
OPTIONAL_STEPS = {
    "activities": CREATE_ACTIVITIES_STEP,
    "users": CREATE_USERS_STEP,
}

__all__ = [
    "fetch_client_id",
    "authenticate",
    "token_from_body",
    "token_from_header",
    "TOKEN_EXTRACTORS",
    "fetch_users",
    "create_users",
    "fetch_activities",
    "create_activities",
    "activity_key",
    "register_user_for_activity",
    "fetch_user_registrations",
    "DOMAIN_STEP",
    "AUTH_STEP",
    "USERS_LIST_STEP",
    "ACTIVITIES_LIST_STEP",
    "CREATE_ACTIVITIES_STEP",
    "CREATE_USERS_STEP",
    "REGISTER_USER_STEP",
    "USER_REGISTRATIONS_STEP",
    "AUTHENTICATION_STEPS",
    "OPTIONAL_STEPS",
]
