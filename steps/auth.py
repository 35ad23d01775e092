"""
Auth step: log in with the admin credentials and store the bearer token.

Backend versions disagree on where /authenticate returns the token, so the
location is configurable (AUTH_TOKEN_LOCATION):

  header   Authorization response header, "Bearer " prefix stripped.
           AUTH_TOKEN_FIELD may name a different header.
  body     JSON body field named by AUTH_TOKEN_FIELD (default "token").

Extractors return None when the token is not where they look; the step then
fails with MissingPrerequisite and the batch halts.
"""

from typing import Optional

from core.context import BEARER_TOKEN, CLIENT_ID, CURRENT_USER, USER_ID

DEFAULT_TOKEN_HEADER = "Authorization"


def _strip_bearer(value: str) -> str:
    if value.lower().startswith("bearer "):
        return value[len("bearer "):].strip()
    return value.strip()


def token_from_header(response, field: str = DEFAULT_TOKEN_HEADER) -> Optional[str]:
    """Token from a response header, or None."""
    # "token" is the body default; it never names a header
    header = field if field and field != "token" else DEFAULT_TOKEN_HEADER
    value = response.headers.get(header)
    if not value:
        return None
    return _strip_bearer(value) or None


def token_from_body(response, field: str = "token") -> Optional[str]:
    """Token from a top-level JSON body field, or None."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    value = data.get(field)
    if not isinstance(value, str) or not value:
        return None
    return _strip_bearer(value) or None


TOKEN_EXTRACTORS = {
    "header": token_from_header,
    "body": token_from_body,
}


def authenticate(client, context) -> None:
    """POST /authenticate and store bearerToken (plus currentUser/userId when returned)."""
    print("\n[Auth] Starting authentication...")

    client_id = context.require(
        CLIENT_ID, "Client ID not found in context. Domain step must run first."
    )
    print(f"[Auth] Using client ID: {client_id}")

    config = client.config
    credentials = config.credentials
    extract_token = TOKEN_EXTRACTORS[config.token_location]

    auth_request = {
        "clientId": client_id,
        "context": credentials.context,
        "password": credentials.password,
        "platform": credentials.platform,
        "username": credentials.username,
    }

    def store_session(response, ctx):
        token = extract_token(response, config.token_field)
        if token:
            ctx.set(BEARER_TOKEN, token)

        try:
            data = response.json()
        except ValueError:
            return
        if not isinstance(data, dict):
            return
        if data.get("user"):
            ctx.set(CURRENT_USER, data["user"])
        if data.get("userId"):
            ctx.set(USER_ID, data["userId"])

    # A token from an earlier login must neither be sent here nor satisfy the check below
    for key in (BEARER_TOKEN, CURRENT_USER, USER_ID):
        context.unset(key)

    client.post("/authenticate", auth_request, store_session)

    context.require(
        BEARER_TOKEN,
        f"Failed to extract bearer token from authentication response "
        f"(looked in {config.token_location})",
    )
    print("[Auth] ✓ Authentication successful")
