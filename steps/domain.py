"""
Domain step: fetch the client ID the backend expects in the authenticate call.
"""

from core.context import CLIENT_ID


def fetch_client_id(client, context) -> None:
    """GET /domain/client and store the returned id under clientId."""
    print("\n[Domain] Fetching client ID...")

    def store_client_id(response, ctx):
        data = response.json() or {}
        if data.get("id"):
            ctx.set(CLIENT_ID, data["id"])

    context.unset(CLIENT_ID)
    client.get("/domain/client", store_client_id)

    context.require(CLIENT_ID, "Failed to extract client ID from /domain/client response")
    print("[Domain] ✓ Client ID retrieved successfully")
