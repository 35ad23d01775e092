"""
User steps: list existing users and create the sample users.
"""

from config import SAMPLE_USERS
from core.context import CREATED_USERS, USERS_COUNT, USERS_LIST
from core.errors import MissingPrerequisite


def fetch_users(client, context) -> None:
    """
    Fetch users via POST /v2/users/search and store them for selection.

    Requests a single page of SEARCH_PAGE_SIZE entries; backends with more
    users than that only show the first page. Stores:
      - usersList: list of user dicts from the page "content"
      - usersCount: len(usersList)
    """
    print("\n[Users List] Fetching users...")
    context.unset(USERS_LIST)

    params = {"page": 0, "size": client.config.page_size}

    def store_users(response, ctx):
        page = response.json() or {}
        users = page.get("content") or []
        print(f"\n[Users List] Found {len(users)} user(s)")
        ctx.set(USERS_LIST, users)
        ctx.set(USERS_COUNT, len(users))

    client.post("/v2/users/search", {"criteria": []}, store_users, config={"params": params})

    if not context.has(USERS_LIST):
        raise MissingPrerequisite(USERS_LIST, "Failed to extract users from response")
    print("[Users List] ✓ Successfully retrieved users")


def create_users(client, context) -> None:
    """Create every user in config.SAMPLE_USERS; any failure fails the step."""
    print("\n[Users] Starting users creation...")

    created = []
    for user in SAMPLE_USERS:
        print(f"[Users] Creating user: {user['username']}")

        def store_user(response, ctx, user=user):
            created_user = response.json() or {}
            created.append(created_user)
            if created_user.get("id"):
                ctx.set(f"user_{user['username']}_id", created_user["id"])
            print(f"[Users] ✓ Created user: {user['username']} (ID: {created_user.get('id')})")

        client.post("/users", user, store_user)

    context.set(CREATED_USERS, created)
    print(f"[Users] ✓ Successfully created {len(created)} users")
