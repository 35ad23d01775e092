"""
Activity steps: list existing activities and create the sample activities.
"""

import re

from config import SAMPLE_ACTIVITIES
from config.seed_data import ACTIVITY_DEFAULTS
from core.context import ACTIVITIES_COUNT, ACTIVITIES_LIST, CREATED_ACTIVITIES
from core.errors import MissingPrerequisite


def activity_key(title: str) -> str:
    """Context key for a created activity's ID, e.g. activity_Git_and_Version_Control_id."""
    return "activity_" + re.sub(r"\s+", "_", title) + "_id"


def fetch_activities(client, context) -> None:
    """
    Fetch activities via POST /v2/activities/search, sorted by title.

    The search endpoint wraps each activity in an ActivityResponse; only the
    nested "activity" object is kept. Stores activitiesList and
    activitiesCount. Single page only, like fetch_users.
    """
    print("\n[Activities List] Fetching activities...")
    context.unset(ACTIVITIES_LIST)

    params = {"page": 0, "size": client.config.page_size, "sortBy": "title"}

    def store_activities(response, ctx):
        page = response.json() or {}
        activities = [
            item["activity"] for item in page.get("content") or []
            if isinstance(item, dict) and item.get("activity")
        ]
        noun = "activity" if len(activities) == 1 else "activities"
        print(f"\n[Activities List] Found {len(activities)} {noun}")
        ctx.set(ACTIVITIES_LIST, activities)
        ctx.set(ACTIVITIES_COUNT, len(activities))

    client.post(
        "/v2/activities/search", {"criteria": []}, store_activities, config={"params": params}
    )

    if not context.has(ACTIVITIES_LIST):
        raise MissingPrerequisite(ACTIVITIES_LIST, "Failed to extract activities from response")
    print("[Activities List] ✓ Successfully retrieved activities")


def create_activities(client, context) -> None:
    """Create every activity in config.SAMPLE_ACTIVITIES; any failure fails the step."""
    print("\n[Activities] Starting activity creation...")

    created = []
    for activity in SAMPLE_ACTIVITIES:
        print(f"[Activities] Creating activity: {activity['title']}")

        activity_request = {
            "activity": {
                "title": activity["title"],
                "description": activity["description"],
                "supplier": activity["supplier"],
                **ACTIVITY_DEFAULTS,
            }
        }

        def store_activity(response, ctx, title=activity["title"]):
            created_activity = response.json() or {}
            created.append(created_activity)
            if created_activity.get("id"):
                ctx.set(activity_key(title), created_activity["id"])
            print(f"[Activities] ✓ Created activity: {title} (ID: {created_activity.get('id')})")

        client.post("/v2/activities", activity_request, store_activity)

    context.set(CREATED_ACTIVITIES, created)
    print(f"[Activities] ✓ Successfully created {len(created)} activities")
