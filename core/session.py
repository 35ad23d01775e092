"""
CLI Session — Keeps the context and HTTP client alive between menu actions.
"""

from .context import BEARER_TOKEN, CLIENT_ID, SeederContext
from .http_client import SeederHttpClient


class CliSession:
    """One interactive session: one context, one client, one config.

    A supplied client brings its own context; the session adopts it so that
    steps and status reads see the same store.
    """

    def __init__(self, config, client: SeederHttpClient = None):
        self.config = config
        if client is None:
            self.context = SeederContext()
            self.client = SeederHttpClient.from_config(self.context, config)
        else:
            self.client = client
            self.context = client.context

    def is_authenticated(self) -> bool:
        return self.context.has(BEARER_TOKEN) and self.context.has(CLIENT_ID)

    def display_status(self):
        print("\n" + "─" * 60)
        print("Session Status:")
        print(f"  Authenticated: {'✓ Yes' if self.is_authenticated() else '✗ No'}")

        if self.is_authenticated():
            print(f"  Client ID: {self.context.get(CLIENT_ID)}")
            token = self.context.get(BEARER_TOKEN)
            print(f"  Bearer Token: {token[:20] + '...' if token else 'N/A'}")

        print(f"  Context keys: {len(self.context)}")
        print("─" * 60 + "\n")

    def clear(self):
        self.context.clear()
        print("Session context cleared.")
