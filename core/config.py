"""
Seeder configuration — Loaded once at startup from .env / environment.

The core treats the result as an opaque settings object. Required values are
the admin credentials; everything else falls back to config/settings.py.

Typical usage:
    config = load_config("./.env")
    config.ensure_valid()  # raises ConfigurationError
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from config import DEFAULT_SETTINGS, TOKEN_LOCATIONS

from .errors import ConfigurationError


@dataclass
class Credentials:
    """Fields sent to the /authenticate endpoint (besides the client ID)."""

    username: str = ""
    password: str = ""
    context: str = DEFAULT_SETTINGS["AUTH_CONTEXT"]
    platform: str = DEFAULT_SETTINGS["AUTH_PLATFORM"]


@dataclass
class SeederConfig:
    """Runtime settings for one seeder process.

    Attributes:
        api_base_url: Base URL every request path is joined to.
        credentials: Admin credentials for the Auth step.
        timeout: Per-request timeout in seconds, applied to every call.
        verbose: Log every HTTP call and dump the context after a batch.
        reject_unauthorized: Verify TLS certificates.
        token_location: "header" or "body"; where /authenticate puts the token.
        token_field: Body field holding the token, or a custom header name.
        page_size: Size of the single page requested by list steps.
    """

    api_base_url: str = DEFAULT_SETTINGS["API_BASE_URL"]
    credentials: Credentials = field(default_factory=Credentials)
    timeout: float = DEFAULT_SETTINGS["REQUEST_TIMEOUT"] / 1000
    verbose: bool = DEFAULT_SETTINGS["VERBOSE"]
    reject_unauthorized: bool = DEFAULT_SETTINGS["REJECT_UNAUTHORIZED"]
    token_location: str = DEFAULT_SETTINGS["AUTH_TOKEN_LOCATION"]
    token_field: str = DEFAULT_SETTINGS["AUTH_TOKEN_FIELD"]
    page_size: int = DEFAULT_SETTINGS["SEARCH_PAGE_SIZE"]

    def validate(self) -> List[str]:
        """Return a list of configuration errors (empty when valid)."""
        errors = []
        if not self.api_base_url:
            errors.append("API_BASE_URL is required")
        if not self.credentials.username:
            errors.append("ADMIN_USERNAME is required")
        if not self.credentials.password:
            errors.append("ADMIN_PASSWORD is required")
        if self.token_location not in TOKEN_LOCATIONS:
            errors.append(
                f"AUTH_TOKEN_LOCATION must be one of {', '.join(TOKEN_LOCATIONS)} "
                f"(got '{self.token_location}')"
            )
        if self.timeout <= 0:
            errors.append("REQUEST_TIMEOUT must be a positive number of milliseconds")
        if self.page_size <= 0:
            errors.append("SEARCH_PAGE_SIZE must be a positive integer")
        return errors

    def ensure_valid(self) -> None:
        """Raise ConfigurationError listing every problem found by validate()."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(errors)


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).strip().lower() == "true"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"Warning: {name}={raw!r} is not an integer, using {default}")
        return default


def load_config(env_file: str = "./.env") -> SeederConfig:
    """Build a SeederConfig from a .env file and the process environment.

    Args:
        env_file: Path to a .env file. If the file exists, it is loaded via
                  python-dotenv. Otherwise, falls back to system environment.

    Returns:
        The populated SeederConfig. Call ensure_valid() before using it.
    """
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path)
        print(f"Loaded configuration from: {env_file}")
    else:
        print(f"Warning: {env_file} not found, using defaults/environment")

    credentials = Credentials(
        username=os.getenv("ADMIN_USERNAME", ""),
        password=os.getenv("ADMIN_PASSWORD", ""),
        context=os.getenv("AUTH_CONTEXT", DEFAULT_SETTINGS["AUTH_CONTEXT"]),
        platform=os.getenv("AUTH_PLATFORM", DEFAULT_SETTINGS["AUTH_PLATFORM"]),
    )

    # REJECT_UNAUTHORIZED is on unless explicitly "false"
    reject_unauthorized = os.getenv("REJECT_UNAUTHORIZED", "").strip().lower() != "false"

    return SeederConfig(
        api_base_url=os.getenv("API_BASE_URL", DEFAULT_SETTINGS["API_BASE_URL"]).rstrip("/"),
        credentials=credentials,
        timeout=_env_int("REQUEST_TIMEOUT", DEFAULT_SETTINGS["REQUEST_TIMEOUT"]) / 1000,
        verbose=_env_bool("VERBOSE", DEFAULT_SETTINGS["VERBOSE"]),
        reject_unauthorized=reject_unauthorized,
        token_location=os.getenv(
            "AUTH_TOKEN_LOCATION", DEFAULT_SETTINGS["AUTH_TOKEN_LOCATION"]
        ).strip().lower(),
        token_field=os.getenv("AUTH_TOKEN_FIELD", DEFAULT_SETTINGS["AUTH_TOKEN_FIELD"]),
        page_size=_env_int("SEARCH_PAGE_SIZE", DEFAULT_SETTINGS["SEARCH_PAGE_SIZE"]),
    )
