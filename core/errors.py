"""
Error taxonomy for the seeder.

  RequestFailed        Transport error or non-2xx response. Always propagated.
  MissingPrerequisite  A step found a required context key absent.
  CallbackFault        A completion hook raised. Logged by the HTTP client,
                       never raised to the caller of the request.
  ConfigurationError   Required settings are missing or invalid.
"""

from typing import Any, Optional


class SeederError(Exception):
    """Base class for all seeder errors."""


class RequestFailed(SeederError):
    """An HTTP call failed at the transport level or returned a non-2xx status.

    Attributes:
        method: HTTP verb (upper case).
        path: Request path as passed by the caller.
        status_code: Response status, or None for transport errors.
        body: Decoded JSON body (or truncated text), or None when unavailable.
    """

    def __init__(
        self,
        method: str,
        path: str,
        status_code: Optional[int] = None,
        body: Any = None,
        message: str = "",
    ):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        if not message:
            status = status_code if status_code is not None else "no response"
            message = f"{method} {path} failed ({status})"
        super().__init__(message)


class MissingPrerequisite(SeederError):
    """A step needs a context key that an earlier step should have set."""

    def __init__(self, key: str, message: str = ""):
        self.key = key
        super().__init__(message or f"Required context value '{key}' is not set")


class CallbackFault(SeederError):
    """A completion hook raised while handling a successful response."""

    def __init__(self, method: str, path: str, original: BaseException):
        self.method = method
        self.path = path
        self.original = original
        super().__init__(f"Callback for {method} {path} failed: {original}")


class ConfigurationError(SeederError):
    """Configuration is incomplete or invalid."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))
