"""
Settings — Default configuration values for the database seeder.

This module provides the DEFAULT_SETTINGS dict that core.config uses as
fallback values when environment variables are not set. The actual
configuration is loaded from .env at runtime; these defaults ensure the
seeder works out of the box against a local backend.

Configuration precedence (highest to lowest):
  1. CLI flags (--verbose, --env)
  2. Environment variables (from .env file)
  3. DEFAULT_SETTINGS (this file)

Settings reference:
  API_BASE_URL          Base URL every request path is joined to
  AUTH_CONTEXT          "context" field sent to /authenticate
  AUTH_PLATFORM         "platform" field sent to /authenticate
  REQUEST_TIMEOUT       Per-request timeout in milliseconds
  VERBOSE               Print every HTTP call and dump the context at the end
  REJECT_UNAUTHORIZED   Verify TLS certificates (set to false for self-signed dev certs)
  AUTH_TOKEN_LOCATION   Where /authenticate returns the bearer token: header or body
  AUTH_TOKEN_FIELD      Body field (or custom header) holding the token
  SEARCH_PAGE_SIZE      Page size requested by the list steps (single page only)
"""

DEFAULT_SETTINGS = {
    "API_BASE_URL": "https://localhost:3000/api",
    "AUTH_CONTEXT": "admin",
    "AUTH_PLATFORM": "web",
    "REQUEST_TIMEOUT": 30000,
    "VERBOSE": False,
    "REJECT_UNAUTHORIZED": True,
    "AUTH_TOKEN_LOCATION": "header",
    "AUTH_TOKEN_FIELD": "token",
    "SEARCH_PAGE_SIZE": 100,
}

TOKEN_LOCATIONS = ("header", "body")
