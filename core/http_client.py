"""
Seeder HTTP Client — Thin wrapper around requests with token injection and
completion hooks.

Every call goes through one requests.Session configured once at startup
(base URL, timeout, TLS verification). Before each request the client looks
up the bearer token in the shared SeederContext and, when present, attaches
it as an Authorization header. Without a token no Authorization header is
sent at all.

Completion hooks:
    A step may pass callback(response, context) to any verb. The hook runs
    only after a 2xx response and is where the step pulls fields (token,
    IDs, list payloads) out of the response into the context:

        client.get("/domain/client", lambda r, ctx: ctx.set("clientId", r.json()["id"]))

    If the hook raises, the error is logged as a CallbackFault and the
    response is still returned; the step is expected to check the context
    afterwards and raise MissingPrerequisite when the hook did not deliver.

Failures:
    Transport errors and non-2xx statuses are logged and raised as
    RequestFailed, carrying the status code and body when available.

Call shapes:
    get(path, callback)                      delete(path, callback)
    post(path, data, callback)               post(path, data, callback, config={...})
    put / patch                              same as post

    config is a dict of per-call requests options (params, headers, timeout).
"""

from typing import Any, Callable, Dict, Optional

import requests
import urllib3

from .context import BEARER_TOKEN, SeederContext
from .errors import CallbackFault, RequestFailed

Callback = Callable[[requests.Response, SeederContext], None]

# Longest text body kept on a RequestFailed when the response is not JSON
MAX_ERROR_TEXT = 500


def response_body(response: requests.Response) -> Any:
    """Decoded JSON body, or the start of the text body, or None."""
    try:
        return response.json()
    except ValueError:
        text = response.text or ""
        return text[:MAX_ERROR_TEXT] if text else None


class SeederHttpClient:
    """HTTP client shared by all steps of a session.

    Attributes:
        base_url: API base URL (trailing slash stripped).
        context: The session's SeederContext, read for the bearer token and
            handed to completion hooks.
        config: The SeederConfig the client was built from (steps read
            credentials and paging settings from it).
        timeout: Seconds applied to every request unless a call overrides it.
        verbose: Log every successful call.
        last_callback_fault: The most recent CallbackFault, or None.
    """

    def __init__(
        self,
        base_url: str,
        context: SeederContext,
        config=None,
        timeout: float = 30.0,
        verbose: bool = False,
        verify_ssl: bool = True,
        token_key: str = BEARER_TOKEN,
    ):
        self.base_url = base_url.rstrip("/")
        self.context = context
        self.config = config
        self.timeout = timeout
        self.verbose = verbose
        self.token_key = token_key
        self.last_callback_fault: Optional[CallbackFault] = None

        self._session = requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        self._session.verify = verify_ssl
        if not verify_ssl:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    @classmethod
    def from_config(cls, context: SeederContext, config) -> "SeederHttpClient":
        return cls(
            config.api_base_url,
            context,
            config=config,
            timeout=config.timeout,
            verbose=config.verbose,
            verify_ssl=config.reject_unauthorized,
        )

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def get(self, path: str, callback: Optional[Callback] = None, *,
            config: Optional[Dict] = None) -> requests.Response:
        return self._request("GET", path, callback=callback, config=config)

    def delete(self, path: str, callback: Optional[Callback] = None, *,
               config: Optional[Dict] = None) -> requests.Response:
        return self._request("DELETE", path, callback=callback, config=config)

    def post(self, path: str, data: Any = None, callback: Optional[Callback] = None, *,
             config: Optional[Dict] = None) -> requests.Response:
        return self._request("POST", path, data=data, callback=callback, config=config)

    def put(self, path: str, data: Any = None, callback: Optional[Callback] = None, *,
            config: Optional[Dict] = None) -> requests.Response:
        return self._request("PUT", path, data=data, callback=callback, config=config)

    def patch(self, path: str, data: Any = None, callback: Optional[Callback] = None, *,
              config: Optional[Dict] = None) -> requests.Response:
        return self._request("PATCH", path, data=data, callback=callback, config=config)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _auth_headers(self, extra: Optional[Dict] = None) -> Dict[str, str]:
        headers = {
            k: v for k, v in (extra or {}).items() if k.lower() != "authorization"
        }
        token = self.context.get(self.token_key)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        data: Any = None,
        callback: Optional[Callback] = None,
        config: Optional[Dict] = None,
    ) -> requests.Response:
        options = dict(config or {})
        headers = self._auth_headers(options.pop("headers", None))
        timeout = options.pop("timeout", self.timeout)

        if method in ("POST", "PUT", "PATCH"):
            options["json"] = data if data is not None else {}

        try:
            response = self._session.request(
                method, self.url_for(path), headers=headers, timeout=timeout, **options
            )
        except requests.RequestException as e:
            print(f"  [HTTP Error] {method} {path} - {e}")
            raise RequestFailed(method, path, message=f"{method} {path} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            body = response_body(response)
            print(f"  [HTTP Error] {method} {path} - {response.status_code}")
            if body is not None:
                print(f"  [HTTP Error] Response: {body}")
            raise RequestFailed(method, path, response.status_code, body)

        if self.verbose:
            print(f"  [HTTP] {method} {path} - {response.status_code}")

        self._run_callback(method, path, response, callback)
        return response

    def _run_callback(self, method: str, path: str, response: requests.Response,
                      callback: Optional[Callback]) -> None:
        if callback is None:
            return
        try:
            callback(response, self.context)
        except Exception as e:
            fault = CallbackFault(method, path, e)
            self.last_callback_fault = fault
            print(f"  [HTTP] Callback error: {fault}")
