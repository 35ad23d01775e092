"""Tests for core.http_client.SeederHttpClient.

The underlying requests.Session.request is mocked so no real HTTP calls are made.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from core.context import BEARER_TOKEN, SeederContext
from core.errors import RequestFailed
from core.http_client import SeederHttpClient, response_body


def _response(status=200, json_body=None, text=None, headers=None):
    resp = requests.Response()
    resp.status_code = status
    if json_body is not None:
        resp._content = json.dumps(json_body).encode()
    elif text is not None:
        resp._content = text.encode()
    else:
        resp._content = b""
    resp.encoding = "utf-8"
    resp.headers.update(headers or {})
    return resp


def _client(response=None, side_effect=None, **kwargs):
    context = SeederContext()
    client = SeederHttpClient("https://api.example.com/api/", context, **kwargs)
    client._session.request = MagicMock(return_value=response, side_effect=side_effect)
    return client, context


def _sent_headers(client):
    return client._session.request.call_args.kwargs["headers"]


# ---------------------------------------------------------------------------
# Token injection
# ---------------------------------------------------------------------------

def test_token_attached_when_present():
    client, context = _client(_response(json_body={}))
    context.set(BEARER_TOKEN, "abc123")
    client.get("/users")
    assert _sent_headers(client)["Authorization"] == "Bearer abc123"


def test_no_authorization_header_without_token():
    client, _ = _client(_response(json_body={}))
    client.get("/users")
    assert "Authorization" not in _sent_headers(client)
    assert "Authorization" not in client._session.headers


def test_caller_authorization_header_dropped_without_token():
    client, _ = _client(_response(json_body={}))
    client.get("/users", config={"headers": {"authorization": "Bearer stale", "X-Trace": "1"}})
    headers = _sent_headers(client)
    assert "authorization" not in {k.lower() for k in headers}
    assert headers["X-Trace"] == "1"


def test_token_removed_from_context_stops_injection():
    client, context = _client(_response(json_body={}))
    context.set(BEARER_TOKEN, "abc123")
    context.unset(BEARER_TOKEN)
    client.get("/users")
    assert "Authorization" not in _sent_headers(client)


# ---------------------------------------------------------------------------
# Request shape
# ---------------------------------------------------------------------------

def test_url_joins_base_and_path():
    client, _ = _client(_response(json_body={}))
    client.get("domain/client")
    args = client._session.request.call_args.args
    assert args == ("GET", "https://api.example.com/api/domain/client")


def test_absolute_url_used_as_is():
    client, _ = _client()
    assert client.url_for("https://other.example.com/x") == "https://other.example.com/x"


def test_post_sends_json_and_config_params():
    client, _ = _client(_response(json_body={}))
    client.post("/v2/users/search", {"criteria": []}, config={"params": {"page": 0, "size": 100}})
    kwargs = client._session.request.call_args.kwargs
    assert kwargs["json"] == {"criteria": []}
    assert kwargs["params"] == {"page": 0, "size": 100}


def test_default_and_override_timeout():
    client, _ = _client(_response(json_body={}), timeout=12)
    client.get("/a")
    assert client._session.request.call_args.kwargs["timeout"] == 12
    client.put("/a", {}, config={"timeout": 3})
    assert client._session.request.call_args.kwargs["timeout"] == 3


@pytest.mark.parametrize("verb", ["post", "put", "patch"])
def test_write_verbs_send_empty_body_by_default(verb):
    client, _ = _client(_response(json_body={}))
    getattr(client, verb)("/thing")
    assert client._session.request.call_args.kwargs["json"] == {}


def test_delete_has_no_body():
    client, _ = _client(_response(status=204))
    client.delete("/thing/1")
    assert client._session.request.call_args.args[0] == "DELETE"
    assert "json" not in client._session.request.call_args.kwargs


def test_tls_verification_flag():
    with patch("core.http_client.urllib3.disable_warnings") as disable:
        client = SeederHttpClient("https://x", SeederContext(), verify_ssl=False)
    assert client._session.verify is False
    disable.assert_called_once()


# ---------------------------------------------------------------------------
# Completion hooks
# ---------------------------------------------------------------------------

def test_callback_receives_response_and_context():
    resp = _response(json_body={"id": "client-1"})
    client, context = _client(resp)
    callback = MagicMock()
    result = client.get("/domain/client", callback)
    callback.assert_called_once_with(resp, context)
    assert result is resp


def test_callback_with_config_on_post():
    client, context = _client(_response(json_body={"content": []}))
    client.post(
        "/search", {"criteria": []},
        lambda r, ctx: ctx.set("found", r.json()["content"]),
        config={"params": {"size": 5}},
    )
    assert context.get("found") == []


def test_callback_fault_does_not_fail_request(capsys):
    resp = _response(json_body={"ok": True})
    client, context = _client(resp)

    def broken(response, ctx):
        raise KeyError("token")

    result = client.post("/authenticate", {}, broken)
    assert result is resp
    assert client.last_callback_fault is not None
    assert isinstance(client.last_callback_fault.original, KeyError)
    assert "Callback error" in capsys.readouterr().out


def test_callback_not_called_on_failure():
    client, _ = _client(_response(status=500, json_body={"error": "boom"}))
    callback = MagicMock()
    with pytest.raises(RequestFailed):
        client.get("/x", callback)
    callback.assert_not_called()


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

def test_non_2xx_raises_request_failed_with_body(capsys):
    client, _ = _client(_response(status=401, json_body={"message": "bad credentials"}))
    with pytest.raises(RequestFailed) as exc:
        client.post("/authenticate", {})
    assert exc.value.status_code == 401
    assert exc.value.body == {"message": "bad credentials"}
    assert exc.value.method == "POST"
    assert exc.value.path == "/authenticate"
    out = capsys.readouterr().out
    assert "[HTTP Error] POST /authenticate - 401" in out


def test_non_json_error_body_is_truncated_text():
    client, _ = _client(_response(status=502, text="<html>" + "x" * 1000))
    with pytest.raises(RequestFailed) as exc:
        client.get("/x")
    assert exc.value.body.startswith("<html>")
    assert len(exc.value.body) == 500


@pytest.mark.parametrize("status", [302, 304])
def test_unfollowed_redirect_is_a_failure(status):
    client, _ = _client(_response(status=status, headers={"Location": "/login"}))
    callback = MagicMock()
    with pytest.raises(RequestFailed) as exc:
        client.get("/domain/client", callback)
    assert exc.value.status_code == status
    callback.assert_not_called()


def test_transport_error_raises_request_failed_without_status():
    client, _ = _client(side_effect=requests.ConnectionError("refused"))
    with pytest.raises(RequestFailed) as exc:
        client.get("/x")
    assert exc.value.status_code is None
    assert exc.value.body is None
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_verbose_logs_success(capsys):
    client, _ = _client(_response(json_body={}), verbose=True)
    client.get("/domain/client")
    assert "[HTTP] GET /domain/client - 200" in capsys.readouterr().out


def test_response_body_empty():
    assert response_body(_response(status=500)) is None
