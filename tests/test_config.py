"""Tests for core.config.load_config(), validate() and ensure_valid()."""

import os
from unittest.mock import patch

import pytest

from core.config import Credentials, SeederConfig, load_config
from core.errors import ConfigurationError


_BASE_ENV = {
    "API_BASE_URL": "https://backend.example.com/api/",
    "ADMIN_USERNAME": "admin",
    "ADMIN_PASSWORD": "secret",
}


def _load(env_overrides=None, env_file="/nonexistent/.env"):
    env = dict(_BASE_ENV)
    if env_overrides:
        env.update(env_overrides)
    with patch.dict(os.environ, env, clear=True):
        return load_config(env_file=env_file)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def test_defaults():
    config = _load()
    assert config.api_base_url == "https://backend.example.com/api"
    assert config.credentials == Credentials("admin", "secret", "admin", "web")
    assert config.timeout == 30
    assert config.verbose is False
    assert config.reject_unauthorized is True
    assert config.token_location == "header"
    assert config.page_size == 100


def test_overrides():
    config = _load({
        "AUTH_CONTEXT": "learner",
        "AUTH_PLATFORM": "mobile",
        "REQUEST_TIMEOUT": "5000",
        "VERBOSE": "true",
        "REJECT_UNAUTHORIZED": "false",
        "AUTH_TOKEN_LOCATION": "BODY",
        "AUTH_TOKEN_FIELD": "accessToken",
        "SEARCH_PAGE_SIZE": "250",
    })
    assert config.credentials.context == "learner"
    assert config.credentials.platform == "mobile"
    assert config.timeout == 5
    assert config.verbose is True
    assert config.reject_unauthorized is False
    assert config.token_location == "body"
    assert config.token_field == "accessToken"
    assert config.page_size == 250


@pytest.mark.parametrize("value", ["true", "0", "no", ""])
def test_reject_unauthorized_only_disabled_by_false(value):
    assert _load({"REJECT_UNAUTHORIZED": value}).reject_unauthorized is True


def test_invalid_integer_falls_back(capsys):
    config = _load({"SEARCH_PAGE_SIZE": "lots"})
    assert config.page_size == 100
    assert "SEARCH_PAGE_SIZE" in capsys.readouterr().out


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ADMIN_USERNAME=from-file\nADMIN_PASSWORD=file-secret\n")
    with patch.dict(os.environ, {}, clear=True):
        config = load_config(env_file=str(env_file))
    assert config.credentials.username == "from-file"
    assert config.credentials.password == "file-secret"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_validate_valid():
    assert _load().validate() == []


def test_validate_missing_credentials():
    errors = _load({"ADMIN_USERNAME": "", "ADMIN_PASSWORD": ""}).validate()
    assert "ADMIN_USERNAME is required" in errors
    assert "ADMIN_PASSWORD is required" in errors


def test_validate_unknown_token_location():
    errors = _load({"AUTH_TOKEN_LOCATION": "cookie"}).validate()
    assert any("AUTH_TOKEN_LOCATION" in e for e in errors)


def test_validate_non_positive_numbers():
    config = SeederConfig(credentials=Credentials("a", "b"), timeout=0, page_size=0)
    errors = config.validate()
    assert len(errors) == 2


def test_ensure_valid_passes_silently():
    _load().ensure_valid()


def test_ensure_valid_raises_with_every_error():
    config = _load({"ADMIN_PASSWORD": "", "AUTH_TOKEN_LOCATION": "cookie"})
    with pytest.raises(ConfigurationError) as exc:
        config.ensure_valid()
    assert exc.value.errors == config.validate()
    assert "ADMIN_PASSWORD is required" in exc.value.errors
    assert "ADMIN_PASSWORD is required" in str(exc.value)
