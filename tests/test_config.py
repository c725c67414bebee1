import pytest
from pydantic import ValidationError

from metatable.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEFAULT_LAYOUT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_layout == "vertical"
    assert settings.max_body_bytes == 262144


def test_unknown_default_layout_rejected():
    with pytest.raises(ValidationError):
        Settings(default_layout="diagonal", _env_file=None)


def test_layout_from_env(monkeypatch):
    monkeypatch.setenv("DEFAULT_LAYOUT", "horizontal")
    assert Settings(_env_file=None).default_layout == "horizontal"


def test_max_body_bytes_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(max_body_bytes=0, _env_file=None)


def test_parsed_cors():
    settings = Settings(_env_file=None)
    assert settings.parsed_cors("*") == ["*"]
    assert settings.parsed_cors("http://a, http://b,") == ["http://a", "http://b"]
