from __future__ import annotations

import pytest
from pydantic import ValidationError

from dataroute.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("RAW_BASE_PATH", raising=False)
    monkeypatch.delenv("EXPOSE_HIDDEN_SERVICES", raising=False)
    s = Settings(_env_file=None)
    assert s.raw_base_path == "/raw/"
    assert s.expose_hidden_services is False


def test_base_path_gets_trailing_slash():
    assert Settings(_env_file=None, raw_base_path="/data").raw_base_path == "/data/"


def test_base_path_must_be_absolute():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, raw_base_path="data/")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RAW_BASE_PATH", "/services")
    monkeypatch.setenv("EXPOSE_HIDDEN_SERVICES", "true")
    s = Settings(_env_file=None)
    assert s.raw_base_path == "/services/"
    assert s.expose_hidden_services is True
