# tests/conftest.py
from __future__ import annotations

import pytest

from tests.helpers.dispatcher import FakeDispatcher


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    return FakeDispatcher(result={"ok": True})
