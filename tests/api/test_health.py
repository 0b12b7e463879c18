from __future__ import annotations

from fastapi.testclient import TestClient

from dataroute.core.config import Settings
from dataroute.main import create_app
from tests.helpers.dispatcher import FakeDispatcher


def test_app_starts_without_dispatcher() -> None:
    app = create_app(settings=Settings(_env_file=None))
    client = TestClient(app)

    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "raw_endpoint": "not configured"}
    assert client.get("/raw/Service").status_code == 404


def test_app_mounts_raw_endpoint() -> None:
    dispatcher = FakeDispatcher(result={"ok": True})
    settings = Settings(_env_file=None, raw_base_path="/data", expose_hidden_services=True)
    client = TestClient(create_app(dispatcher, settings=settings))

    assert client.get("/health").json()["raw_endpoint"] == "/data/"
    assert client.get("/data/ns/_Hidden").status_code == 200
    assert str(dispatcher.queries[0].qualified_name) == "ns/_Hidden"
