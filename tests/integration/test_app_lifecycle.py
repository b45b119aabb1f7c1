"""End-to-end checks of the assembled app and its background expiration."""

from __future__ import annotations

import time

import pytest
from fastapi.testclient import TestClient

from src.filerelay.config import AppConfig
from src.filerelay.main import create_app
from src.filerelay.relay.relay_service import RelayService
from src.filerelay.storage.expiration import ExpirationManager

pytestmark = pytest.mark.integration


def test_create_app_registers_relay_routes() -> None:
    app = create_app(AppConfig())

    assert app.url_path_for("upload_file") == "/upload"
    assert app.url_path_for("download_file", code="ABC123") == "/api/download/ABC123"
    assert app.url_path_for("preview_file", code="ABC123") == "/api/preview/ABC123"
    assert app.url_path_for("describe_file", code="ABC123") == "/api/files/ABC123"
    assert app.url_path_for("health") == "/health"
    assert isinstance(app.state.relay_service, RelayService)


def test_lifespan_starts_and_stops_expiration_task() -> None:
    app = create_app(AppConfig(expiration_interval_seconds=0.5))

    with TestClient(app) as client:
        task = app.state.expiration_task
        assert task is not None and not task.done()
        assert client.get("/health").json()["status"] == "ok"
        client.post("/upload", files={"file": ("a.txt", b"hello", "text/plain")})
        assert len(app.state.object_store) == 1

    assert app.state.expiration_task is None
    assert task.done()
    assert len(app.state.object_store) == 0


def test_background_task_evicts_unrequested_objects(clock) -> None:
    app = create_app(AppConfig(expiration_interval_seconds=0.5))
    store = app.state.object_store
    manager = ExpirationManager(store, clock=clock)
    app.state.expiration_manager = manager
    app.state.relay_service = RelayService(store=store, expiration=manager, clock=clock)

    with TestClient(app) as client:
        code = client.post(
            "/upload", files={"file": ("a.txt", b"hello", "text/plain")}
        ).json()["shortCode"]
        assert code in store

        clock.advance(hours=3, seconds=1)
        deadline = time.monotonic() + 5
        while code in store and time.monotonic() < deadline:
            time.sleep(0.05)

        assert code not in store
        assert client.get(f"/api/download/{code}").status_code == 404


def test_upload_download_roundtrip_through_real_app() -> None:
    app = create_app(AppConfig())

    with TestClient(app) as client:
        body = client.post(
            "/upload", files={"file": ("clip.mp4", b"\x00\x00\x00\x18ftyp", "video/mp4")}
        ).json()
        response = client.get(body["downloadUrl"])

    assert body["previewable"] is True
    assert response.content == b"\x00\x00\x00\x18ftyp"
    assert response.headers["content-type"] == "video/mp4"
    assert response.headers["content-disposition"] == 'attachment; filename="clip.mp4"'
