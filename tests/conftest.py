from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.filerelay.config import AppConfig
from src.filerelay.main import create_app
from src.filerelay.relay.relay_service import RelayService
from src.filerelay.storage.expiration import ExpirationManager
from src.filerelay.storage.object_store import ObjectStore


@dataclass
class FakeClock:
    """Manually advanced UTC clock."""

    now: datetime = field(
        default_factory=lambda: datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> ObjectStore:
    return ObjectStore()


@pytest.fixture()
def expiration(store: ObjectStore, clock: FakeClock) -> ExpirationManager:
    return ExpirationManager(store, clock=clock)


@pytest.fixture()
def service(
    store: ObjectStore, expiration: ExpirationManager, clock: FakeClock
) -> RelayService:
    return RelayService(store=store, expiration=expiration, clock=clock)


@pytest.fixture()
def app(service: RelayService) -> FastAPI:
    application = create_app(AppConfig(port=3000))
    application.state.disable_expiration_task = True
    application.state.object_store = service.store
    application.state.expiration_manager = service.expiration
    application.state.relay_service = service
    return application


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
