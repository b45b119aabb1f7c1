"""Dependency wiring helpers."""

from __future__ import annotations

from fastapi import FastAPI

from .api.errors import register_error_handlers
from .config import AppConfig
from .relay.relay_api import router as relay_router
from .relay.relay_service import RelayService
from .storage.code_generator import CodeGenerator
from .storage.expiration import ExpirationManager
from .storage.object_store import ObjectStore


def include_routers(app: FastAPI, config: AppConfig) -> None:
    """Build the relay core, attach it to app state and mount routes."""
    store = ObjectStore()
    expiration_manager = ExpirationManager(store)
    relay_service = RelayService(
        store=store,
        expiration=expiration_manager,
        code_generator=CodeGenerator(),
    )

    app.state.config = config
    app.state.object_store = store
    app.state.expiration_manager = expiration_manager
    app.state.relay_service = relay_service
    app.state.expiration_task = None
    app.state.expiration_shutdown_event = None

    register_error_handlers(app)
    app.include_router(relay_router)
