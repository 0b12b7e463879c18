# dataroute/main.py
"""
Routing application factory.

Creates a FastAPI application exposing the raw data endpoint. The
dispatcher that delivers resolved requests to data services is supplied
by the embedding runtime.
"""
from __future__ import annotations

import logging
import sys

from fastapi import FastAPI

from dataroute.api.discovery import router as discovery_router
from dataroute.api.raw import build_raw_router
from dataroute.contracts.data import DataDispatcher
from dataroute.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


def create_app(
    dispatcher: DataDispatcher | None = None,
    *,
    settings: Settings | None = None,
) -> FastAPI:
    """Build and wire the routing FastAPI application."""
    settings = settings or default_settings
    _configure_logging(settings.log_level)
    logger.info("Creating routing application (env=%s)", settings.app_env)

    app = FastAPI(
        title="Data Route",
        version="0.1.0",
        description="Raw request routing to data services",
    )
    app.state.raw_base_path = None

    app.include_router(discovery_router)

    if dispatcher is None:
        logger.warning("No data dispatcher supplied, raw endpoint not mounted")
        return app

    app.include_router(
        build_raw_router(
            dispatcher,
            mount_prefix=settings.raw_base_path,
            expose_hidden=settings.expose_hidden_services,
        )
    )
    app.state.raw_base_path = settings.raw_base_path
    logger.info(
        "Mounted raw endpoint at %s (hidden services %s)",
        settings.raw_base_path,
        "exposed" if settings.expose_hidden_services else "blocked",
    )

    return app
