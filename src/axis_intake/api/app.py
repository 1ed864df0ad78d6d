"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from axis_intake.api.middleware.error_handler import register_error_handlers
from axis_intake.api.routes import applications, health
from axis_intake.assembly import ApplicationAssembler
from axis_intake.core.config import APIConfig, AppSettings
from axis_intake.hooks import setup_logging


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("axis-intake")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    setup_logging(settings.observability)

    app.state.settings = settings
    app.state.assembler = ApplicationAssembler(settings)
    yield


_api_config = APIConfig()

app = FastAPI(
    title=_api_config.title,
    description=_api_config.description,
    version=_get_version(),
    lifespan=lifespan,
)

register_error_handlers(app)
app.include_router(health.router)
app.include_router(applications.router, prefix="/api")
