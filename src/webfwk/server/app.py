"""Starlette app factory with lifespan for schema loading."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from starlette.applications import Starlette

from webfwk.server.routes_system import routes as system_routes
from webfwk.server.routes_validation import routes as validation_routes
from webfwk.validation.config import ValidationConfig, load_validation_config
from webfwk.validation.schema import build_validators


def create_app(
    config_path: Path | None = None,
    validation_config: ValidationConfig | None = None,
) -> Starlette:
    """Create a Starlette app serving the configured validation schemas."""

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncGenerator[None, None]:
        from webfwk.config import get_config_path

        config = validation_config
        if config is None:
            config = load_validation_config(config_path or get_config_path())

        app.state.validation_config = config
        app.state.validators = build_validators(config.schemas)

        yield

    return Starlette(
        routes=system_routes + validation_routes,
        lifespan=lifespan,
    )
