"""Uvicorn launcher for the validation API."""

from __future__ import annotations

from webfwk.config import Config, get_config_path, load_config


def run_server(config: Config | None = None) -> None:
    """Start the HTTP API server with uvicorn."""
    import uvicorn

    if config is None:
        config = load_config(get_config_path())

    uvicorn.run(
        "webfwk.server.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
    )
