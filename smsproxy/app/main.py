"""
smsproxy readiness app.

FastAPI application exposing the plugin's health and declared
capabilities to the host's readiness checks.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from smsproxy.transport.protocol import MessageTransportPlugin

logger = logging.getLogger(__name__)


def create_app(plugin: MessageTransportPlugin) -> FastAPI:
    """
    Create the readiness application for a plugin.

    Args:
        plugin: Transport plugin to report on

    Returns:
        FastAPI app with /ready and /capabilities
    """
    app = FastAPI(
        title="smsproxy",
        description="SMS gateway transport proxy - readiness and capabilities",
        version="0.1.0",
    )

    @app.get("/ready", tags=["health"])
    async def ready() -> JSONResponse:
        """200 when the transport is healthy, 503 otherwise."""
        result = await plugin.health_check()
        if not result.is_healthy:
            logger.warning(f"Transport not ready: {result.error}")
        return JSONResponse(
            status_code=200 if result.is_healthy else 503,
            content=result.to_dict(),
        )

    @app.get("/capabilities", tags=["transport"])
    async def capabilities() -> dict[str, Any]:
        """Declared throughput (0 = unbounded) and retry budget (null = unbounded)."""
        return {
            "messages_per_second": plugin.get_messages_per_second(),
            "try_send_count": plugin.get_try_send_count(),
        }

    return app


if __name__ == "__main__":
    import uvicorn

    from smsproxy.config import load_settings
    from smsproxy.plugin import create_plugin
    from smsproxy.transport import DigitsPhoneNumberUtilities

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = create_app(create_plugin(load_settings(), DigitsPhoneNumberUtilities()))
    uvicorn.run(app, host="0.0.0.0", port=8000)
