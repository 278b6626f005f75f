"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from foundation_foods.api.auth import RequireBearerToken
from foundation_foods.api.mcp_server import create_mcp_server
from foundation_foods.app_logging import configure_logging
from foundation_foods.containers import AppContainer
from foundation_foods.domain.errors import CorpusNotReadyError

MCP_PATH = "/mcp"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app serving MCP at ``/mcp`` and an open ``/health``."""
    configure_logging(container.settings.resolved_log_level)
    logger = logging.getLogger(__name__)

    # Stateless: every request gets a fresh transport, no session ids.
    session_manager = StreamableHTTPSessionManager(
        app=create_mcp_server(container),
        json_response=True,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        async with session_manager.run():
            logger.info("MCP endpoint ready at %s", MCP_PATH)
            yield

    app = FastAPI(
        title="FoundationFoods MCP Server", version="1.0.0", lifespan=lifespan
    )
    app.state.container = container

    @app.get("/health")
    async def health(request: Request) -> JSONResponse:
        """Health check endpoint, no auth required."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.engine.health_check()
        except CorpusNotReadyError as exc:
            logger.warning("Health check failed: %s", exc)
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "detail": str(exc)},
            )
        return JSONResponse(content={"status": "healthy"})

    guarded_mcp = RequireBearerToken(
        session_manager.handle_request, container.settings.auth_token
    )
    app.add_route(MCP_PATH, guarded_mcp, include_in_schema=False)

    return app
