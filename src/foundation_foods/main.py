"""Command line entry point for the Foundation Foods server."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

import uvicorn

from foundation_foods.api.app import create_app
from foundation_foods.api.mcp_server import serve_stdio
from foundation_foods.app_logging import configure_logging
from foundation_foods.config import Settings
from foundation_foods.containers import AppContainer, build_container
from foundation_foods.domain.errors import CorpusLoadError

_logger = logging.getLogger(__name__)

_DESCRIPTION = """\
FoundationFoods MCP Server provides access to the USDA Foundation Foods dataset.

HTTP mode (default) serves MCP over streamable HTTP at /mcp with bearer token
authentication (except /health). Set the token with FOUNDATIONFOODS_MCP_TOKEN.

STDIO mode (--stdio) speaks MCP over stdin/stdout for local desktop clients
and requires no authentication.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foundation-foods-server",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Run in stdio mode for local MCP clients (default: HTTP mode)",
    )
    return parser


def run_http(container: AppContainer) -> None:
    settings = container.settings
    _logger.info(
        "Starting FoundationFoods server in HTTP mode: host=%s port=%s",
        settings.host,
        settings.port,
    )
    uvicorn.run(
        create_app(container),
        host=settings.host,
        port=settings.port,
        log_level=settings.resolved_log_level.lower(),
    )


def run_stdio(container: AppContainer) -> None:
    asyncio.run(serve_stdio(container))


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Load data and serve in the selected mode. Returns the exit code."""
    args = build_parser().parse_args(argv)
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.resolved_log_level)
    _logger.info(
        "Starting FoundationFoods server: mode=%s environment=%s",
        "stdio" if args.stdio else "http",
        resolved_settings.environment,
    )

    try:
        container = build_container(resolved_settings)
    except CorpusLoadError:
        _logger.exception("Failed to initialize query engine")
        return 1

    if args.stdio:
        run_stdio(container)
    else:
        run_http(container)
    return 0


if __name__ == "__main__":
    sys.exit(main())
