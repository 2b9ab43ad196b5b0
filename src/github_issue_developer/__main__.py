"""Entry point for running the GitHub Issue Developer MCP server."""

import logging
import sys
from importlib import import_module

import anyio
import uvicorn

# --- Configuration Bootstrap ---
# This is the first and only place where these modules should be imported to
# ensure that configuration and logging are set up exactly once, as soon as
# the application starts. The order is critical.
from github_issue_developer import config

# To prevent the warning: Import "github_issue_developer.logging" is not accessed
import_module("github_issue_developer.logging")

from github_issue_developer.errors import ConfigError  # noqa: E402
from github_issue_developer.prompts.prompt_register import build_default_registry  # noqa: E402
from github_issue_developer.server.app import starlette_app  # noqa: E402
from github_issue_developer.server.dispatcher import PromptServer, build_server  # noqa: E402
from github_issue_developer.transport import (  # noqa: E402
    TransportConfig,
    TransportKind,
    resolve_transport,
)

logger = logging.getLogger(__name__)


def serve(server: PromptServer, transport: TransportConfig) -> None:
    """Run `server` on the selected transport until it shuts down.

    Bind and run failures propagate to the caller; there is no retry and no
    fallback to the other transport.
    """
    if transport.kind is TransportKind.STDIO:
        logger.info("Serving MCP over stdio.")
        anyio.run(server.run_stdio_async)
        return

    address = transport.address
    logger.info("MCP server listening at %s (SSE endpoint /sse)", address)
    uvicorn.run(
        starlette_app(server),
        # IMPORTANT: This tells uvicorn to use our logging configuration.
        log_config=None,
        host=address.host,
        port=address.port,
        timeout_graceful_shutdown=config.TIMEOUT_GRACEFUL_SHUTDOWN,
        timeout_keep_alive=config.TIMEOUT_KEEP_ALIVE,
    )


def main() -> int:
    try:
        transport = resolve_transport(config.HTTP_ADDR)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    logger.info("Starting GitHub Issue Developer MCP Server...")
    logger.info("Server Name: %s", config.SERVER_NAME)
    logger.info("Version: %s", config.SERVER_VERSION)

    registry = build_default_registry()
    server = build_server(
        registry,
        name=config.SERVER_NAME,
        version=config.SERVER_VERSION,
        address=transport.address,
        log_level=config.LOG_LEVEL,
    )

    try:
        serve(server, transport)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down.")
    except Exception:
        logger.exception("Error starting MCP server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
