"""HTTP application for the prompt server (SSE transport).

Clients open ``GET /sse`` to receive the event stream and post JSON-RPC
messages to ``/messages/``. Every connection is served by the same
PromptServer instance. ``GET /healthz`` reports liveness for container
health checks.
"""

import logging

from starlette.applications import Starlette
from starlette.datastructures import Headers, MutableHeaders
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from github_issue_developer.logging_context import (
    resolve_correlation_id,
    set_correlation_id,
)
from github_issue_developer.schemas.outputs import HealthOut
from github_issue_developer.server.dispatcher import PromptServer

logger = logging.getLogger(__name__)

CORRELATION_ID_HEADER = "x-correlation-id"


class CorrelationIdMiddleware:
    """Tag each HTTP request with a correlation ID and echo it back.

    Written as plain ASGI rather than BaseHTTPMiddleware so long-lived SSE
    responses stream through untouched.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        corr_id = resolve_correlation_id(Headers(scope=scope).get(CORRELATION_ID_HEADER))

        async def send_with_header(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers[CORRELATION_ID_HEADER] = corr_id
            await send(message)

        set_correlation_id(corr_id)
        try:
            await self.app(scope, receive, send_with_header)
        finally:
            set_correlation_id(None)


def starlette_app(server: PromptServer) -> Starlette:
    """Create the Starlette application serving `server` over SSE."""

    logger.info("Initializing SSE application for %s.", server.name)

    app = server.sse_app()

    async def healthz(_: Request) -> JSONResponse:
        health = HealthOut(
            server=server.name,
            version=server.version,
            prompts=len(server.registry),
        )
        return JSONResponse(health.model_dump())

    app.add_route("/healthz", healthz, methods=["GET"], name="healthz")
    app.add_middleware(CorrelationIdMiddleware)

    return app
