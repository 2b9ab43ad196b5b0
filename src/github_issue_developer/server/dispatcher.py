"""MCP server that answers prompt requests from a PromptRegistry.

PromptServer is a FastMCP server whose prompts/get handler is routed through
the registry instead of FastMCP's own prompt manager. This keeps each
handler's GetPromptResult intact (including its own description) and gives
one place to turn handler failures into MCP error responses.
"""

import inspect
import logging
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, ErrorData, GetPromptResult

from github_issue_developer.errors import HandlerError, PromptNotFoundError
from github_issue_developer.prompts.prompt_register import register_prompts
from github_issue_developer.prompts.registry import PromptEntry, PromptRegistry
from github_issue_developer.telemetry import PROMPT_RENDER, record_prompt_request, timer
from github_issue_developer.transport import ListenAddress

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Git and GitHub workflow guidance. List the prompts to see the available "
    "documents; each one returns a fixed set of instructions to follow while "
    "working on a repository."
)


async def invoke_handler(
    entry: PromptEntry,
    ctx: Any = None,
    session: Any = None,
    params: Optional[dict[str, str]] = None,
) -> GetPromptResult:
    """Call an entry's handler and check that it honoured the contract.

    Raises:
        HandlerError: If the handler raised it, or returned something other
            than a GetPromptResult.
    """
    result = entry.handler(ctx, session, params)
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, GetPromptResult):
        raise HandlerError(
            f"Prompt {entry.name} returned {type(result).__name__}, expected GetPromptResult"
        )
    return result


class PromptServer(FastMCP):
    """FastMCP server bound to a single, immutable prompt registry."""

    def __init__(
        self,
        registry: PromptRegistry,
        version: Optional[str] = None,
        **settings: Any,
    ):
        super().__init__(**settings)
        self.registry = registry
        self.version = version
        # Reported to clients in the initialize result.
        self._mcp_server.version = version
        register_prompts(self, registry)

    async def get_prompt(
        self, name: str, arguments: Optional[dict[str, Any]] = None
    ) -> GetPromptResult:
        """Render a prompt by name.

        Unknown names and handler failures are raised as McpError so the
        protocol runtime replies with an error instead of dropping the
        session.
        """
        try:
            entry = self.registry.get(name)
        except PromptNotFoundError as e:
            record_prompt_request(name, "not_found")
            logger.warning("Unknown prompt requested: %s", name)
            raise McpError(ErrorData(code=INVALID_PARAMS, message=str(e))) from e

        ctx = self.get_context()
        try:
            session = ctx.session
        except ValueError:
            # Called outside a live MCP request
            session = None

        logger.debug("Rendering prompt %s", name)
        try:
            with timer(PROMPT_RENDER, prompt=name):
                result = await invoke_handler(entry, ctx, session, arguments)
        except McpError:
            record_prompt_request(name, "handler_error")
            raise
        except HandlerError as e:
            record_prompt_request(name, "handler_error")
            logger.warning("Prompt %s failed: %s", name, e)
            raise McpError(
                ErrorData(code=INTERNAL_ERROR, message=f"Prompt {name} failed: {e}")
            ) from e
        except Exception as e:
            record_prompt_request(name, "handler_error")
            logger.exception("Unexpected error rendering prompt %s", name)
            raise McpError(
                ErrorData(code=INTERNAL_ERROR, message=f"Prompt {name} failed: {e}")
            ) from e

        record_prompt_request(name, "ok")
        return result


def build_server(
    registry: PromptRegistry,
    name: str,
    version: Optional[str] = None,
    address: Optional[ListenAddress] = None,
    log_level: str = "INFO",
) -> PromptServer:
    """Create the PromptServer for a registry.

    address is only used by the HTTP transport; it feeds the host/port
    settings FastMCP uses for its transport security defaults.
    """
    settings: dict[str, Any] = {"log_level": log_level}
    if address is not None:
        settings["host"] = address.host
        settings["port"] = address.port

    logger.info("Initializing FastMCP.")
    return PromptServer(
        registry,
        version=version,
        name=name,
        instructions=INSTRUCTIONS,
        **settings,
    )
