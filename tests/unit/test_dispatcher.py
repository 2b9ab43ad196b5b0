"""Unit tests for the prompt dispatcher."""

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, GetPromptResult, TextContent

from github_issue_developer.errors import HandlerError
from github_issue_developer.prompts.registry import PromptEntry, PromptRegistry, text_prompt
from github_issue_developer.server.dispatcher import (
    PromptServer,
    build_server,
    invoke_handler,
)
from github_issue_developer.transport import ListenAddress


def _failing(ctx, session, params):
    raise HandlerError("upstream unavailable")


def _crashing(ctx, session, params):
    raise RuntimeError("boom")


def _wrong_type(ctx, session, params):
    return "not a result"


async def _async_handler(ctx, session, params):
    return text_prompt("Async", "computed asynchronously")


def _server_for(*entries: PromptEntry) -> PromptServer:
    return build_server(PromptRegistry(entries), name="test-server", version="0.0.0-test")


class TestInvokeHandler:
    """Test the handler invocation path."""

    @pytest.mark.anyio
    async def test_sync_handler(self, echo_entry):
        """Test that sync handlers are called with ctx, session and params."""
        entry, calls = echo_entry
        result = await invoke_handler(entry, "ctx", "session", {"a": "b"})
        assert result.description == "Echo"
        assert calls == [("ctx", "session", {"a": "b"})]

    @pytest.mark.anyio
    async def test_async_handler(self):
        """Test that awaitable results are awaited."""
        entry = PromptEntry(name="async", description="Async", handler=_async_handler)
        result = await invoke_handler(entry)
        assert result.messages[0].content.text == "computed asynchronously"

    @pytest.mark.anyio
    async def test_wrong_return_type(self):
        """Test that a non-GetPromptResult return is a HandlerError."""
        entry = PromptEntry(name="bad", description="Bad", handler=_wrong_type)
        with pytest.raises(HandlerError, match="expected GetPromptResult"):
            await invoke_handler(entry)


class TestPromptServer:
    """Test prompt listing and dispatch through the server."""

    def test_build_server_identity(self, prompt_server):
        """Test name, version and registry binding."""
        assert prompt_server.name == "github-issue-developer-test"
        assert prompt_server.version == "0.0.0-test"
        assert len(prompt_server.registry) == 6

    def test_build_server_with_address(self, registry):
        """Test that the listen address feeds the HTTP settings."""
        server = build_server(registry, name="x", address=ListenAddress("0.0.0.0", 9090))
        assert server.settings.host == "0.0.0.0"
        assert server.settings.port == 9090

    @pytest.mark.anyio
    async def test_list_prompts(self, prompt_server, expected_prompt_names):
        """Test that every registry entry is advertised in order."""
        prompts = await prompt_server.list_prompts()
        assert [p.name for p in prompts] == expected_prompt_names
        for prompt in prompts:
            assert prompt.description
            assert prompt.title
            assert prompt.arguments == []

    @pytest.mark.anyio
    async def test_get_prompt_returns_handler_result(self, prompt_server):
        """Test that the handler's own result, description included, is returned."""
        result = await prompt_server.get_prompt("git-best-practices")
        assert isinstance(result, GetPromptResult)
        assert result.description == "Git best practices for development workflow"
        content = result.messages[0].content
        assert isinstance(content, TextContent)
        assert "Commit Guidelines" in content.text
        assert "Branch Management" in content.text

    @pytest.mark.anyio
    async def test_get_prompt_commit_message_format(self, prompt_server):
        """Test the commit message document through the dispatcher."""
        result = await prompt_server.get_prompt("commit-message-format")
        text = result.messages[0].content.text
        for keyword in ("feat", "fix", "imperative mood"):
            assert keyword in text

    @pytest.mark.anyio
    async def test_get_prompt_every_name(self, prompt_server, expected_prompt_names):
        """Test that every published name resolves."""
        for name in expected_prompt_names:
            result = await prompt_server.get_prompt(name)
            assert result.messages

    @pytest.mark.anyio
    async def test_get_prompt_is_idempotent(self, prompt_server):
        """Test that repeated requests produce identical output."""
        first = await prompt_server.get_prompt("github-workflow")
        second = await prompt_server.get_prompt("github-workflow")
        assert first.model_dump_json() == second.model_dump_json()

    @pytest.mark.anyio
    async def test_unknown_prompt_is_not_found(self, prompt_server):
        """Test that an unknown name raises an INVALID_PARAMS protocol error."""
        with pytest.raises(McpError) as exc_info:
            await prompt_server.get_prompt("does-not-exist")
        assert exc_info.value.error.code == INVALID_PARAMS
        assert "not found" in exc_info.value.error.message

    @pytest.mark.anyio
    async def test_handler_error_becomes_protocol_error(self):
        """Test that HandlerError is reported to the caller."""
        server = _server_for(PromptEntry(name="fails", description="Fails", handler=_failing))
        with pytest.raises(McpError) as exc_info:
            await server.get_prompt("fails")
        assert exc_info.value.error.code == INTERNAL_ERROR
        assert "upstream unavailable" in exc_info.value.error.message

    @pytest.mark.anyio
    async def test_unexpected_exception_becomes_protocol_error(self):
        """Test that any other exception is also reported, not raised raw."""
        server = _server_for(PromptEntry(name="crash", description="Crash", handler=_crashing))
        with pytest.raises(McpError) as exc_info:
            await server.get_prompt("crash")
        assert exc_info.value.error.code == INTERNAL_ERROR

    @pytest.mark.anyio
    async def test_wrong_return_type_becomes_protocol_error(self):
        """Test that a contract violation is reported as an error."""
        server = _server_for(PromptEntry(name="bad", description="Bad", handler=_wrong_type))
        with pytest.raises(McpError) as exc_info:
            await server.get_prompt("bad")
        assert exc_info.value.error.code == INTERNAL_ERROR

    @pytest.mark.anyio
    async def test_params_reach_handler_outside_request(self, echo_entry):
        """Test that arguments are forwarded and session is None outside a request."""
        entry, calls = echo_entry
        server = _server_for(entry)
        await server.get_prompt("echo", {"topic": "branches"})
        (ctx, session, params), = calls
        assert ctx is not None
        assert session is None
        assert params == {"topic": "branches"}
