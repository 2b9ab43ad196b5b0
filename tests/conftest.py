"""Pytest configuration and shared fixtures."""

import pytest

from github_issue_developer.logging_context import set_correlation_id
from github_issue_developer.prompts.prompt_register import build_default_registry
from github_issue_developer.prompts.registry import PromptEntry, text_prompt
from github_issue_developer.server.dispatcher import build_server


EXPECTED_PROMPT_NAMES = [
    "git-best-practices",
    "github-workflow",
    "code-review-guidelines",
    "commit-message-format",
    "branch-naming-convention",
    "development-workflow",
]


@pytest.fixture
def expected_prompt_names():
    """The published prompt names, in registration order."""
    return list(EXPECTED_PROMPT_NAMES)


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture(autouse=True)
def isolate_tests():
    """Clear the request correlation ID between tests."""
    set_correlation_id(None)
    yield
    set_correlation_id(None)


@pytest.fixture
def registry():
    """The built-in prompt registry."""
    return build_default_registry()


@pytest.fixture
def prompt_server(registry):
    """A PromptServer serving the built-in registry."""
    return build_server(registry, name="github-issue-developer-test", version="0.0.0-test")


@pytest.fixture
def echo_entry():
    """An entry whose handler echoes back what it received."""
    calls = []

    def echo(ctx, session, params):
        calls.append((ctx, session, params))
        return text_prompt("Echo", f"params={params!r}")

    entry = PromptEntry(name="echo", description="Echoes its parameters", handler=echo)
    return entry, calls
