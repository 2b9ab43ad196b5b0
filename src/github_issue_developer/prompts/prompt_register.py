import logging
from typing import TYPE_CHECKING, List, Optional

from mcp.server.fastmcp.prompts import Prompt

from github_issue_developer.prompts.git_prompts import (
    branch_naming_convention,
    commit_message_format,
    git_best_practices,
)
from github_issue_developer.prompts.github_prompts import (
    code_review_guidelines,
    github_workflow,
)
from github_issue_developer.prompts.registry import PromptEntry, PromptRegistry
from github_issue_developer.prompts.workflow_prompts import development_workflow

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)


# Catalog of the prompts this server publishes, in the order they are listed.
PROMPT_ENTRIES: List[PromptEntry] = [
    PromptEntry(
        name="git-best-practices",
        title="Git best practices",
        description="Provides Git best practices for development workflow",
        handler=git_best_practices,
    ),
    PromptEntry(
        name="github-workflow",
        title="GitHub workflow",
        description="Provides GitHub workflow best practices",
        handler=github_workflow,
    ),
    PromptEntry(
        name="code-review-guidelines",
        title="Code review guidelines",
        description="Provides code review guidelines and best practices",
        handler=code_review_guidelines,
    ),
    PromptEntry(
        name="commit-message-format",
        title="Commit message format",
        description="Provides commit message formatting guidelines",
        handler=commit_message_format,
    ),
    PromptEntry(
        name="branch-naming-convention",
        title="Branch naming convention",
        description="Provides branch naming convention guidelines",
        handler=branch_naming_convention,
    ),
    PromptEntry(
        name="development-workflow",
        title="Development workflow",
        description="Comprehensive development workflow with Git, GitHub, and CI/CD best practices",
        handler=development_workflow,
    ),
]


def build_default_registry(
    entries: Optional[List[PromptEntry]] = None,
) -> PromptRegistry:
    """Build the registry served by this package.

    Passing entries replaces the built-in catalog, which keeps tests and
    alternative deployments from touching module state.
    """
    return PromptRegistry(PROMPT_ENTRIES if entries is None else entries)


def register_prompts(mcp_instance: "FastMCP", registry: PromptRegistry) -> None:
    """Advertise every registry entry on the MCP instance.

    Only the listing metadata (name, title, description) is registered here;
    prompts/get requests are answered by the dispatcher from the registry.
    """
    for entry in registry.list_all():
        mcp_instance.add_prompt(
            Prompt(
                name=entry.name,
                title=entry.title,
                description=entry.description,
                arguments=[],
                fn=entry.handler,
            )
        )
        logger.info("Registered prompt: %s - %s", entry.name, entry.description)
