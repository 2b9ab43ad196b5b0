"""Exception hierarchy for the GitHub Issue Developer server.

Library code raises these; the dispatcher translates the request-time ones
(PromptNotFoundError, HandlerError) into MCP error responses, and the entry
point turns ConfigError into a non-zero exit.
"""


class GitHubIssueDeveloperError(Exception):
    """Base error for this package."""


class ConfigError(GitHubIssueDeveloperError, ValueError):
    """Invalid configuration value, e.g. a malformed MCP_HTTP_ADDR."""


class InvalidPromptError(GitHubIssueDeveloperError, ValueError):
    """A prompt entry is missing its name, description or handler."""


class DuplicatePromptError(GitHubIssueDeveloperError, ValueError):
    """Two prompt entries share the same name."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate prompt name: {name}")
        self.name = name


class PromptNotFoundError(GitHubIssueDeveloperError, LookupError):
    """No prompt is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Prompt not found: {name}")
        self.name = name


class HandlerError(GitHubIssueDeveloperError):
    """A prompt handler could not produce its result.

    Handlers raise this to report a failure to the caller; the dispatcher
    converts it into an error response instead of letting it escape.
    """
