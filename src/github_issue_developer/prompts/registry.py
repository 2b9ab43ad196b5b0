"""Prompt catalog and the handler contract shared by every prompt.

A PromptHandler receives the request Context, the ServerSession (None when
invoked outside a live MCP request) and the prompt arguments, and returns a
GetPromptResult - either directly or as an awaitable. Handlers raise
HandlerError to report a caller-visible failure.
"""

from collections.abc import Awaitable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from mcp.types import GetPromptResult, PromptMessage, TextContent

from github_issue_developer.errors import (
    DuplicatePromptError,
    InvalidPromptError,
    PromptNotFoundError,
)

if TYPE_CHECKING:
    from mcp.server.fastmcp import Context
    from mcp.server.session import ServerSession


PromptHandler = Callable[
    [Optional["Context[Any, Any, Any]"], Optional["ServerSession"], Optional[dict[str, str]]],
    Union[GetPromptResult, Awaitable[GetPromptResult]],
]


@dataclass(frozen=True)
class PromptEntry:
    """One invocable prompt: its public name, summary and handler."""

    name: str
    description: str
    handler: PromptHandler
    title: Optional[str] = None


def text_prompt(description: str, text: str) -> GetPromptResult:
    """Build a single user-message result carrying a plain text block."""
    return GetPromptResult(
        description=description,
        messages=[
            PromptMessage(role="user", content=TextContent(type="text", text=text)),
        ],
    )


class PromptRegistry:
    """Ordered, read-only collection of prompt entries.

    Construction validates every entry and fails fast on an empty name or
    description, a missing handler, or a name used twice.
    """

    def __init__(self, entries: Iterable[PromptEntry]):
        ordered: list[PromptEntry] = []
        by_name: dict[str, PromptEntry] = {}
        for entry in entries:
            if not entry.name or not entry.name.strip():
                raise InvalidPromptError("Prompt name cannot be empty")
            if not entry.description or not entry.description.strip():
                raise InvalidPromptError(f"Prompt {entry.name} has an empty description")
            if not callable(entry.handler):
                raise InvalidPromptError(f"Prompt {entry.name} handler is not callable")
            if entry.name in by_name:
                raise DuplicatePromptError(entry.name)
            by_name[entry.name] = entry
            ordered.append(entry)
        self._entries = tuple(ordered)
        self._by_name = by_name

    def list_all(self) -> tuple[PromptEntry, ...]:
        """Return every entry in registration order."""
        return self._entries

    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def get(self, name: str) -> PromptEntry:
        """Look up an entry by name.

        Raises:
            PromptNotFoundError: If no entry has that name.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise PromptNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[PromptEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PromptRegistry({self.names()!r})"
