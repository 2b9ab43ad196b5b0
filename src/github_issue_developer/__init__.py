"""GitHub Issue Developer - Git/GitHub workflow guidance over MCP.

This package serves a fixed catalog of guidance prompts (Git best practices,
GitHub workflow, code review, commit messages, branch naming, development
workflow) through an MCP (Model Context Protocol) server.

Key components:
- prompts.registry: immutable catalog of prompt entries and the handler contract
- server.dispatcher: FastMCP server that routes prompts/get through the catalog
- transport: stdio vs HTTP/SSE selection from MCP_HTTP_ADDR
"""

__version__ = "1.0.0"
