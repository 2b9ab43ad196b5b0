"""Transport-facing output schemas for the HTTP endpoints.

These Pydantic models define the JSON shapes returned outside the MCP
protocol itself, such as the health check used by container orchestrators.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class HealthOut(BaseModel):
    """Liveness payload returned by GET /healthz."""

    status: Literal["ok"] = "ok"
    server: str = Field(..., description="MCP server name advertised to clients.")
    version: Optional[str] = Field(None, description="Server version.")
    prompts: int = Field(..., ge=0, description="Number of prompts being served.")
