"""cordelia/api/routes/tools.py — Direct tool invocation endpoint.

POST /tools/call  — Execute a registered tool by name with a params dict.
GET  /tools/list  — List registered tools with their parameter schemas.

Tool failures (bad notes, bad chord names, wrong parameter types) are
encoded in the response body with ``success=False``; only an unknown tool
name is an HTTP error.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from cordelia.tools.registry import get_registry

router = APIRouter(prefix="/tools", tags=["tools"])


class ToolCallRequest(BaseModel):
    """POST /tools/call request body."""

    name: str
    """Tool name as returned by ToolRegistry.list_tools()['name']."""

    params: dict[str, Any] = {}
    """Keyword arguments forwarded to the tool."""


class ToolCallResponse(BaseModel):
    """POST /tools/call response body — mirrors ToolResult."""

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


@router.post("/call", response_model=ToolCallResponse)
def call_tool(request: ToolCallRequest) -> ToolCallResponse:
    """Execute a registered tool by name.

    Raises:
        HTTPException(404): Tool not registered.
    """
    registry = get_registry()
    tool = registry.get(request.name)
    if tool is None:
        available = [t["name"] for t in registry.list_tools()]
        raise HTTPException(
            status_code=404,
            detail=f"Tool '{request.name}' not found. Available tools: {available}",
        )

    result = tool(**request.params)
    return ToolCallResponse(
        success=result.success,
        data=result.data,
        error=result.error,
        metadata=result.metadata,
    )


@router.get("/list")
def list_tools() -> list[dict[str, Any]]:
    """List registered tools with name, description and parameters."""
    return get_registry().list_tools()
