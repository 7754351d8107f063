"""Tool discovery and invocation endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, status

from wage_calculator.api.dependencies import Tool
from wage_calculator.api.schemas import (
    ErrorResponse,
    TextContent,
    ToolCallResponse,
    ToolDescriptor,
    ToolListResponse,
)

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get(
    "",
    response_model=ToolListResponse,
)
async def list_tools(tool: Tool) -> ToolListResponse:
    """List the tools this server provides."""
    return ToolListResponse(
        tools=[
            ToolDescriptor(
                name=descriptor["name"],
                description=descriptor["description"],
                input_schema=descriptor["inputSchema"],
            )
            for descriptor in tool.list_tools()
        ]
    )


@router.post(
    "/{name}",
    response_model=ToolCallResponse,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
async def call_tool(
    tool: Tool,
    name: Annotated[str, Path()],
    arguments: Annotated[Any, Body()] = None,
) -> ToolCallResponse:
    """Invoke a tool with a JSON object of arguments.

    Unknown names and invalid arguments are turned into 404 and 422
    responses by the app's exception handlers.
    """
    text = tool.call_tool(name, arguments)
    return ToolCallResponse(content=[TextContent(text=text)])
