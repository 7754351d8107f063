"""Pydantic schemas for API request/response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """Schema for a discoverable tool."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")


class ToolListResponse(BaseModel):
    """Schema for listing tools."""

    tools: list[ToolDescriptor]


class TextContent(BaseModel):
    """Schema for one block of tool output."""

    type: str = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Schema for a tool invocation result."""

    content: list[TextContent]


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: str
    code: str | None = None
