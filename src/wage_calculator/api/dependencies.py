"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from wage_calculator.tools import WageTool


def get_wage_tool(request: Request) -> WageTool:
    """Get the tool instance built at app creation."""
    return request.app.state.wage_tool


# Type aliases for cleaner dependency injection
Tool = Annotated[WageTool, Depends(get_wage_tool)]
