"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from pydantic import BaseModel

from wage_calculator.api.dependencies import Tool

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    jurisdiction: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
async def health_check(tool: Tool) -> HealthResponse:
    """Check API health and report the loaded tax tables."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        jurisdiction=tool.calculator.tables.jurisdiction,
    )
