"""API routes."""

from wage_calculator.api.routes.health import router as health_router
from wage_calculator.api.routes.tools import router as tools_router

__all__ = ["health_router", "tools_router"]
