"""FastAPI application factory."""

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wage_calculator.api.routes import health_router, tools_router
from wage_calculator.calculators.engine import WageCalculator
from wage_calculator.config import Settings, get_settings
from wage_calculator.errors import InvalidArgumentsError, UnknownOperationError
from wage_calculator.tools import WageTool

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Wage Calculator API",
        description="Monthly salary, social insurance and income tax breakdown",
        version=settings.engine_version,
    )
    app.state.wage_tool = WageTool(
        WageCalculator(settings.build_tables()),
        default_model=settings.calculation_model,
    )

    # Exception handlers
    @app.exception_handler(UnknownOperationError)
    async def unknown_operation_handler(
        request: Request, exc: UnknownOperationError
    ) -> JSONResponse:
        """Report a tool name this server does not provide."""
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc), "code": "NOT_FOUND"},
        )

    @app.exception_handler(InvalidArgumentsError)
    async def invalid_arguments_handler(
        request: Request, exc: InvalidArgumentsError
    ) -> JSONResponse:
        """Report rejected tool arguments without itemizing them."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "code": "INVALID_ARGUMENTS"},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(tools_router, prefix="/api/v1")

    return app


def run_http(settings: Settings | None = None) -> None:
    """Serve the HTTP API with uvicorn."""
    settings = settings or get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
