"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn stellar_service.api.app:app --port 3002
or:       stellar-service serve
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from stellar_service import __version__
from stellar_service.api.routes import error_response, router
from stellar_service.config import ServiceConfig, get_config
from stellar_service.core.service import LedgerService
from stellar_service.horizon.interface import HorizonConnectionError
from stellar_service.log import setup_logging

logger = structlog.get_logger(__name__)

INVALID_BODY = "Invalid request body"


def create_app(
    config: Optional[ServiceConfig] = None,
    service: Optional[LedgerService] = None,
) -> FastAPI:
    """
    Build the ASGI app.

    Args:
        config: Service configuration (global config if not provided)
        service: Pre-built service, e.g. one wired to a mock gateway
    """
    config = config or (service.config if service else get_config())
    service = service or LedgerService(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(config.log_level, config.log_json)
        try:
            await service.start()
        except HorizonConnectionError as e:
            # Requests still go out; each one reports its own gateway failure.
            logger.warning("horizon_unreachable", error=str(e))
        yield
        await service.stop()

    app = FastAPI(
        title="Stellar Transaction Service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON or wrongly typed fields are client errors."""
        logger.warning(
            "request_validation_failed",
            path=request.url.path,
            errors=[".".join(str(loc) for loc in e["loc"]) for e in exc.errors()],
        )
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY)

    return app


app = create_app()
