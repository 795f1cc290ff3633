from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from billing_engine.api.routes import health_router
from billing_engine.api.v1 import v1_router
from billing_engine.api.v1.envelope import error
from billing_engine.config.settings import Settings
from billing_engine.core.logging_config import setup_logging


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies come back in the same envelope as successes."""
    logger.warning("Rejected {} {}: {} validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(error("Invalid request", errors=list(exc.errors()))),
    )


def create_app(settings: Settings) -> FastAPI:
    """Build the API around an explicitly supplied settings object."""
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
    app.state.settings = settings

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(health_router)
    app.include_router(v1_router)

    logger.info(
        "Starting {} ({}), default issuer state {} ({}), cloud sync {}",
        settings.APP_NAME,
        settings.ENVIRONMENT,
        settings.ISSUER_HOME_STATE,
        settings.ISSUER_HOME_STATE_CODE,
        "enabled" if settings.cloud_sync_enabled else "disabled",
    )
    return app


def build_app() -> FastAPI:
    """Process entry point for ``uvicorn --factory``; settings are read once, here."""
    from billing_engine.config.settings import settings

    return create_app(settings)
