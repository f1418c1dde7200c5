import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core import errors
from .core.config import Settings, get_settings
from .core.logging import init_logging, request_context_middleware
from .routers import convert, health, rates
from .services.rates import CurrencyConverterService, NoConversionPathError


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug, log_format=settings.log_format)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings
    # One rate graph per app instance; routers reach it through Depends
    app.state.converter_service = CurrencyConverterService(
        seed_defaults=settings.seed_default_rates
    )
    logging.getLogger("currency_converter").info(
        "converter ready with %d edges", len(app.state.converter_service.store)
    )

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(NoConversionPathError, errors.no_conversion_path_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rates.router)
    app.include_router(convert.router)

    @app.get("/")
    async def root():
        return {"message": f"{settings.app_name} API", "version": settings.version}

    return app


app = create_app()
