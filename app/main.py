import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import get_settings
from app.core.exceptions import CipherError, EngineNotFoundError, ValidationError
from app.core.logging import configure_logging
from app.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)

settings = get_settings()


def _error_response(status_code: int, exc: CipherError) -> JSONResponse:
    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


async def engine_not_found_handler(request: Request, exc: EngineNotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, exc)


async def cipher_error_handler(request: Request, exc: CipherError) -> JSONResponse:
    logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Rail Fence Cipher API. "
            "Encrypt, decrypt and draw text on a zigzag rail fence."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(EngineNotFoundError, engine_not_found_handler)
    app.add_exception_handler(CipherError, cipher_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
