"""Main FastAPI application module.

This module builds the FastAPI application, registers the route handlers
and the exception handlers that render every error in the standard
``{success, message, errors}`` envelope.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jurnal_digital import config
from jurnal_digital.api.routes import auth, guru, health, jurnal, siswa
from jurnal_digital.core.database import Database
from jurnal_digital.core.exceptions import JurnalDigitalError, ValidationError
from jurnal_digital.core.logging_config import setup_logging
from jurnal_digital.core.validation import pydantic_errors_to_field_errors

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, errors=None, headers=None) -> JSONResponse:
    content = {"success": False, "message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Render domain, HTTP, validation and unexpected errors as envelopes."""

    @app.exception_handler(JurnalDigitalError)
    async def domain_error_handler(request: Request, exc: JurnalDigitalError):
        if isinstance(exc, ValidationError):
            return _error_response(
                exc.status_code, exc.message, [e.model_dump() for e in exc.errors]
            )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else "Terjadi kesalahan"
        if exc.status_code == 404 and message == "Not Found":
            message = "Endpoint tidak ditemukan"
        return _error_response(exc.status_code, message, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = pydantic_errors_to_field_errors(exc.errors())
        return _error_response(400, "Validation error", [e.model_dump() for e in errors])

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        content = {"success": False, "message": "Terjadi kesalahan server"}
        if config.DEBUG:
            content["error"] = str(exc)
        return JSONResponse(status_code=500, content=content)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application.

    Args:
        database: Database to use; when omitted one is created from
            ``DATABASE_URL`` at startup.

    Returns:
        Configured FastAPI application.

    Raises:
        ConfigurationError: If ``JWT_SECRET_KEY`` is not configured.
    """
    setup_logging()
    # fail fast instead of signing tokens with a guessable key
    config.get_jwt_secret()

    app = FastAPI(
        title=config.SERVICE_NAME,
        description="REST API for daily character-education journals.",
        version=config.VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(siswa.router)
    app.include_router(guru.router)
    app.include_router(jurnal.router)

    @app.on_event("startup")
    def open_database() -> None:
        db = database or Database(config.DATABASE_URL)
        db.init_db()
        app.state.database = db

    @app.on_event("shutdown")
    def close_database() -> None:
        db = getattr(app.state, "database", None)
        if db is not None:
            db.dispose()

    return app


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    server_url = f"http://{config.API_HOST}:{config.API_PORT}"
    print(f"Starting {config.SERVICE_NAME} at {server_url}")
    print(f"API docs: {server_url}/docs")
    uvicorn.run(
        "jurnal_digital.app:create_app",
        factory=True,
        host=config.API_HOST,
        port=config.API_PORT,
    )
