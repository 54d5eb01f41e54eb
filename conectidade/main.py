# conectidade/main.py
# Run with: uvicorn --factory conectidade.main:create_app
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from conectidade import __version__
from conectidade.api import auth, categories, connections, skills, user_skills
from conectidade.config import Settings, settings as default_settings
from conectidade.errors import AuthenticationRequired, ConectidadeError, InternalFailure, ValidationError
from conectidade.logging_config import setup_logging
from conectidade.schemas.validation import issues_from_errors
from conectidade.storage import Storage, build_storage

logger = logging.getLogger(__name__)


# ======================
# ERROR HANDLERS
# ======================
async def handle_app_error(request: Request, exc: ConectidadeError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationRequired) else None
    return JSONResponse(status_code=exc.status_code, content=exc.body(), headers=headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    error = ValidationError(issues_from_errors(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.body())


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = InternalFailure()
    return JSONResponse(status_code=error.status_code, content=error.body())


def create_app(storage: Optional[Storage] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around ``storage`` (a fresh backend from settings when omitted)."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Conectidade API", version=__version__)
    app.state.settings = settings
    app.state.storage = storage if storage is not None else build_storage(settings)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConectidadeError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # API routers
    app.include_router(auth.router)          # /api/register, /api/login, /api/logout, /api/user
    app.include_router(categories.router)    # /api/categories/*
    app.include_router(skills.router)        # /api/skills/*
    app.include_router(user_skills.router)   # /api/user-skills/*
    app.include_router(connections.router)   # /api/connections/*

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "message": "Conectidade API is running",
            "version": __version__,
        }

    logger.info("Conectidade API ready (%s storage)", type(app.state.storage).__name__)
    return app

