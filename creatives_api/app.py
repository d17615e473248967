"""
Application factory for the Creatives API.

``create_app`` configures logging, registers the error handlers, wires the
services onto ``app.state`` and includes the routers.  The engine is
opened lazily and disposed when the application shuts down.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from creatives_api.core.config import get_settings
from creatives_api.core.errors import ApiError
from creatives_api.core.logging_config import setup_logging
from creatives_api.db.create_tables import create_all
from creatives_api.db.session import dispose_engine
from creatives_api.repositories.sql_repository import SQLRepository
from creatives_api.routers import accounts as accounts_router
from creatives_api.routers import auth as auth_router
from creatives_api.routers import posts as posts_router
from creatives_api.routers import profiles as profiles_router
from creatives_api.services.auth_service import AuthService
from creatives_api.services.github_service import GithubService
from creatives_api.services.post_service import PostService
from creatives_api.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

SERVER_ERROR = {"msg": "Server error"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.auto_create_tables:
        create_all()
    logger.info("Creatives API started (%s)", settings.app_env)
    yield
    dispose_engine()
    logger.info("Database engine disposed")


def _api_error(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc.__cause__ or exc)
        return JSONResponse(SERVER_ERROR, status_code=exc.status_code)
    return JSONResponse(exc.to_payload(), status_code=exc.status_code)


def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        errors.append({"msg": err.get("msg", "Invalid value"), "param": ".".join(loc)})
    return JSONResponse({"errors": errors}, status_code=400)


def _store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return JSONResponse(SERVER_ERROR, status_code=500)


def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(SERVER_ERROR, status_code=500)


def create_app(
    repository: Optional[SQLRepository] = None,
    github_service: Optional[GithubService] = None,
) -> FastAPI:
    """Build a configured application; collaborators may be injected for tests."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title="Creatives API", lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ApiError, _api_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(SQLAlchemyError, _store_error)
    app.add_exception_handler(Exception, _unexpected_error)

    repo = repository or SQLRepository()
    app.state.auth_service = AuthService(repo)
    app.state.profile_service = ProfileService(repo)
    app.state.post_service = PostService(repo)
    app.state.github_service = github_service or GithubService()

    @app.get("/")
    def root():
        return {"msg": "API running"}

    app.include_router(accounts_router.router)
    app.include_router(auth_router.router)
    app.include_router(profiles_router.router)
    app.include_router(posts_router.router)
    return app
