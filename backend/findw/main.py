from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from findw.core.config import Settings, get_settings
from findw.core.exceptions import AppError, InternalError, InvalidInputError, error_response
from findw.core.logging import setup_logging
from findw.core.security import SecurityContext, build_security_context
from findw.core.security_headers import install_security_headers_middleware
from findw.db.session import build_engine, build_session_factory
from findw.routers import auth, core, groups, notes, user_settings, vk_tokens, vk_users

logger = logging.getLogger(__name__)


def _validation_details(exc: RequestValidationError) -> dict[str, Any]:
    errors = [
        {"loc": ".".join(str(part) for part in error.get("loc", ())), "msg": str(error.get("msg", ""))}
        for error in exc.errors()
    ]
    return {"errors": errors}


def create_app(
    settings: Settings | None = None,
    *,
    security: SecurityContext | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)
    settings.validate_runtime_security()

    engine = None
    if session_factory is None:
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)
    security = security or build_security_context(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            if engine is not None:
                engine.dispose()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.security = security
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_security_headers_middleware(app, settings)

    app.include_router(core.router, tags=["core"])
    app.include_router(auth.router, prefix="/auth", tags=["auth"])
    app.include_router(notes.router, prefix="/notes", tags=["notes"])
    app.include_router(groups.router, prefix="/groups", tags=["groups"])
    app.include_router(user_settings.router, prefix="/settings", tags=["settings"])
    app.include_router(vk_tokens.router, prefix="/vk-tokens", tags=["vk-tokens"])
    app.include_router(vk_users.router, prefix="/vk-users", tags=["vk-users"])

    @app.exception_handler(AppError)
    async def handle_app_error(_: Request, exc: AppError) -> JSONResponse:
        status_code, body = error_response(exc)
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        status_code, body = error_response(InvalidInputError(details=_validation_details(exc)))
        return JSONResponse(status_code=status_code, content=body)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        status_code, body = error_response(InternalError())
        return JSONResponse(status_code=status_code, content=body)

    return app
