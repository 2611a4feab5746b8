# tagstore/services/api/app.py
from __future__ import annotations

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tagstore.common.logging import get_logger
from tagstore.common.settings import get_settings
from tagstore.domain.errors import ResourceUnavailable, StorageFailure, ValidationFailure
from tagstore.services.api.deps import get_engine
from tagstore.services.api.routers import health, posts, users

cfg = get_settings()
get_logger("tagstore", cfg.log_level)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    # only dispose an engine that was actually built
    if get_engine.cache_info().currsize:
        get_engine().dispose()


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationFailure)
    async def _validation_failure(_: Request, exc: ValidationFailure) -> JSONResponse:
        return JSONResponse(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "errors": [{"loc": e.get("loc"), "msg": e.get("msg")} for e in exc.errors]},
        )

    @app.exception_handler(ResourceUnavailable)
    async def _resource_unavailable(_: Request, exc: ResourceUnavailable) -> JSONResponse:
        return JSONResponse(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            content={"detail": "Service temporarily unavailable"},
            headers={"Retry-After": "1"},
        )

    @app.exception_handler(StorageFailure)
    async def _storage_failure(_: Request, exc: StorageFailure) -> JSONResponse:
        # cause was already logged where it was translated
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"detail": "Storage failure"},
        )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Tagstore API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=_lifespan,
    )

    _install_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(posts.router)
    return app


app = create_app()
