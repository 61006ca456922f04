"""FastAPI application factory and setup."""

import random
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from bookstore.api.http.app_data import ApplicationDependencies
from bookstore.api.http.routers import books, health
from bookstore.api.utils.app_startup import configure_logging
from bookstore.core.services import DbSessionService
from bookstore.core.storage import InMemoryBookRepository
from bookstore.runtime.config.config_data import ConfigData
from bookstore.runtime.context import get_config
from bookstore.runtime.init_db import init_db, seed_catalog


# --- Lifecycle hooks ---
def startup(app: FastAPI) -> None:
    """Build the storage backend and random source for this process."""
    config: ConfigData = app.state.config
    logger.info(
        "Starting up application in {} environment with {} storage",
        config.app.environment,
        config.storage.backend,
    )

    rng = random.Random(config.recommendation.seed)
    if config.storage.backend == "memory":
        repository = InMemoryBookRepository()
        if config.storage.seed_sample_data:
            seed_catalog(repository)
        deps = ApplicationDependencies(rng=rng, book_repository=repository)
    else:
        database_service = DbSessionService(config)
        init_db(database_service, config)
        deps = ApplicationDependencies(rng=rng, database_service=database_service)

    app.state.app_dependencies = deps


def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    if app_dependencies.database_service is not None:
        app_dependencies.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    startup(app)
    try:
        yield
    finally:
        shutdown(app)


# --- Error handlers ---
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed or incomplete payloads with 400."""
    logger.bind(error_type=type(exc).__name__).info("request.validation_error")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(config: ConfigData | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Configuration to run with; defaults to the active context's.
    """
    config = config or get_config()
    configure_logging(config)

    app = FastAPI(
        title=config.app.name,
        version=config.app.version,
        lifespan=lifespan,
        docs_url=None if config.app.environment == "production" else "/docs",
        redoc_url=None if config.app.environment == "production" else "/redoc",
    )
    app.state.config = config

    if config.app.environment == "production" and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router)
    app.include_router(books.router)

    return app


app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]
