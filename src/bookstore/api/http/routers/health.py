"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from bookstore.api.http.app_data import ApplicationDependencies
from bookstore.api.http.deps import get_app_dependencies, get_book_repository
from bookstore.core.storage import BookRepository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "bookstore"}


@router.get("/ready", response_model=None)
def readiness(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
    repository: BookRepository = Depends(get_book_repository),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when book storage answers, 503 otherwise."""
    checks: dict[str, Any] = {}

    if app_deps.database_service is not None:
        db_healthy = app_deps.database_service.health_check()
        checks["database"] = {"status": "healthy" if db_healthy else "unhealthy"}
    else:
        db_healthy = True

    storage_healthy = db_healthy and repository.is_available()
    checks["storage"] = {
        "status": "healthy" if storage_healthy else "unhealthy",
        "type": "memory" if app_deps.book_repository is not None else "database",
    }

    body = {"status": "ready" if storage_healthy else "not_ready", "checks": checks}
    if not storage_healthy:
        return JSONResponse(status_code=503, content=body)
    return body
