"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request

from bookstore.api.http.app_data import ApplicationDependencies
from bookstore.core.services import BookService
from bookstore.core.storage import BookRepository, SqlBookRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies created at application startup."""
    return request.app.state.app_dependencies


def get_book_repository(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[BookRepository]:
    """Yield the configured book repository.

    The database backend gets a fresh session per request, closed once the
    request is done.
    """
    if app_deps.book_repository is not None:
        yield app_deps.book_repository
        return

    session = app_deps.database_service.get_session()
    try:
        yield SqlBookRepository(session)
    finally:
        session.close()


def get_book_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
    repository: BookRepository = Depends(get_book_repository),
) -> BookService:
    """Get a book service bound to the request's repository."""
    return BookService(repository, rng=app_deps.rng)
