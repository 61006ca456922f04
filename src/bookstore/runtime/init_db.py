"""Database initialization and catalog seeding."""

from loguru import logger

from bookstore.core.services.database import DbManageService, DbSessionService
from bookstore.core.storage import BookRepository, SqlBookRepository
from bookstore.entities.book import SAMPLE_BOOKS
from bookstore.runtime.config.config_data import ConfigData
from bookstore.runtime.context import get_config


def seed_catalog(repository: BookRepository) -> int:
    """Store the sample catalog when ``repository`` holds no books.

    Returns:
        Number of books added
    """
    if repository.count() > 0:
        return 0
    for book in SAMPLE_BOOKS:
        repository.save(book)
    logger.info("Seeded catalog with {} sample books", len(SAMPLE_BOOKS))
    return len(SAMPLE_BOOKS)


def init_db(
    database_service: DbSessionService, config: ConfigData | None = None
) -> None:
    """Create all database tables and seed them if configured."""
    config = config or get_config()
    DbManageService(database_service.engine).create_all()
    if config.storage.seed_sample_data:
        with database_service.session_scope() as session:
            seed_catalog(SqlBookRepository(session))


if __name__ == "__main__":
    init_db(DbSessionService())
