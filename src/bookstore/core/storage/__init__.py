from .book_storage import BookRepository, InMemoryBookRepository, SqlBookRepository

__all__ = ["BookRepository", "InMemoryBookRepository", "SqlBookRepository"]
