"""Book storage interface and implementations.

Provides a unified repository interface for books with an in-memory
backend and a relational backend built on SQLModel.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from bookstore.entities.book import Book, BookTable, genre_key


class BookRepository(ABC):
    """Abstract interface for book storage backends."""

    @abstractmethod
    def find_all(self) -> list[Book]:
        """Return every stored book ordered by id."""
        pass

    @abstractmethod
    def save(self, book: Book) -> Book:
        """Store a book.

        A book without an id gets the next generated id. A book with an id
        replaces the stored book with that id, or is added when none exists.

        Args:
            book: Book to store

        Returns:
            The stored book, id populated
        """
        pass

    @abstractmethod
    def find_by_genre(self, genre: str) -> list[Book]:
        """Return books whose genre equals ``genre``, ignoring case."""
        pass

    @abstractmethod
    def find_by_id(self, book_id: int) -> Book | None:
        """Return the book with ``book_id`` or None if not found."""
        pass

    def count(self) -> int:
        """Return the number of stored books."""
        return len(self.find_all())

    @abstractmethod
    def is_available(self) -> bool:
        """Check if storage backend is available.

        Returns:
            True if storage is healthy and available
        """
        pass


class InMemoryBookRepository(BookRepository):
    """In-memory book storage with sequential id generation.

    A single lock guards the list and the id counter, so one instance can be
    shared across request threads.
    """

    def __init__(self, books: Iterable[Book] = ()):
        self._books: list[Book] = []
        self._next_id = 1
        self._lock = threading.Lock()
        for book in books:
            self.save(book)

    def find_all(self) -> list[Book]:
        with self._lock:
            return [book.model_copy() for book in self._books]

    def save(self, book: Book) -> Book:
        with self._lock:
            if book.id is None:
                stored = book.model_copy(update={"id": self._next_id})
                self._next_id += 1
                self._books.append(stored)
                return stored.model_copy()

            stored = book.model_copy()
            for index, existing in enumerate(self._books):
                if existing.id == stored.id:
                    self._books[index] = stored
                    break
            else:
                self._books.append(stored)
            # Keep generated ids clear of explicitly supplied ones
            self._next_id = max(self._next_id, stored.id + 1)
            return stored.model_copy()

    def find_by_genre(self, genre: str) -> list[Book]:
        wanted = genre_key(genre)
        with self._lock:
            return [
                book.model_copy()
                for book in self._books
                if genre_key(book.genre) == wanted
            ]

    def find_by_id(self, book_id: int) -> Book | None:
        with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book.model_copy()
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def is_available(self) -> bool:
        return True


class SqlBookRepository(BookRepository):
    """Data-access layer for books stored in the ``books`` table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_all(self) -> list[Book]:
        statement = select(BookTable).order_by(BookTable.id)
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row) for row in rows]

    def save(self, book: Book) -> Book:
        values = book.model_dump(exclude={"id"})
        row = self._session.get(BookTable, book.id) if book.id is not None else None
        if row is None:
            row = BookTable(id=book.id, genre_key=genre_key(book.genre), **values)
            self._session.add(row)
        else:
            for field, value in values.items():
                setattr(row, field, value)
            row.genre_key = genre_key(book.genre)

        try:
            self._session.commit()
        except Exception:
            self._session.rollback()
            logger.exception("Failed to save book {!r}", book.title)
            raise
        self._session.refresh(row)
        return Book.model_validate(row)

    def find_by_genre(self, genre: str) -> list[Book]:
        statement = (
            select(BookTable)
            .where(BookTable.genre_key == genre_key(genre))
            .order_by(BookTable.id)
        )
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row) for row in rows]

    def find_by_id(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row)

    def count(self) -> int:
        statement = select(func.count()).select_from(BookTable)
        return self._session.exec(statement).one()

    def is_available(self) -> bool:
        try:
            self._session.exec(select(func.count()).select_from(BookTable)).one()
            return True
        except Exception as e:
            logger.error("Book table unavailable: {}", e)
            return False
