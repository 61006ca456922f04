"""Catalog operations on top of a book repository."""

import random

from loguru import logger

from bookstore.core.storage import BookRepository
from bookstore.entities.book import Book


class BookService:
    """Business operations for the book catalog.

    Validation of incoming books happens in the API layer; the service
    forwards books to storage as given.
    """

    def __init__(
        self, repository: BookRepository, rng: random.Random | None = None
    ) -> None:
        self._repository = repository
        self._rng = rng or random.Random()

    def get_all_books(self) -> list[Book]:
        return self._repository.find_all()

    def add_book(self, book: Book) -> Book:
        saved = self._repository.save(book)
        logger.info("Saved book {} ({!r})", saved.id, saved.title)
        return saved

    def get_books_by_genre(self, genre: str) -> list[Book]:
        return self._repository.find_by_genre(genre)

    def get_book(self, book_id: int) -> Book | None:
        return self._repository.find_by_id(book_id)

    def get_recommendation(self, genre: str | None = None) -> Book | None:
        """Pick a book uniformly at random.

        Args:
            genre: Restrict candidates to this genre (case-insensitive).
                None or blank means the whole catalog.

        Returns:
            A random candidate, or None when there are no candidates
        """
        if genre is None or not genre.strip():
            candidates = self._repository.find_all()
        else:
            candidates = self._repository.find_by_genre(genre)

        if not candidates:
            logger.debug("No recommendation candidates for genre {!r}", genre)
            return None
        return self._rng.choice(candidates)
