"""Unit tests for the book service."""

import random
from collections import Counter
from unittest.mock import Mock

import pytest

from bookstore.core.services import BookService
from bookstore.core.storage import BookRepository, InMemoryBookRepository
from bookstore.entities.book import SAMPLE_BOOKS, Book


@pytest.fixture
def sample_books() -> list[Book]:
    return [
        Book(id=1, title="Test Book 1", author="Author 1", genre="Fiction"),
        Book(id=2, title="Test Book 2", author="Author 2", genre="Programming"),
        Book(id=3, title="Test Book 3", author="Author 3", genre="Fiction"),
    ]


@pytest.fixture
def mock_repository() -> Mock:
    return Mock(spec=BookRepository)


class TestPassThroughOperations:
    """Operations that forward straight to the repository."""

    def test_get_all_books(self, mock_repository: Mock, sample_books):
        mock_repository.find_all.return_value = sample_books

        result = BookService(mock_repository).get_all_books()

        assert result == sample_books
        mock_repository.find_all.assert_called_once_with()

    def test_get_all_books_empty(self, mock_repository: Mock):
        mock_repository.find_all.return_value = []

        assert BookService(mock_repository).get_all_books() == []

    def test_add_book(self, mock_repository: Mock):
        new_book = Book(title="New Book", author="New Author", genre="New Genre")
        saved_book = new_book.model_copy(update={"id": 4})
        mock_repository.save.return_value = saved_book

        result = BookService(mock_repository).add_book(new_book)

        assert result == saved_book
        mock_repository.save.assert_called_once_with(new_book)

    def test_add_book_does_not_validate(self, mock_repository: Mock):
        """Blank fields are the API layer's concern."""
        blank = Book(title="", author="", genre="")
        mock_repository.save.return_value = blank.model_copy(update={"id": 1})

        assert BookService(mock_repository).add_book(blank).id == 1

    def test_get_books_by_genre(self, mock_repository: Mock, sample_books):
        fiction = [b for b in sample_books if b.genre == "Fiction"]
        mock_repository.find_by_genre.return_value = fiction

        result = BookService(mock_repository).get_books_by_genre("Fiction")

        assert result == fiction
        mock_repository.find_by_genre.assert_called_once_with("Fiction")

    def test_get_book(self, mock_repository: Mock, sample_books):
        mock_repository.find_by_id.return_value = sample_books[1]

        assert BookService(mock_repository).get_book(2) == sample_books[1]
        mock_repository.find_by_id.assert_called_once_with(2)


class TestGetRecommendation:
    @pytest.mark.parametrize("genre", [None, "", "   "])
    def test_without_genre_uses_all_books(self, mock_repository: Mock, sample_books, genre):
        mock_repository.find_all.return_value = sample_books

        result = BookService(mock_repository).get_recommendation(genre)

        assert result in sample_books
        mock_repository.find_all.assert_called_once_with()
        mock_repository.find_by_genre.assert_not_called()

    def test_with_genre_uses_genre_books(self, mock_repository: Mock, sample_books):
        fiction = [b for b in sample_books if b.genre == "Fiction"]
        mock_repository.find_by_genre.return_value = fiction

        result = BookService(mock_repository).get_recommendation("Fiction")

        assert result in fiction
        mock_repository.find_by_genre.assert_called_once_with("Fiction")
        mock_repository.find_all.assert_not_called()

    def test_empty_catalog(self, mock_repository: Mock):
        mock_repository.find_all.return_value = []

        assert BookService(mock_repository).get_recommendation() is None

    def test_unknown_genre(self, mock_repository: Mock):
        mock_repository.find_by_genre.return_value = []

        assert BookService(mock_repository).get_recommendation("NonExistent") is None

    def test_genre_is_case_insensitive(self):
        service = BookService(InMemoryBookRepository(SAMPLE_BOOKS))

        for _ in range(20):
            assert service.get_recommendation("programming").genre == "Programming"

    def test_seeded_random_is_reproducible(self):
        repository = InMemoryBookRepository(SAMPLE_BOOKS)
        first = BookService(repository, rng=random.Random(1234))
        second = BookService(repository, rng=random.Random(1234))

        picks_a = [first.get_recommendation().id for _ in range(10)]
        picks_b = [second.get_recommendation().id for _ in range(10)]

        assert picks_a == picks_b

    def test_every_candidate_can_be_picked(self):
        service = BookService(
            InMemoryBookRepository(SAMPLE_BOOKS), rng=random.Random(7)
        )

        picks = Counter(service.get_recommendation().id for _ in range(600))

        assert set(picks) == {1, 2, 3, 4, 5, 6}
