"""Entity package: Book."""

from .entity import Book, genre_key
from .samples import SAMPLE_BOOKS
from .table import BookTable

__all__ = ["Book", "BookTable", "SAMPLE_BOOKS", "genre_key"]
