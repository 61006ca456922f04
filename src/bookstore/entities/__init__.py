"""Domain entities, one package per business concept.

Each entity package holds:
- entity.py: Domain model exposed to services and the API
- table.py: Database persistence model
"""

from .book import Book, BookTable

__all__ = ["Book", "BookTable"]
