import random
from dataclasses import dataclass

from bookstore.core.services import DbSessionService
from bookstore.core.storage import InMemoryBookRepository


@dataclass
class ApplicationDependencies:
    """Process-wide collaborators built at startup.

    Exactly one of ``book_repository`` (memory backend) and
    ``database_service`` (database backend) is set.
    """

    rng: random.Random
    book_repository: InMemoryBookRepository | None = None
    database_service: DbSessionService | None = None
