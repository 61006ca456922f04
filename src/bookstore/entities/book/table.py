"""Book database table model."""

from sqlmodel import Field, SQLModel


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "books"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    author: str
    genre: str
    genre_key: str = Field(index=True, description="Case-insensitive genre lookup key")
    isbn: str | None = None
    published_year: int | None = None
