"""Entity: Book."""

from pydantic import Field

from bookstore.entities._base import Entity


class Book(Entity):
    """Book entity representing a title in the catalog.

    ``id`` stays ``None`` until a repository stores the book.
    """

    id: int | None = Field(default=None, description="Identifier assigned by storage")
    title: str = Field(description="Title")
    author: str = Field(description="Author")
    genre: str = Field(description="Genre")
    isbn: str | None = Field(default=None, description="ISBN")
    published_year: int | None = Field(default=None, description="Publication year")

    def has_required_fields(self) -> bool:
        """Whether title, author and genre are all non-blank."""
        return all(
            value.strip() for value in (self.title, self.author, self.genre)
        )


def genre_key(genre: str) -> str:
    """Case-insensitive lookup key for a genre.

    Each character is mapped on its own, first to upper then to lower case,
    so the key has the same length as the genre. Characters whose mapping
    expands to several (``ß`` to ``SS``) are kept as they are, which keeps
    "Straße" and "STRASSE" apart.
    """
    chars = []
    for char in genre:
        upper = char.upper()
        if len(upper) != 1:
            upper = char
        lower = upper.lower()
        chars.append(lower if len(lower) == 1 else upper)
    return "".join(chars)
