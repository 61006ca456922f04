"""Sample catalog seeded into empty storage."""

from bookstore.entities.book.entity import Book

SAMPLE_BOOKS: tuple[Book, ...] = (
    Book(
        title="The Kotlin Programming Language",
        author="JetBrains",
        genre="Programming",
        isbn="978-0123456789",
        published_year=2023,
    ),
    Book(
        title="Clean Code",
        author="Robert C. Martin",
        genre="Programming",
        isbn="978-0132350884",
        published_year=2008,
    ),
    Book(
        title="The Lord of the Rings",
        author="J.R.R. Tolkien",
        genre="Fantasy",
        isbn="978-0544003415",
        published_year=1954,
    ),
    Book(
        title="1984",
        author="George Orwell",
        genre="Dystopian",
        isbn="978-0451524935",
        published_year=1949,
    ),
    Book(
        title="To Kill a Mockingbird",
        author="Harper Lee",
        genre="Fiction",
        isbn="978-0061120084",
        published_year=1960,
    ),
    Book(
        title="The Pragmatic Programmer",
        author="David Thomas",
        genre="Programming",
        isbn="978-0201616224",
        published_year=1999,
    ),
)
