"""Book API router."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from loguru import logger

from bookstore.api.http.deps import get_book_service
from bookstore.core.services import BookService
from bookstore.entities.book import Book

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[Book])
def list_books(
    genre: str | None = None,
    service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List all books, optionally only those of one genre."""
    if genre is not None and genre.strip():
        return service.get_books_by_genre(genre)
    return service.get_all_books()


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Blank or invalid field"}},
)
def create_book(
    book: Book,
    service: BookService = Depends(get_book_service),
) -> Book | Response:
    """Add a book to the catalog."""
    if not book.has_required_fields():
        logger.info("Rejected book with blank title, author or genre")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    if book.id is not None and book.id <= 0:
        logger.info("Rejected book with non-positive id {}", book.id)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return service.add_book(book)


@router.get("/recommendation", response_model=Book)
def get_recommendation(
    genre: str | None = None,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Recommend a random book, optionally from one genre."""
    recommendation = service.get_recommendation(genre)
    if recommendation is None:
        raise HTTPException(status_code=404, detail="No book to recommend")
    return recommendation


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book by ID."""
    book = service.get_book(book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book
