"""Book API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.bookstore.api.http.deps import get_book_service
from src.bookstore.api.http.responses import unwrap
from src.bookstore.api.http.schemas import BookCreate, BookRead, BookUpdate
from src.bookstore.core.services import RecordService
from src.bookstore.entities.service.book import Book

router = APIRouter(prefix="/api/books", tags=["books"])


@router.get("", response_model=list[BookRead])
def list_books(
    service: RecordService[Book] = Depends(get_book_service),
) -> list[Book]:
    """List all books."""
    return unwrap(service.list_all())


@router.get("/{book_id}", response_model=BookRead)
def get_book(
    book_id: int,
    service: RecordService[Book] = Depends(get_book_service),
) -> Book:
    """Get a book by ID."""
    return unwrap(service.get(book_id))


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookCreate,
    response: Response,
    service: RecordService[Book] = Depends(get_book_service),
) -> Book:
    """Create a new book."""
    created = unwrap(service.create(payload.to_entity()))
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_book(
    book_id: int,
    payload: BookUpdate,
    service: RecordService[Book] = Depends(get_book_service),
) -> Response:
    """Replace a book; the body id must match the route id."""
    unwrap(service.update(book_id, payload.to_entity()))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int,
    service: RecordService[Book] = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    unwrap(service.delete(book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
