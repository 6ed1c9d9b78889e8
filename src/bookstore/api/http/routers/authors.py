"""Author API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.bookstore.api.http.deps import (
    get_author_service,
    get_book_repository,
)
from src.bookstore.api.http.responses import unwrap
from src.bookstore.api.http.schemas import (
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
    BookRead,
)
from src.bookstore.core.services import RecordService
from src.bookstore.entities.service.author import Author
from src.bookstore.entities.service.book import Book, BookRepository

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=list[AuthorRead])
def list_authors(
    service: RecordService[Author] = Depends(get_author_service),
) -> list[Author]:
    """List all authors."""
    return unwrap(service.list_all())


@router.get("/{author_id}", response_model=AuthorRead)
def get_author(
    author_id: int,
    service: RecordService[Author] = Depends(get_author_service),
) -> Author:
    """Get an author by ID."""
    return unwrap(service.get(author_id))


@router.get("/{author_id}/books", response_model=list[BookRead])
def list_author_books(
    author_id: int,
    service: RecordService[Author] = Depends(get_author_service),
    books: BookRepository = Depends(get_book_repository),
) -> list[Book]:
    """List the books linked to an author."""
    unwrap(service.get(author_id))
    return books.find_by_author(author_id)


@router.post("", response_model=AuthorRead, status_code=status.HTTP_201_CREATED)
def create_author(
    payload: AuthorCreate,
    response: Response,
    service: RecordService[Author] = Depends(get_author_service),
) -> Author:
    """Create a new author."""
    created = unwrap(service.create(payload.to_entity()))
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_author(
    author_id: int,
    payload: AuthorUpdate,
    service: RecordService[Author] = Depends(get_author_service),
) -> Response:
    """Replace an author; the body id must match the route id."""
    unwrap(service.update(author_id, payload.to_entity()))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(
    author_id: int,
    service: RecordService[Author] = Depends(get_author_service),
) -> Response:
    """Delete an author. Their books stay, unlinked."""
    unwrap(service.delete(author_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
