"""Data-access layer for authors."""

from src.bookstore.entities.core.repository import Repository
from src.bookstore.entities.service.author.entity import Author
from src.bookstore.entities.service.author.table import AuthorTable


class AuthorRepository(Repository[Author, AuthorTable]):
    """Repository for authors.

    Deleting an author detaches its books (``author_id`` set to NULL) in the
    same commit; the books themselves are kept.
    """

    entity_type = Author
    table_type = AuthorTable

    def _stage_delete(self, row: AuthorTable) -> None:
        for book in list(row.books):
            book.author_id = None
        super()._stage_delete(row)
