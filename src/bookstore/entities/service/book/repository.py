"""Data-access layer for books."""

from sqlmodel import select

from src.bookstore.entities.core.repository import Repository
from src.bookstore.entities.service.book.entity import Book
from src.bookstore.entities.service.book.table import BookTable


class BookRepository(Repository[Book, BookTable]):
    entity_type = Book
    table_type = BookTable

    def find_by_author(self, author_id: int) -> list[Book]:
        statement = (
            select(BookTable).where(BookTable.author_id == author_id).order_by(BookTable.id)
        )
        rows = self._run(lambda: self._session.exec(statement).all())
        return [self._to_entity(row) for row in rows]
