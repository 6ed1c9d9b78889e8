"""Author database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Relationship

from src.bookstore.entities.core._base import RecordTable

if TYPE_CHECKING:
    from src.bookstore.entities.service.book.table import BookTable


class AuthorTable(RecordTable, table=True):
    """Database persistence model for authors."""

    __tablename__ = "authors"

    first_name: str
    last_name: str
    bio: str | None = None

    books: list["BookTable"] = Relationship(back_populates="author")
