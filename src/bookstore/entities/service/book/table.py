"""Book database table model."""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from src.bookstore.entities.core._base import RecordTable

if TYPE_CHECKING:
    from src.bookstore.entities.service.author.table import AuthorTable


class BookTable(RecordTable, table=True):
    """Database persistence model for books."""

    __tablename__ = "books"

    title: str
    year: int | None = None
    isbn: str | None = Field(default=None, unique=True)
    summary: str | None = None
    image: str | None = None
    price: float | None = None
    author_id: int | None = Field(
        default=None, foreign_key="authors.id", ondelete="SET NULL", index=True
    )

    author: Optional["AuthorTable"] = Relationship(back_populates="books")
