"""Entity: Book."""

from pydantic import Field

from src.bookstore.entities.core._base import RecordEntity


class Book(RecordEntity):
    """Book record, optionally linked to one author."""

    title: str = Field(description="Title")
    year: int | None = Field(default=None, description="Publication year")
    isbn: str | None = Field(default=None, description="ISBN; unique when present")
    summary: str | None = Field(default=None, description="Short summary")
    image: str | None = Field(default=None, description="Cover image reference")
    price: float | None = Field(default=None, description="Price")
    author_id: int | None = Field(default=None, description="Owning author, if any")
