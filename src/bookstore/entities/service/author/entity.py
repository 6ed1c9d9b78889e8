"""Entity: Author."""

from pydantic import Field

from src.bookstore.entities.core._base import RecordEntity


class Author(RecordEntity):
    """Author of zero or more books.

    The one-to-many link to books is held by ``Book.author_id``; use
    ``BookRepository.find_by_author`` to walk it.
    """

    first_name: str = Field(description="Author's first name")
    last_name: str = Field(description="Author's last name")
    bio: str | None = Field(default=None, description="Short biography")
