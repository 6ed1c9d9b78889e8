"""Wire models for the HTTP API and their mapping to domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.bookstore.entities.service.author import Author
from src.bookstore.entities.service.book import Book


class AuthorCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    bio: str | None = Field(default=None, max_length=2000)

    def to_entity(self) -> Author:
        return Author(**self.model_dump())


class AuthorUpdate(AuthorCreate):
    id: int

    def to_entity(self) -> Author:
        return Author(**self.model_dump())


class AuthorRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    bio: str | None = None


class BookCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=500)
    year: int | None = None
    isbn: str | None = Field(default=None, max_length=50)
    summary: str | None = Field(default=None, max_length=2000)
    image: str | None = None
    price: float | None = Field(default=None, ge=0)
    author_id: int | None = None

    def to_entity(self) -> Book:
        return Book(**self.model_dump())


class BookUpdate(BookCreate):
    id: int

    def to_entity(self) -> Book:
        return Book(**self.model_dump())


class BookRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    year: int | None = None
    isbn: str | None = None
    summary: str | None = None
    image: str | None = None
    price: float | None = None
    author_id: int | None = None


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)


class TokenResponse(BaseModel):
    token: str


class MeResponse(BaseModel):
    """Claims of the bearer token presented on the request."""

    subject: str
    subject_id: str | None
    roles: list[str]
    expires_at: int
    claims: dict[str, Any]
