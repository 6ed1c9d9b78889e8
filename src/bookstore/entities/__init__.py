"""Entities organised by business concept.

Each entity package holds:
- entity.py: Domain model returned to callers
- table.py: Database persistence model
- repository.py: Data access layer

Importing this package registers every table with ``SQLModel.metadata``.
"""

from .core.identity import (
    IdentityRepository,
    IdentityUser,
    IdentityUserTable,
    RoleTable,
    UserRoleTable,
)
from .service.author import Author, AuthorRepository, AuthorTable
from .service.book import Book, BookRepository, BookTable

__all__ = [
    "Author",
    "AuthorRepository",
    "AuthorTable",
    "Book",
    "BookRepository",
    "BookTable",
    "IdentityRepository",
    "IdentityUser",
    "IdentityUserTable",
    "RoleTable",
    "UserRoleTable",
]
