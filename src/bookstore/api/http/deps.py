"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.exceptions import TokenVerificationError
from src.bookstore.core.models.claims import TokenClaims
from src.bookstore.core.services import (
    CredentialVerifier,
    JwtGeneratorService,
    JwtVerificationService,
    LoginService,
    RecordService,
)
from src.bookstore.entities.service.author import Author, AuthorRepository
from src.bookstore.entities.service.book import Book, BookRepository


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_token_issuer(request: Request) -> JwtGeneratorService:
    """Get the JWT generator service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.token_issuer


def get_token_verifier(request: Request) -> JwtVerificationService:
    """Get the JWT verification service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.token_verifier


def get_author_service(db: Session = Depends(get_db_session)) -> RecordService[Author]:
    return RecordService(AuthorRepository(db))


def get_book_service(db: Session = Depends(get_db_session)) -> RecordService[Book]:
    return RecordService(BookRepository(db))


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(db)


def get_login_service(
    db: Session = Depends(get_db_session),
    token_issuer: JwtGeneratorService = Depends(get_token_issuer),
) -> LoginService:
    return LoginService(CredentialVerifier(db), token_issuer)


def get_current_claims(
    request: Request,
    verifier: JwtVerificationService = Depends(get_token_verifier),
) -> TokenClaims:
    """Authenticate the request using a Bearer token issued by this service."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing Bearer token")

    token = auth_header.split(" ", 1)[1].strip()
    try:
        return verifier.verify(token)
    except TokenVerificationError as e:
        raise HTTPException(status_code=401, detail="Invalid or expired token") from e
