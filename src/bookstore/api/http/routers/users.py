"""Login and token introspection endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.bookstore.api.http.deps import get_current_claims, get_login_service
from src.bookstore.api.http.schemas import LoginRequest, MeResponse, TokenResponse
from src.bookstore.core.models.claims import TokenClaims
from src.bookstore.core.services import LoginService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: LoginRequest,
    login_service: LoginService = Depends(get_login_service),
) -> TokenResponse:
    """Exchange a username and password for a signed access token."""
    result = login_service.login(credentials.username, credentials.password)
    if not result.succeeded:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(token=result.token)


@router.get("/me", response_model=MeResponse)
def me(claims: TokenClaims = Depends(get_current_claims)) -> MeResponse:
    return MeResponse(
        subject=claims.subject,
        subject_id=claims.subject_id,
        roles=claims.roles,
        expires_at=claims.expires_at,
        claims=claims.all_claims,
    )
