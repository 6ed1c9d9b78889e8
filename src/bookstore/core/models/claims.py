from typing import Any

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """Structured view of a verified access token."""

    raw_token: str = Field(default="", description="Original JWT token", repr=False)
    issuer: str = Field(description="Issuer")
    audience: str | list[str] = Field(description="Audience")
    subject: str = Field(description="Subject (identity email)")
    subject_id: str | None = Field(default=None, description="Identity id")
    roles: list[str] = Field(default_factory=list, description="Role names")
    jti: str | None = Field(default=None, description="JWT ID (unique token identifier)")
    issued_at: int | None = Field(default=None, description="Issued at")
    expires_at: int = Field(description="Expiration time")
    all_claims: dict[str, Any] = Field(default_factory=dict, description="Every claim")
