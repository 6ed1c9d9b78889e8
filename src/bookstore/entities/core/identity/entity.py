"""Identity user domain entity."""

from datetime import datetime

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class IdentityUser(Entity):
    """Account known to the identity store.

    ``roles`` is populated by the repository from the user-role link table and
    is read-only from the point of view of the token issuer.
    """

    username: str = Field(description="Login name")
    email: str = Field(description="Email address; becomes the token subject")
    password_hash: str = Field(description="bcrypt hash of the password", repr=False)
    is_active: bool = Field(default=True, description="Disabled accounts cannot sign in")
    lockout_end: datetime | None = Field(
        default=None, description="Sign-in is refused until this UTC instant"
    )
    roles: list[str] = Field(default_factory=list, description="Assigned role names")
