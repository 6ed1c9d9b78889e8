"""Identity store database table models."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String
from sqlmodel import Field, SQLModel


class IdentityUserTable(SQLModel, table=True):
    """Persistence model for accounts."""

    __tablename__ = "identity_users"

    id: str = Field(primary_key=True)
    username: str = Field(sa_column=Column(String(256), nullable=False, unique=True, index=True))
    email: str = Field(sa_column=Column(String(256), nullable=False, index=True))
    password_hash: str
    is_active: bool = True
    lockout_end: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )


class RoleTable(SQLModel, table=True):
    """Persistence model for role names."""

    __tablename__ = "identity_roles"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(sa_column=Column(String(256), nullable=False, unique=True))


class UserRoleTable(SQLModel, table=True):
    """Link table assigning roles to accounts."""

    __tablename__ = "identity_user_roles"

    user_id: str = Field(foreign_key="identity_users.id", primary_key=True, ondelete="CASCADE")
    role_id: int = Field(foreign_key="identity_roles.id", primary_key=True, ondelete="CASCADE")
