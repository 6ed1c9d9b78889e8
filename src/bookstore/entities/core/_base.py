import uuid

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with auto-generated UUID identifier."""

    id: str = PydanticField(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )


class RecordEntity(BaseModel):
    """Base class for catalogue records whose integer id is assigned by the store."""

    id: int | None = PydanticField(
        default=None, description="Store-assigned identifier; None until created"
    )


class RecordTable(SQLModel, table=False):
    """Base table with an autoincrement integer primary key."""

    id: int | None = Field(default=None, primary_key=True)
