import secrets
import time
from datetime import UTC, datetime

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def generate_object_id() -> str:
    """Return a 24-character hex identifier: 4-byte epoch seconds + 8 random bytes."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class with an auto-generated object identifier."""

    id: str = PydanticField(
        default_factory=generate_object_id,
        description="Unique identifier for the entity",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)
    updated_at: datetime = PydanticField(default_factory=utc_now)


class EntityTable(SQLModel, table=False):
    """Base table class with an object identifier primary key and timestamps."""

    id: str = Field(
        primary_key=True,
        default_factory=generate_object_id,
        max_length=24,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now, nullable=False)
