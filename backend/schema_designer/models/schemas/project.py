"""Project schemas for API validation."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from schema_designer.models.schemas.chat import StoredTurn


def as_utc(value: datetime) -> datetime:
    """Timestamps in UTC; the store may return them without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectCreate(CamelModel):
    """Schema for creating a project."""

    name: str
    db_schema: Any = Field(None, alias="schema")
    schema_type: str
    conversation: list[StoredTurn] = Field(default_factory=list)


class ProjectUpdate(CamelModel):
    """Schema for updating a project. Only name and schema are writable."""

    name: str
    db_schema: Any = Field(None, alias="schema")


class ProjectResponse(CamelModel):
    """Schema for project response."""

    id: str
    name: str
    db_schema: Any = Field(None, alias="schema")
    schema_type: str
    conversation: list[StoredTurn]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, project) -> "ProjectResponse":
        """Build the public view of a stored project."""
        return cls(
            id=project.id,
            name=project.name,
            db_schema=project.db_schema,
            schema_type=project.schema_type,
            conversation=project.conversation or [],
            created_at=as_utc(project.created_at),
            updated_at=as_utc(project.updated_at),
        )


class ProjectCreated(BaseModel):
    """Schema for project creation response."""

    id: str


class ProjectUpdated(BaseModel):
    """Schema for project update response."""

    success: bool = True
