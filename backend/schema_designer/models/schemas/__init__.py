"""Pydantic schemas for API validation."""

from schema_designer.models.schemas.chat import (
    ChatRequest,
    ChatResponse,
    ChatTurn,
    MessageRole,
    StoredTurn,
)
from schema_designer.models.schemas.project import (
    ProjectCreate,
    ProjectCreated,
    ProjectResponse,
    ProjectUpdate,
    ProjectUpdated,
)
from schema_designer.models.schemas.status import StatusResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ChatTurn",
    "MessageRole",
    "ProjectCreate",
    "ProjectCreated",
    "ProjectResponse",
    "ProjectUpdate",
    "ProjectUpdated",
    "StatusResponse",
    "StoredTurn",
]
