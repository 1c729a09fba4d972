"""Chat schemas for API validation."""

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MessageRole(str, enum.Enum):
    """Message role enum."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatTurn(BaseModel):
    """One message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str


class StoredTurn(BaseModel):
    """A conversation turn saved with a project.

    Keys besides role and content (client-side ids, timestamps) are kept
    as sent.
    """

    model_config = ConfigDict(extra="allow")

    role: MessageRole
    content: str


class ChatRequest(BaseModel):
    """Schema for a chat request."""

    messages: list[ChatTurn] = Field(..., description="Prior turns in conversational order")


class ChatResponse(BaseModel):
    """Schema for the assistant reply."""

    content: str
    role: Literal["assistant"] = "assistant"
