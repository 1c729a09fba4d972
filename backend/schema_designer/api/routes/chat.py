"""Chat API routes."""

from fastapi import APIRouter, Depends

from schema_designer.api.deps import get_schema_assistant
from schema_designer.models.schemas import ChatRequest, ChatResponse
from schema_designer.services import SchemaDesignAssistant

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    assistant: SchemaDesignAssistant = Depends(get_schema_assistant),
):
    """
    Get the assistant's next turn for a conversation.

    With fewer than three user turns the assistant asks one clarifying
    question; from the third user turn on it returns a complete schema.
    """
    return await assistant.reply(request.messages)
