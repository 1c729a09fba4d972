"""Schema design assistant: one conversation step against the language model."""

import logging
from typing import Sequence

from schema_designer.core.conversation import decide
from schema_designer.core.conversation.policy import count_user_turns
from schema_designer.core.llm import LLMProvider
from schema_designer.models.schemas import ChatResponse, ChatTurn

logger = logging.getLogger(__name__)


class SchemaDesignAssistant:
    """Turns a conversation into the assistant's next reply.

    The reply is the model output as-is. Nothing is persisted here; saving a
    generated schema is a separate project call made by the client.
    """

    def __init__(self, llm: LLMProvider):
        self.llm = llm

    async def reply(self, turns: Sequence[ChatTurn]) -> ChatResponse:
        plan = decide(turns)
        logger.info(
            "Chat step in %s mode (%d user turns)", plan.mode.value, count_user_turns(turns)
        )

        content = await self.llm.complete(plan.prompt)
        return ChatResponse(content=content)
