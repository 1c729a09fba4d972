"""Conversation policy module."""

from schema_designer.core.conversation.policy import (
    GENERATE_AFTER_USER_TURNS,
    Mode,
    PromptPlan,
    decide,
    flatten_turns,
)

__all__ = ["GENERATE_AFTER_USER_TURNS", "Mode", "PromptPlan", "decide", "flatten_turns"]
