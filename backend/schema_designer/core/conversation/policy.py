"""Conversation policy: clarify or generate, and prompt assembly.

The decision depends only on how many user turns the conversation holds.
Fewer than ``GENERATE_AFTER_USER_TURNS`` keeps the assistant asking one
clarifying question per turn; from that point on it is told to produce the
final schema.

The hosted model takes a single text prompt, so the instruction and the
transcript are flattened into ``"<role>: <content>"`` lines in turn order.
"""

import enum
from dataclasses import dataclass
from typing import Iterable, Sequence

from schema_designer.core.conversation.prompts import CLARIFY_INSTRUCTION, GENERATE_INSTRUCTION
from schema_designer.models.schemas.chat import ChatTurn, MessageRole

GENERATE_AFTER_USER_TURNS = 3


class Mode(str, enum.Enum):
    """What the assistant is asked to do next."""

    CLARIFY = "clarify"
    GENERATE = "generate"


@dataclass(frozen=True)
class PromptPlan:
    """Outcome of a policy decision."""

    mode: Mode
    instruction: str
    turns: tuple[ChatTurn, ...]

    @property
    def prompt(self) -> str:
        """The full transcript, system instruction first, as one text prompt."""
        return flatten_turns(self.turns)


def count_user_turns(turns: Iterable[ChatTurn]) -> int:
    return sum(1 for turn in turns if turn.role == MessageRole.USER)


def select_mode(user_turn_count: int) -> Mode:
    if user_turn_count >= GENERATE_AFTER_USER_TURNS:
        return Mode.GENERATE
    return Mode.CLARIFY


def flatten_turns(turns: Iterable[ChatTurn]) -> str:
    """Serialize turns as ``role: content`` lines joined by newlines."""
    return "\n".join(f"{turn.role.value}: {turn.content}" for turn in turns)


def decide(turns: Sequence[ChatTurn]) -> PromptPlan:
    """
    Choose the next instruction for a conversation and build its prompt.

    Args:
        turns: Prior chat turns in conversational order

    Returns:
        PromptPlan with the instruction prepended as a system turn
    """
    mode = select_mode(count_user_turns(turns))
    instruction = GENERATE_INSTRUCTION if mode == Mode.GENERATE else CLARIFY_INSTRUCTION
    system_turn = ChatTurn(role=MessageRole.SYSTEM, content=instruction)

    return PromptPlan(mode=mode, instruction=instruction, turns=(system_turn, *turns))
