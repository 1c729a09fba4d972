"""LLM integration module."""

from schema_designer.core.llm.provider import LLMProvider, create_llm_provider

__all__ = ["LLMProvider", "create_llm_provider"]
