"""LiteLLM-backed text generation provider."""

import asyncio
import logging
from typing import Any, Optional

from litellm import acompletion

from schema_designer.core.config import Settings
from schema_designer.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class LLMProvider:
    """Single-shot, non-streaming completion client."""

    def __init__(
        self,
        provider: str = "gemini",
        model: str = "gemini-2.0-flash",
        api_key: Optional[str] = None,
        timeout: float = 60.0,
        **config: Any,
    ):
        """
        Initialize the provider.

        Args:
            provider: LiteLLM provider id (gemini, openai, anthropic, ...)
            model: Model name within the provider
            api_key: Credential passed with every call
            timeout: Seconds to wait for a completion before giving up
            **config: Extra completion parameters (temperature, max_tokens, ...)
        """
        self.provider = provider
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self.config = config

    def _build_model_name(self) -> str:
        """Model name in LiteLLM's ``provider/model`` form."""
        if self.provider == "openai" or self.model.startswith(f"{self.provider}/"):
            return self.model
        return f"{self.provider}/{self.model}"

    async def complete(self, prompt: str) -> str:
        """
        Generate text for a single prompt.

        Args:
            prompt: The full prompt text

        Returns:
            Generated text, verbatim

        Raises:
            UpstreamError: if the call fails, times out or returns no content
        """
        try:
            response = await asyncio.wait_for(
                acompletion(
                    model=self._build_model_name(),
                    messages=[{"role": "user", "content": prompt}],
                    api_key=self.api_key,
                    stream=False,
                    **self.config,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error("LLM call timed out after %ss", self.timeout)
            raise UpstreamError(f"LLM generation timed out after {self.timeout:g}s")
        except Exception as e:
            logger.error("Error generating response: %s", e)
            raise UpstreamError(f"LLM generation failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if content is None:
            raise UpstreamError("LLM returned no content")
        return content


def create_llm_provider(settings: Settings) -> Optional[LLMProvider]:
    """
    Build the provider from configuration.

    Returns:
        LLMProvider, or None if no credential is configured
    """
    if not settings.gemini_api_key:
        return None

    return LLMProvider(
        provider=settings.llm_provider,
        model=settings.llm_model,
        api_key=settings.gemini_api_key,
        timeout=settings.llm_timeout_seconds,
    )
