from typing import Optional
import openai
from openai import AsyncOpenAI
from .base import CompletionProvider, ProviderError
import logging

logger = logging.getLogger(__name__)


class OpenAIProvider(CompletionProvider):
    """OpenAI provider implementation"""

    def __init__(self, api_key: str, default_model: str = "gpt-4o-mini"):
        """
        Initialize OpenAI provider

        Args:
            api_key: OpenAI API key
            default_model: Default model to use (e.g., "gpt-4o", "gpt-4o-mini")
        """
        self.client = AsyncOpenAI(api_key=api_key)
        self._default_model = default_model
        logger.info(f"Initialized OpenAI provider with model: {default_model}")

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """Make a single-message chat completion request"""
        model = model or self._default_model

        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.APIStatusError as e:
            logger.error(f"OpenAI API error ({e.status_code}): {e}")
            raise ProviderError(str(e), status_code=e.status_code) from e
        except openai.APIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise ProviderError(str(e)) from e

        content = response.choices[0].message.content if response.choices else None
        if content is None:
            raise ProviderError("OpenAI response contained no answer text")
        return content

    def get_default_model(self) -> str:
        return self._default_model
