from typing import Optional
from .base import CompletionProvider
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider
from ...config import settings
from ...exceptions import ProviderKeyMissingError
import logging

logger = logging.getLogger(__name__)


class CompletionProviderFactory:
    """Factory for creating completion providers"""

    @staticmethod
    def create_provider(provider_name: Optional[str] = None) -> CompletionProvider:
        """
        Create a completion provider based on configuration

        The API key is checked here, at request time, rather than at startup.

        Args:
            provider_name: Optional provider name override. If None, uses settings.

        Returns:
            Completion provider instance

        Raises:
            ProviderKeyMissingError: If the selected provider has no API key
            ValueError: If the provider name is unknown
        """
        provider_name = provider_name or settings.llm_provider

        if provider_name == "gemini":
            if not settings.gemini_api_key:
                logger.error("GEMINI_API_KEY is not set")
                raise ProviderKeyMissingError()
            return GeminiProvider(
                api_key=settings.gemini_api_key,
                default_model=settings.gemini_model
            )

        elif provider_name == "openai":
            if not settings.openai_api_key:
                logger.error("OPENAI_API_KEY is not set")
                raise ProviderKeyMissingError("OpenAI API nøgle mangler")
            return OpenAIProvider(
                api_key=settings.openai_api_key,
                default_model=settings.openai_model
            )

        else:
            raise ValueError(f"Unknown completion provider: {provider_name}. Supported providers: gemini, openai")
