from .base import CompletionProvider, ProviderError
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider
from .factory import CompletionProviderFactory

__all__ = [
    "CompletionProvider",
    "ProviderError",
    "GeminiProvider",
    "OpenAIProvider",
    "CompletionProviderFactory",
]
