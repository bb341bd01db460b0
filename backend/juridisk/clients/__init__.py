from .providers import (
    CompletionProvider,
    ProviderError,
    GeminiProvider,
    OpenAIProvider,
    CompletionProviderFactory,
)

__all__ = [
    "CompletionProvider",
    "ProviderError",
    "GeminiProvider",
    "OpenAIProvider",
    "CompletionProviderFactory",
]
