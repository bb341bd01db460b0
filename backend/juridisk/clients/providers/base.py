from abc import ABC, abstractmethod
from typing import Optional


class ProviderError(Exception):
    """A completion provider call failed

    status_code carries the HTTP status reported by the provider, or None
    when the request never produced a response (network failure, malformed
    payload).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class CompletionProvider(ABC):
    """Abstract interface for single-turn text completion providers"""

    @abstractmethod
    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """
        Send one prompt as the sole content of a single-turn request

        Args:
            prompt: Complete prompt text
            model: Model name (uses default if None)

        Returns:
            The answer text

        Raises:
            ProviderError: On any provider or network failure
        """
        pass

    @abstractmethod
    def get_default_model(self) -> str:
        """Get the default model for this provider"""
        pass
