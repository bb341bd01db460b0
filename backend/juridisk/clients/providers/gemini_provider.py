from typing import Optional
import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from .base import CompletionProvider, ProviderError
import logging

logger = logging.getLogger(__name__)


class GeminiProvider(CompletionProvider):
    """Google Gemini provider using the google-genai SDK"""

    def __init__(self, api_key: str, default_model: str = "gemini-2.0-flash"):
        """
        Initialize Gemini provider

        Args:
            api_key: Gemini API key
            default_model: Default model to use
        """
        self.client = genai.Client(api_key=api_key)
        self._default_model = default_model
        logger.info(f"Initialized Gemini provider with model: {default_model}")

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """Make a single-turn generateContent request"""
        model = model or self._default_model
        contents = [types.Content(role="user", parts=[types.Part(text=prompt)])]

        try:
            response = await self.client.aio.models.generate_content(model=model, contents=contents)
        except genai_errors.APIError as e:
            logger.error(f"Gemini API error ({e.code}): {e}")
            raise ProviderError(str(e), status_code=e.code) from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini request failed: {e}")
            raise ProviderError(str(e)) from e

        return self.extract_text(response)

    @staticmethod
    def extract_text(response) -> str:
        """Return the first candidate's first text part"""
        try:
            text = response.candidates[0].content.parts[0].text
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Gemini response had no text part: {e}")
            raise ProviderError("Gemini response contained no answer text") from e
        # Function-call, thought and some blocked parts carry no text
        if text is None:
            logger.error("Gemini response's first part had no text")
            raise ProviderError("Gemini response contained no answer text")
        return text

    def get_default_model(self) -> str:
        return self._default_model
