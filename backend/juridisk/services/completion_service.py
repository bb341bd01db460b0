from typing import Callable, Optional, Sequence
from ..clients import CompletionProvider, ProviderError
from ..exceptions import ValidationError, UpstreamError, UpstreamUnavailableError
from ..schemas import ConversationTurn
from ..core.telemetry import get_tracer
from .prompts import LegalAnswerTemplate
from opentelemetry import trace
from fastapi import status
import logging

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class CompletionService:
    """Answers legal questions through a completion provider

    No retries and no caching: each call is exactly one provider request.
    """

    def __init__(self, provider_factory: Callable[[], CompletionProvider]):
        self._provider_factory = provider_factory
        self._provider: Optional[CompletionProvider] = None
        self.template = LegalAnswerTemplate()

    @property
    def provider(self) -> CompletionProvider:
        """The completion provider, created on first use"""
        if self._provider is None:
            self._provider = self._provider_factory()
        return self._provider

    def build_prompt(self, question: str, history: Optional[Sequence[ConversationTurn]] = None) -> str:
        """Build the single-turn prompt for a question and its prior turns"""
        return self.template.render({"question": question, "history": history or []})

    async def answer(self, question: Optional[str], history: Optional[Sequence[ConversationTurn]] = None) -> str:
        """
        Answer a question given the conversation so far

        Args:
            question: The current question
            history: Earlier turns held by the client, oldest first

        Returns:
            The provider's complete answer text

        Raises:
            ValidationError: The question is empty
            ProviderKeyMissingError: The provider has no API key configured
            UpstreamUnavailableError: The provider reported 503
            UpstreamError: Any other provider or network failure
        """
        if not question:
            raise ValidationError("Ingen tekst blev sendt")

        prompt = self.build_prompt(question, history)
        model = self.provider.get_default_model()

        with tracer.start_as_current_span("completion.answer") as span:
            span.set_attribute("llm.provider", self.provider.__class__.__name__)
            span.set_attribute("llm.model", model)
            span.set_attribute("completion.history_length", len(history or []))
            span.set_attribute("completion.prompt_length", len(prompt))

            try:
                answer = await self.provider.generate(prompt, model=model)
            except ProviderError as e:
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                logger.error(
                    f"Completion failed (provider={self.provider.__class__.__name__}, "
                    f"status={e.status_code}): {e}"
                )
                if e.status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
                    raise UpstreamUnavailableError() from e
                raise UpstreamError() from e

            span.set_attribute("completion.answer_length", len(answer))
            logger.debug(f"Completion succeeded with {len(answer)} characters")
            return answer
