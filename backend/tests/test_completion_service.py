import asyncio
from types import SimpleNamespace

import pytest

from conftest import FakeProvider
from juridisk.clients import GeminiProvider, ProviderError
from juridisk.exceptions import (
    ProviderKeyMissingError,
    UpstreamError,
    UpstreamUnavailableError,
    ValidationError,
)
from juridisk.schemas import ConversationTurn
from juridisk.services import CompletionService

INSTRUCTION = (
    "Du er ekspert i juridisk ret og skal give kort besvarelse af følgende spørgsmål. "
    "Husk konteksten fra tidligere spørgsmål i samtalen.\n\n"
)


def test_prompt_without_history():
    service = CompletionService(FakeProvider)
    assert service.build_prompt("Hvad er hævd?") == INSTRUCTION + "Spørgsmål: Hvad er hævd?\n\nSvar:"


def test_prompt_with_history():
    service = CompletionService(FakeProvider)
    history = [
        ConversationTurn(text="Hvad er hævd?", is_user=True),
        ConversationTurn(text="Erhvervelse ved brug.", is_user=False),
    ]
    assert service.build_prompt("Hvor lang tid tager det?", history) == (
        INSTRUCTION
        + "Tidligere samtale:\n"
        + "Bruger: Hvad er hævd?\n"
        + "AI: Erhvervelse ved brug.\n"
        + "\nNuværende spørgsmål: Hvor lang tid tager det?\n\nSvar:"
    )


def test_answer_sends_one_request_with_default_model():
    provider = FakeProvider(answer="Kort svar")
    service = CompletionService(lambda: provider)

    assert asyncio.run(service.answer("Spørgsmål")) == "Kort svar"
    assert provider.prompts == [INSTRUCTION + "Spørgsmål: Spørgsmål\n\nSvar:"]


@pytest.mark.parametrize("question", [None, ""])
def test_answer_rejects_empty_question(question):
    provider = FakeProvider()
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(CompletionService(lambda: provider).answer(question))
    assert exc_info.value.detail == "Ingen tekst blev sendt"
    assert provider.prompts == []


@pytest.mark.parametrize("status_code,expected", [
    (503, UpstreamUnavailableError),
    (500, UpstreamError),
    (429, UpstreamError),
    (None, UpstreamError),
])
def test_provider_errors_are_mapped(status_code, expected):
    provider = FakeProvider(error=ProviderError("failed", status_code=status_code))
    with pytest.raises(expected):
        asyncio.run(CompletionService(lambda: provider).answer("Spørgsmål"))
    assert len(provider.prompts) == 1


def test_empty_question_is_rejected_before_provider_is_built():
    def missing_key():
        raise ProviderKeyMissingError()

    with pytest.raises(ValidationError):
        asyncio.run(CompletionService(missing_key).answer(""))

    with pytest.raises(ProviderKeyMissingError):
        asyncio.run(CompletionService(missing_key).answer("Spørgsmål"))


def test_text_less_gemini_answer_maps_to_upstream_error():
    provider = GeminiProvider(api_key="test-key")
    part = SimpleNamespace(text=None, function_call=SimpleNamespace(name="lookup"))
    response = SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])

    async def generate_content(model, contents):
        return response

    provider.client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))

    with pytest.raises(UpstreamError):
        asyncio.run(CompletionService(lambda: provider).answer("Spørgsmål"))
