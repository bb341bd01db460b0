import asyncio
from types import SimpleNamespace

import pytest
from google.genai import errors as genai_errors

from juridisk.clients import CompletionProviderFactory, GeminiProvider, ProviderError
from juridisk.config import settings
from juridisk.exceptions import ProviderKeyMissingError


def gemini_response(text):
    part = SimpleNamespace(text=text)
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


def fake_gemini_client(result=None, error=None):
    calls = []

    async def generate_content(model, contents):
        calls.append({"model": model, "contents": contents})
        if error is not None:
            raise error
        return result

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
    return client, calls


def test_gemini_sends_prompt_as_single_user_turn():
    provider = GeminiProvider(api_key="test-key", default_model="gemini-test")
    provider.client, calls = fake_gemini_client(result=gemini_response("**Svar**\nTekst"))

    answer = asyncio.run(provider.generate("Spørgsmål: x\n\nSvar:"))

    assert answer == "**Svar**\nTekst"
    assert len(calls) == 1
    assert calls[0]["model"] == "gemini-test"
    (content,) = calls[0]["contents"]
    assert content.role == "user"
    assert [part.text for part in content.parts] == ["Spørgsmål: x\n\nSvar:"]


def test_gemini_unavailable_keeps_status_code():
    error = genai_errors.ServerError(
        503, {"error": {"code": 503, "message": "The model is overloaded.", "status": "UNAVAILABLE"}}
    )
    provider = GeminiProvider(api_key="test-key")
    provider.client, _ = fake_gemini_client(error=error)

    with pytest.raises(ProviderError) as exc_info:
        asyncio.run(provider.generate("x"))
    assert exc_info.value.status_code == 503


def test_gemini_response_without_text_is_an_error():
    empty = SimpleNamespace(candidates=[])
    with pytest.raises(ProviderError) as exc_info:
        GeminiProvider.extract_text(empty)
    assert exc_info.value.status_code is None


def test_gemini_part_without_text_is_an_error():
    response = gemini_response(None)
    with pytest.raises(ProviderError) as exc_info:
        GeminiProvider.extract_text(response)
    assert exc_info.value.status_code is None


def test_factory_builds_gemini_provider(monkeypatch):
    monkeypatch.setattr(settings, "llm_provider", "gemini")
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(settings, "gemini_model", "gemini-test")

    provider = CompletionProviderFactory.create_provider()

    assert isinstance(provider, GeminiProvider)
    assert provider.get_default_model() == "gemini-test"


def test_factory_reports_missing_key(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    with pytest.raises(ProviderKeyMissingError) as exc_info:
        CompletionProviderFactory.create_provider("gemini")
    assert exc_info.value.detail == "Gemini API nøgle mangler"


def test_factory_rejects_unknown_provider():
    with pytest.raises(ValueError):
        CompletionProviderFactory.create_provider("unknown")
