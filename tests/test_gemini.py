"""Wywołanie Gemini: konfiguracja, ponowienia przy 429."""

import pytest
from google.genai import errors as genai_errors

from llm_query import gemini


class _RateLimited(genai_errors.ClientError):
    """ClientError 429 bez odpowiedzi HTTP."""

    def __init__(self, message: str) -> None:
        Exception.__init__(self, message)
        self.code = 429
        self.status = "RESOURCE_EXHAUSTED"
        self.message = message
        self.details = {}

    def __str__(self) -> str:
        return self.message


class _Response:
    def __init__(self, text):
        self.text = text


class _Models:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def generate_content(self, *, model, contents, config):
        self.calls.append((model, contents, config))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return _Response(outcome)


class _Client:
    def __init__(self, outcomes):
        self.models = _Models(outcomes)


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []
    monkeypatch.setattr(gemini.time, "sleep", recorded.append)
    return recorded


def _use_client(monkeypatch, client):
    monkeypatch.setattr(gemini, "_get_client", lambda key: client)


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("GOOGLE_GEMINI_API_KEY", raising=False)
    with pytest.raises(ValueError):
        gemini.call_gemini("prompt")


def test_returns_text_and_passes_config(monkeypatch):
    client = _Client(['{"vocab": [], "grammar": []}'])
    _use_client(monkeypatch, client)

    text = gemini.call_gemini("prompt", system_instruction="system", model="m", api_key="k")

    assert text == '{"vocab": [], "grammar": []}'
    model, contents, config = client.models.calls[0]
    assert (model, contents) == ("m", "prompt")
    assert config.system_instruction == "system"
    assert config.temperature == gemini.TEMPERATURE
    assert config.response_mime_type == "application/json"


def test_empty_response_is_error(monkeypatch):
    _use_client(monkeypatch, _Client([None]))
    with pytest.raises(RuntimeError):
        gemini.call_gemini("prompt", api_key="k")


def test_retries_rate_limit_with_suggested_delay(monkeypatch, sleeps):
    client = _Client([_RateLimited("Quota exceeded, please retry in 1.5s"), "{}"])
    _use_client(monkeypatch, client)

    assert gemini.call_gemini("prompt", api_key="k") == "{}"
    assert sleeps == [1.5]
    assert len(client.models.calls) == 2


def test_daily_quota_not_retried(monkeypatch, sleeps):
    client = _Client([_RateLimited("GenerateRequestsPerDayPerProjectPerModel exceeded")])
    _use_client(monkeypatch, client)

    with pytest.raises(RuntimeError, match="Dzienny limit"):
        gemini.call_gemini("prompt", api_key="k")
    assert sleeps == []


def test_gives_up_after_max_retries(monkeypatch, sleeps):
    client = _Client([_RateLimited("slow down")] * 3)
    _use_client(monkeypatch, client)

    with pytest.raises(RuntimeError, match="Rate-limit"):
        gemini.call_gemini("prompt", api_key="k", max_retries=2)
    assert sleeps == [10, 20]


def test_other_client_errors_propagate(monkeypatch, sleeps):
    error = _RateLimited("bad request")
    error.code = 400
    _use_client(monkeypatch, _Client([error]))

    with pytest.raises(genai_errors.ClientError):
        gemini.call_gemini("prompt", api_key="k")
    assert sleeps == []


def test_retry_delay_attribute_used_when_message_has_none(monkeypatch, sleeps):
    error = _RateLimited("slow down")
    error.retry_delay = 2
    client = _Client([error, "{}"])
    _use_client(monkeypatch, client)

    assert gemini.call_gemini("prompt", api_key="k") == "{}"
    assert sleeps == [2.0]
