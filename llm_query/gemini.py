"""
llm_query/gemini.py — klient Gemini dla analizy słownictwa artykułów.

Zmienne środowiskowe:
  GOOGLE_GEMINI_API_KEY   klucz API (wymagany)
  GOOGLE_GEMINI_MODEL     model (domyślnie gemini-2.5-flash)

Opcjonalnie plik .env w katalogu głównym projektu:
  GOOGLE_GEMINI_API_KEY=AIza...

Model odpowiada wyłącznie JSON-em (response_mime_type), temperatura jest
niska, żeby lista słownictwa była powtarzalna między wywołaniami.

Publiczne API:
  call_gemini(prompt, system_instruction, model, api_key, max_retries) -> str
"""

from __future__ import annotations

import functools
import os
import pathlib
import re
import sys
import time
from typing import Protocol, cast

from dotenv import load_dotenv
from google import genai as _genai
from google.genai import errors as _genai_errors
from google.genai import types as _genai_types

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env", override=True)


_ENV_KEY        = "GOOGLE_GEMINI_API_KEY"
_ENV_MODEL      = "GOOGLE_GEMINI_MODEL"
DEFAULT_MODEL   = os.getenv(_ENV_MODEL) or "gemini-2.5-flash"
DEFAULT_RETRIES = 3
TEMPERATURE     = 0.3

_RATE_LIMITED = 429
_BACKOFF_BASE = 5  # s; kolejne próby: 10, 20, 40...

# "Please retry in 18.8s" w treści błędu 429
_SUGGESTED_DELAY_RE = re.compile(r"retry[^\d]*(\d+(?:\.\d+)?)\s*s", re.IGNORECASE)
# Nazwa limitu dziennego w szczegółach błędu, np. GenerateRequestsPerDayPerProjectPerModel
_DAILY_QUOTA_MARKER = "PerDay"


class _AnalysisResponse(Protocol):
    text: str | None


class _ModelsAPI(Protocol):
    def generate_content(
        self, *, model: str, contents: str, config: _genai_types.GenerateContentConfig
    ) -> _AnalysisResponse:
        ...


@functools.lru_cache(maxsize=4)
def _get_client(api_key: str) -> "_genai.Client":
    return _genai.Client(api_key=api_key)


def _build_config(system_instruction: str | None) -> _genai_types.GenerateContentConfig:
    return _genai_types.GenerateContentConfig(
        system_instruction=system_instruction,
        temperature=TEMPERATURE,
        response_mime_type="application/json",
    )


def _suggested_delay(error: Exception) -> float | None:
    """Czas oczekiwania podany przez API (w treści błędu lub jako atrybut)."""
    m = _SUGGESTED_DELAY_RE.search(str(error))
    if m:
        return float(m.group(1))
    delay = getattr(error, "retry_delay", None)
    return float(delay) if delay is not None else None


def _backoff_or_raise(
    error: _genai_errors.ClientError, attempt: int, max_retries: int, model: str
) -> float:
    """
    Decyduje, czy błąd 429 warto ponowić; zwraca czas oczekiwania w sekundach.

    Wyczerpany limit dzienny i przekroczona liczba prób kończą się
    RuntimeError; inne błędy klienta są rzucane dalej bez zmian.
    """
    if error.code != _RATE_LIMITED:
        raise error
    if _DAILY_QUOTA_MARKER in str(error):
        raise RuntimeError(
            f"Dzienny limit zapytań dla modelu {model} wyczerpany. "
            f"Sprawdź plan i billing: https://ai.dev/rate-limit\n"
            f"Szczegóły API: {error}"
        ) from error
    if attempt > max_retries:
        raise RuntimeError(
            f"Rate-limit po {max_retries} próbach. Spróbuj później."
        ) from error
    return _suggested_delay(error) or (2 ** attempt * _BACKOFF_BASE)


def call_gemini(
    prompt: str,
    system_instruction: str | None = None,
    model: str = DEFAULT_MODEL,
    api_key: str | None = None,
    max_retries: int = DEFAULT_RETRIES,
) -> str:
    """
    Wysyła prompt analizy i zwraca surowy tekst JSON odpowiedzi modelu.

    Odpowiedź nie jest tu walidowana; robi to llm_query.analysis.

    Raises:
        ValueError:                   Brak klucza API.
        RuntimeError:                 Pusta odpowiedź, limit dzienny lub wyczerpane ponowienia.
        google.genai.errors.APIError: Inny błąd API.
    """
    key = api_key or os.getenv(_ENV_KEY)
    if not key:
        raise ValueError(
            f"Brak klucza Gemini API. "
            f"Ustaw zmienną środowiskową {_ENV_KEY} lub przekaż api_key."
        )

    models_api = cast(_ModelsAPI, _get_client(key).models)
    config = _build_config(system_instruction)

    attempt = 0
    while True:
        attempt += 1
        try:
            response = models_api.generate_content(model=model, contents=prompt, config=config)
        except _genai_errors.ClientError as exc:
            delay = _backoff_or_raise(exc, attempt, max_retries, model)
            print(
                f"[warn] 429 rate-limit: czekam {delay:.0f}s "
                f"(próba {attempt}/{max_retries})...",
                file=sys.stderr,
            )
            time.sleep(delay)
            continue

        if not response.text:
            raise RuntimeError("Gemini zwrócił pustą odpowiedź tekstową.")
        return response.text
