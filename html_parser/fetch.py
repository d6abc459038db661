"""
html_parser/fetch.py — pobieranie stron HTML i kanałów RSS przez HTTP.

Publiczne API:
  fetch_html(url, timeout) -> str
  FetchFailed              wyjątek przy błędzie połączenia lub statusie != 2xx
"""

from __future__ import annotations

import requests

DEFAULT_TIMEOUT = 30

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}


class FetchFailed(RuntimeError):
    """Nie udało się pobrać zasobu; status_code=None przy błędzie sieci."""

    def __init__(self, url: str, status_code: int | None, reason: str) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        status = f"HTTP {status_code}" if status_code is not None else "brak odpowiedzi"
        super().__init__(f"Pobieranie {url} nie powiodło się ({status}): {reason}")


def fetch_html(url: str, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Pobiera dokument pod podanym URL i zwraca go jako tekst (UTF-8 gdy kodowanie nieznane)."""
    try:
        resp = requests.get(url, timeout=timeout, headers=_HEADERS)
        resp.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise FetchFailed(url, status, str(e)) from e
    except requests.RequestException as e:
        raise FetchFailed(url, None, str(e)) from e

    resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text
