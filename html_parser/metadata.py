"""
html_parser/metadata.py — metadane artykułu NHK (tytuł, data, autor, ...).

Każde pole ma uporządkowaną listę kandydatów (selektory CSS, meta tagi,
skrypt __DetailProp__); wygrywa pierwszy kandydat z niepustym tekstem.
Brak wartości → "" (tagi → pusta krotka). Funkcje nie rzucają wyjątków
dla niekompletnego HTML.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

NEWS_BASE_URL = "https://www3.nhk.or.jp/news/"
DEFAULT_PUBLISHER = "NHK"

TITLE_SELECTOR = ".content--detail-title > .content--title"
SUMMARY_SELECTOR = ".content--summary"

DATE_SELECTORS: tuple[str, ...] = (
    ".publish-date",
    ".date",
    ".time",
    '[class*="date"]',
    '[class*="time"]',
    "time",
    ".article-date",
)
AUTHOR_SELECTORS: tuple[str, ...] = (
    ".author",
    ".byline",
    '[class*="author"]',
    '[class*="byline"]',
)
TAG_SELECTORS: tuple[str, ...] = (
    ".tags a",
    ".tag a",
    '[class*="tag"] a',
    ".keywords a",
)

# Kody `cate` ze skryptu __DetailProp__ → nazwa działu
CATEGORY_NAMES: dict[str, str] = {
    "1": "社会",
    "2": "生活",
    "3": "文化・芸術",
    "4": "政治",
    "5": "ビジネス",
    "6": "国際",
    "7": "スポーツ",
    "8": "気象・災害",
}

_DETAIL_PROP_MARKER = "__DetailProp__"
_CATE_RE = re.compile(r"cate:\s*['\"]?(\d+)['\"]?")
_IMG_RE = re.compile(r"img\s*:\s*['\"]([^'\"]+)['\"]")


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _first_text(soup: BeautifulSoup, selector: str, reject: str | None = None) -> str:
    """Tekst pierwszego elementu pasującego do selektora, który jest niepusty (i nie zawiera `reject`)."""
    for el in soup.select(selector):
        text = el.get_text().strip()
        if not text:
            continue
        if reject and reject in text:
            continue
        return text
    return ""


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    el = soup.find("meta", attrs=attrs)
    if isinstance(el, Tag):
        content = el.get("content")
        if isinstance(content, str):
            return content.strip()
    return ""


def detail_prop_script(soup: BeautifulSoup) -> str:
    """Zwraca treść skryptu inline z obiektem __DetailProp__ (lub "")."""
    for script in soup.find_all("script"):
        text = script.string or script.get_text()
        if text and _DETAIL_PROP_MARKER in text:
            return text
    return ""


# ---------------------------------------------------------------------------
# Pola
# ---------------------------------------------------------------------------

def extract_title(soup: BeautifulSoup) -> str:
    """Nagłówek artykułu; fallback: og:title → meta title → <title>."""
    el = soup.select_one(TITLE_SELECTOR)
    if el is not None:
        text = el.get_text().strip()
        if text:
            return text

    for candidate in (
        _meta_content(soup, property="og:title"),
        _meta_content(soup, name="title"),
    ):
        if candidate:
            return candidate

    if soup.title is not None:
        return soup.title.get_text().strip()
    return ""


def extract_publish_date(soup: BeautifulSoup) -> str:
    for selector in DATE_SELECTORS:
        text = _first_text(soup, selector)
        if text:
            return text

    time_el = soup.find("time", attrs={"datetime": True})
    if isinstance(time_el, Tag):
        value = time_el.get("datetime")
        if isinstance(value, str) and value.strip():
            return value.strip()
    return _meta_content(soup, property="article:published_time")


def extract_author(soup: BeautifulSoup, publisher: str = DEFAULT_PUBLISHER) -> str:
    """Autor; kandydaci zawierający nazwę wydawcy (stopki redakcyjne) są pomijani."""
    for selector in AUTHOR_SELECTORS:
        text = _first_text(soup, selector, reject=publisher or None)
        if text:
            return text
    return ""


def extract_category(soup: BeautifulSoup, script: str | None = None) -> str:
    """Nazwa działu z kodu `cate`; nieznany kod → "cate-<kod>"."""
    if script is None:
        script = detail_prop_script(soup)
    if not script:
        return ""
    m = _CATE_RE.search(script)
    if not m:
        return ""
    code = m.group(1)
    return CATEGORY_NAMES.get(code, f"cate-{code}")


def extract_image_url(soup: BeautifulSoup, script: str | None = None) -> str:
    if script is None:
        script = detail_prop_script(soup)
    if script:
        m = _IMG_RE.search(script)
        if m:
            return NEWS_BASE_URL + m.group(1)
    return _meta_content(soup, property="og:image")


def extract_summary(soup: BeautifulSoup) -> str:
    """Lead artykułu; fallback: og:description → meta description."""
    text = _first_text(soup, SUMMARY_SELECTOR)
    if text:
        return text
    return (
        _meta_content(soup, property="og:description")
        or _meta_content(soup, name="description")
    )


def extract_tags(soup: BeautifulSoup) -> tuple[str, ...]:
    """Tagi z pierwszego selektora, który cokolwiek dopasował."""
    for selector in TAG_SELECTORS:
        elements = soup.select(selector)
        if elements:
            return tuple(t for t in (el.get_text().strip() for el in elements) if t)
    return ()
