"""html_parser/parser.py — parsowanie strony artykułu NHK do ExtractedArticle."""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from bs4.exceptions import ParserRejectedMarkup

from data_model.articles import ExtractedArticle
from html_parser.fetch import DEFAULT_TIMEOUT, fetch_html
from html_parser.metadata import (
    DEFAULT_PUBLISHER,
    detail_prop_script,
    extract_author,
    extract_category,
    extract_image_url,
    extract_publish_date,
    extract_summary,
    extract_tags,
    extract_title,
)
from html_parser.text import normalize_content, split_article_sentences, split_paragraphs

# Bloki treści artykułu i ich elementy
BODY_BLOCK_SELECTOR = ".content--detail-more .content--body"
BODY_TITLE_SELECTOR = ".body-title"
BODY_TEXT_SELECTOR = ".body-text"

# Kolejność parserów; lxml przyjmuje znaczniki, które html.parser odrzuca (np. urwane <![ )
_SOUP_FEATURES = ("html.parser", "lxml")


def _walk_body_text(body_text: Tag, parts: list[str]) -> None:
    """
    Dopisuje do `parts` bezpośrednie dzieci węzła .body-text:
      - tekst      → po strip (puste pomijane)
      - <br>       → "\\n"
      - <p>        → tekst akapitu + "\\n\\n"
    Komentarze i pozostałe elementy są pomijane.
    """
    for node in body_text.children:
        if isinstance(node, NavigableString):
            if isinstance(node, PreformattedString):
                continue  # komentarze, CDATA, doctype
            text = node.strip()
            if text:
                parts.append(text)
        elif isinstance(node, Tag):
            name = (node.name or "").lower()
            if name == "br":
                parts.append("\n")
            elif name == "p":
                text = node.get_text().strip()
                if text:
                    parts.append(text + "\n\n")


def extract_body(soup: BeautifulSoup) -> str:
    """
    Składa treść ze wszystkich bloków .content--body w kolejności dokumentu.

    Podtytuł bloku trafia jako osobna linia 【podtytuł】 z pustą linią po niej.
    Każdy blok kończy się pustą linią. Wynik jest znormalizowany.
    """
    parts: list[str] = []

    for block in soup.select(BODY_BLOCK_SELECTOR):
        heading_el = block.select_one(BODY_TITLE_SELECTOR)
        heading = heading_el.get_text().strip() if heading_el is not None else ""
        if heading:
            parts.append(f"\n【{heading}】\n\n")

        for body_text in block.select(BODY_TEXT_SELECTOR):
            _walk_body_text(body_text, parts)

        buffer = "".join(parts)
        if buffer and not buffer.endswith("\n\n"):
            parts.append("\n\n")

    return normalize_content("".join(parts))


def _make_soup(html: str) -> BeautifulSoup | None:
    """Pierwszy parser, który przyjmie dokument; None gdy wszystkie go odrzucą."""
    for features in _SOUP_FEATURES:
        try:
            return BeautifulSoup(html, features)
        except ParserRejectedMarkup:
            continue
    return None


def parse_article_html(html: str, publisher: str = DEFAULT_PUBLISHER) -> ExtractedArticle:
    """Parsuje HTML artykułu. Nie rzuca dla niepoprawnego HTML; brakujące pola są puste."""
    soup = _make_soup(html or "")
    if soup is None:
        return ExtractedArticle()

    content = extract_body(soup)
    paragraphs = split_paragraphs(content)
    sentences = split_article_sentences(paragraphs)
    script = detail_prop_script(soup)

    return ExtractedArticle(
        title=extract_title(soup),
        content=content,
        paragraphs=tuple(paragraphs),
        sentences=tuple(sentences),
        publish_date=extract_publish_date(soup),
        author=extract_author(soup, publisher),
        category=extract_category(soup, script),
        image_url=extract_image_url(soup, script),
        summary=extract_summary(soup),
        tags=extract_tags(soup),
    )


def parse_article_url(url: str, timeout: int = DEFAULT_TIMEOUT) -> ExtractedArticle:
    """Pobiera stronę artykułu z podanego URL i parsuje ją (FetchFailed przy błędzie HTTP)."""
    return parse_article_html(fetch_html(url, timeout=timeout))
