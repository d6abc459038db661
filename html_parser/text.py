"""
html_parser/text.py — normalizacja treści, podział na akapity i zdania.

Format wejściowy: bufor zbudowany przez parser (\n = miękki enter,
\n\n = granica akapitu).

Zasady:
  - końce linii CRLF i CR → LF
  - 3+ kolejne \n → dokładnie \n\n; strip całości (idempotentne)
  - akapity: podział na \n{2,}, białe znaki wewnątrz zwinięte do spacji
  - zdania: podział po terminatorach japońskich (。！？); gdy akapit nie
    zawiera żadnego — po łacińskich (.!?). Terminator zostaje przy
    poprzedzającym tekście, ogon bez terminatora jest osobnym zdaniem.

Podział zdań nie gubi ani nie duplikuje znaków: sklejenie zdań akapitu
(bez białych znaków) daje akapit (bez białych znaków).
"""

from __future__ import annotations

import re

_LINE_ENDING_RE = re.compile(r"\r\n?")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
_PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")
_WHITESPACE_RUN_RE = re.compile(r"\s+")

_JP_TERMINATORS = "。！？"
_LATIN_TERMINATORS = ".!?"

# Tekst (być może pusty) + seria terminatorów, albo ogon bez terminatora.
_JP_SENTENCE_RE = re.compile(r"[^。！？]*[。！？]+|[^。！？]+")
_LATIN_SENTENCE_RE = re.compile(r"[^.!?]*[.!?]+|[^.!?]+")


def normalize_content(text: str) -> str:
    """Ujednolica końce linii, ogranicza puste linie do jednej i obcina brzegi."""
    text = _LINE_ENDING_RE.sub("\n", text)
    return _EXCESS_NEWLINES_RE.sub("\n\n", text).strip()


def split_paragraphs(content: str) -> list[str]:
    """Dzieli treść na akapity; miękkie entery i serie spacji → jedna spacja."""
    paragraphs: list[str] = []
    for chunk in _PARAGRAPH_BREAK_RE.split(content):
        paragraph = _WHITESPACE_RUN_RE.sub(" ", chunk).strip()
        if paragraph:
            paragraphs.append(paragraph)
    return paragraphs


def split_sentences(paragraph: str) -> list[str]:
    """
    Dzieli akapit na zdania.

    Terminatory japońskie mają pierwszeństwo; łacińskie są używane tylko
    wtedy, gdy w akapicie nie ma żadnego z 。！？.
    """
    if any(ch in paragraph for ch in _JP_TERMINATORS):
        pattern = _JP_SENTENCE_RE
    elif any(ch in paragraph for ch in _LATIN_TERMINATORS):
        pattern = _LATIN_SENTENCE_RE
    else:
        pattern = None

    chunks = pattern.findall(paragraph) if pattern else [paragraph]
    return [s for s in (c.strip() for c in chunks) if s]


def split_article_sentences(paragraphs: list[str] | tuple[str, ...]) -> list[str]:
    """Zdania wszystkich akapitów, w kolejności dokumentu."""
    sentences: list[str] = []
    for paragraph in paragraphs:
        sentences.extend(split_sentences(paragraph))
    return sentences
