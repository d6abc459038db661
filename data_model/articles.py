"""
data_model/articles.py — model artykułu wyciągniętego ze strony NHK.

ExtractedArticle powstaje raz przy crawlu i nie jest później modyfikowany.
Pola sekwencyjne są krotkami; do JSON-a trafiają jako listy z kluczami
camelCase (format konsumowany przez warstwę renderującą i przez prompt
dla modelu językowego).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ExtractedArticle:
    """
    Artykuł po ekstrakcji.

    - content:    oczyszczona treść; akapity rozdzielone pustą linią
    - paragraphs: akapity w kolejności dokumentu (białe znaki zwinięte)
    - sentences:  zdania wszystkich akapitów w kolejności dokumentu
    - pozostałe pola: metadane; brak wartości → "" / ()
    """
    title: str = ""
    content: str = ""
    paragraphs: tuple[str, ...] = ()
    sentences: tuple[str, ...] = ()
    publish_date: str = ""
    author: str = ""
    category: str = ""
    image_url: str = ""
    summary: str = ""
    tags: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "title":             self.title,
            "content":           self.content,
            "contentParagraphs": list(self.paragraphs),
            "contentSentences":  list(self.sentences),
            "publishDate":       self.publish_date,
            "author":            self.author,
            "category":          self.category,
            "imageUrl":          self.image_url,
            "summary":           self.summary,
            "tags":              list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExtractedArticle:
        """Odtwarza artykuł z JSON-a zapisanego przez to_dict(); brakujące klucze → wartości domyślne."""
        return cls(
            title=_str(data.get("title")),
            content=_str(data.get("content")),
            paragraphs=_str_tuple(data.get("contentParagraphs")),
            sentences=_str_tuple(data.get("contentSentences")),
            publish_date=_str(data.get("publishDate")),
            author=_str(data.get("author")),
            category=_str(data.get("category")),
            image_url=_str(data.get("imageUrl")),
            summary=_str(data.get("summary")),
            tags=_str_tuple(data.get("tags")),
        )


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _str_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(v for v in value if isinstance(v, str))
