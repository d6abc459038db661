"""data_model/feed.py — pozycja kanału RSS NHK."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FeedItem:
    title: str
    content: str         # contentSnippet: opis bez znaczników
    link: str
    pub_date: str
    guid: str
    categories: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["pubDate"] = data.pop("pub_date")
        data["categories"] = list(self.categories)
        return data
