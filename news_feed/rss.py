"""
news_feed/rss.py — kanał RSS wiadomości NHK.

Publiczne API:
  parse_feed(xml_text)                      -> list[FeedItem]
  fetch_feed(url, timeout)                  -> list[FeedItem]
  find_item(items, key)                     -> FeedItem | None
  related_items(items, exclude, limit)      -> list[FeedItem]
  collect_categories(items)                 -> dict[str, int]
"""

from __future__ import annotations

from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

from data_model.feed import FeedItem
from html_parser.fetch import DEFAULT_TIMEOUT, fetch_html

FEED_URL = "https://www3.nhk.or.jp/rss/news/cat0.xml"
RELATED_LIMIT = 6


def _child_text(item: Tag, name: str) -> str:
    el = item.find(name)
    return el.get_text().strip() if isinstance(el, Tag) else ""


def _snippet(description: str) -> str:
    """Opis pozycji bez znaczników HTML (odpowiednik contentSnippet)."""
    if "<" not in description:
        return description
    return BeautifulSoup(description, "html.parser").get_text(" ", strip=True)


def parse_feed(xml_text: str) -> list[FeedItem]:
    """Parsuje dokument RSS 2.0; pozycje w kolejności kanału."""
    soup = BeautifulSoup(xml_text or "", "xml")
    items: list[FeedItem] = []
    for item in soup.find_all("item"):
        link = _child_text(item, "link")
        items.append(FeedItem(
            title=_child_text(item, "title"),
            content=_snippet(_child_text(item, "description")),
            link=link,
            pub_date=_child_text(item, "pubDate"),
            guid=_child_text(item, "guid") or link,
            categories=tuple(
                t for t in (c.get_text().strip() for c in item.find_all("category")) if t
            ),
        ))
    return items


def fetch_feed(url: str = FEED_URL, timeout: int = DEFAULT_TIMEOUT) -> list[FeedItem]:
    """Pobiera i parsuje kanał (FetchFailed przy błędzie HTTP)."""
    return parse_feed(fetch_html(url, timeout=timeout))


def find_item(items: Iterable[FeedItem], key: str) -> FeedItem | None:
    """Pozycja o podanym guid lub tytule."""
    for item in items:
        if item.guid == key or item.title == key:
            return item
    return None


def related_items(
    items: Iterable[FeedItem],
    exclude: FeedItem | None = None,
    limit: int = RELATED_LIMIT,
) -> list[FeedItem]:
    """Pierwsze `limit` pozycji kanału z pominięciem bieżącego artykułu."""
    out: list[FeedItem] = []
    for item in items:
        if exclude is not None and (item.guid == exclude.guid or item.title == exclude.title):
            continue
        out.append(item)
        if len(out) >= limit:
            break
    return out


def collect_categories(items: Iterable[FeedItem]) -> dict[str, int]:
    """Liczność kategorii w kolejności pierwszego wystąpienia."""
    counts: dict[str, int] = {}
    for item in items:
        for category in item.categories:
            counts[category] = counts.get(category, 0) + 1
    return counts
