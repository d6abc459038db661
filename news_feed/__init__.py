"""
news_feed — kanał RSS NHK (lista wiadomości do crawlowania).

Publiczne API:
  FEED_URL, RELATED_LIMIT
  parse_feed(xml_text)                  -> list[FeedItem]
  fetch_feed(url, timeout)              -> list[FeedItem]
  find_item(items, key)                 -> FeedItem | None
  related_items(items, exclude, limit)  -> list[FeedItem]
  collect_categories(items)             -> dict[str, int]
"""

from .rss import (
    FEED_URL,
    RELATED_LIMIT,
    parse_feed,
    fetch_feed,
    find_item,
    related_items,
    collect_categories,
)

__all__ = [
    "FEED_URL",
    "RELATED_LIMIT",
    "parse_feed",
    "fetch_feed",
    "find_item",
    "related_items",
    "collect_categories",
]
