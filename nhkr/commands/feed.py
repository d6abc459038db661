"""Komenda: nhkr feed — listowanie wiadomości z kanału RSS NHK."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model.feed import FeedItem
from html_parser.fetch import FetchFailed
from news_feed import FEED_URL, RELATED_LIMIT, collect_categories, fetch_feed, find_item, related_items

console = Console(width=180)


def _items_table(items: list[FeedItem]) -> Table:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",         justify="right", no_wrap=True, style="dim")
    table.add_column("DATA",      no_wrap=True)
    table.add_column("KATEGORIE", no_wrap=True, style="cyan")
    table.add_column("TYTUŁ",     no_wrap=False, max_width=60)
    table.add_column("LINK",      no_wrap=True, style="dim")

    for i, item in enumerate(items, start=1):
        table.add_row(
            str(i),
            escape(item.pub_date),
            escape(", ".join(item.categories) or "-"),
            escape(item.title),
            escape(item.link),
        )
    return table


def _show_item(items: list[FeedItem], key: str, limit: int) -> None:
    """Szczegóły jednej wiadomości i lista powiązanych (pozostałe z kanału)."""
    item = find_item(items, key)
    if item is None:
        console.print(f"[red]Nie znaleziono wiadomości:[/red] {escape(key)}")
        raise SystemExit(1)

    console.print(f"\n[bold]{escape(item.title)}[/bold]")
    console.print(f"  [dim]{escape(item.pub_date)}  {escape(', '.join(item.categories))}[/dim]")
    console.print(f"  {escape(item.content)}")
    console.print(f"  [dim]{escape(item.link)}[/dim]")

    related = related_items(items, exclude=item, limit=limit)
    if related:
        console.print("\n[bold]Powiązane:[/bold]")
        console.print(_items_table(related))


def run(args: argparse.Namespace) -> None:
    try:
        items = fetch_feed(args.url)
    except FetchFailed as e:
        console.print(f"[red]Błąd pobierania kanału:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if not items:
        console.print("[yellow]Kanał nie zawiera wiadomości.[/yellow]")
        return

    if args.item:
        _show_item(items, args.item, args.limit or RELATED_LIMIT)
        return

    shown = items[: args.limit] if args.limit else items

    console.print()
    console.print(_items_table(shown))

    categories = collect_categories(items)
    summary = ", ".join(f"{c}={n}" for c, n in categories.items()) or "-"
    console.print(f"  [dim]{len(items)} wiadomości; kategorie: {escape(summary)}[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "feed",
        help="Listuje wiadomości z kanału RSS NHK.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera kanał RSS NHK i wyświetla listę wiadomości (tytuł, data, link)
oraz liczność kategorii. Linki można przekazać do `nhkr crawl`.

Z --item pokazuje jedną wiadomość (po guid lub tytule) i do 6 powiązanych.

Przykłady:
  nhkr feed
  nhkr feed --limit 10
  nhkr feed --item https://www3.nhk.or.jp/news/html/20240101/k10014912345000.html
        """,
    )
    p.add_argument(
        "--url",
        default=FEED_URL,
        metavar="URL",
        help=f"Adres kanału RSS (domyślnie: {FEED_URL}).",
    )
    p.add_argument(
        "--limit", "-n",
        type=int,
        default=0,
        metavar="N",
        help="Pokaż tylko N pierwszych wiadomości (domyślnie: wszystkie; "
             f"z --item: {RELATED_LIMIT} powiązanych).",
    )
    p.add_argument(
        "--item",
        metavar="GUID|TYTUŁ",
        default=None,
        help="Pokaż jedną wiadomość i powiązane.",
    )
    p.set_defaults(func=run)
