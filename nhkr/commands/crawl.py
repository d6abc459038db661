"""Komenda: nhkr crawl — pobiera artykuł NHK i zapisuje wynik ekstrakcji."""

from __future__ import annotations

import argparse
import json
import re
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model.articles import ExtractedArticle
from html_parser.fetch import DEFAULT_TIMEOUT, FetchFailed

console = Console()


def _article_id_from_url(url: str) -> str:
    """Domyślna nazwa pliku z URL, np. .../k10014912345000.html → k10014912345000."""
    stem = Path(urlparse(url).path).stem
    stem = re.sub(r"[^\w-]", "-", stem).strip("-")
    return stem or "article"


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(
    article: ExtractedArticle,
    json_path: Path,
    source_url: str = "",
) -> None:
    data = {
        "article":   article.to_dict(),
        "sourceUrl": source_url,
        "crawledAt": datetime.now(timezone.utc).isoformat(),
    }
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(
        f"[green]JSON:[/green] {escape(str(json_path))}  "
        f"({len(article.paragraphs)} akapitów, {len(article.sentences)} zdań)"
    )


def read_article(path: Path) -> ExtractedArticle:
    """Czyta JSON zapisany przez crawl/extract (również sam obiekt artykułu)."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and isinstance(data.get("article"), dict):
        data = data["article"]
    if not isinstance(data, dict):
        raise ValueError(f"{path}: oczekiwano obiektu JSON z artykułem.")
    return ExtractedArticle.from_dict(data)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(article: ExtractedArticle) -> None:
    meta = Table(box=box.SIMPLE_HEAD, show_header=False, expand=False)
    meta.add_column("POLE", style="bold cyan", no_wrap=True)
    meta.add_column("WARTOŚĆ", max_width=80)
    for label, value in (
        ("Tytuł",     article.title),
        ("Data",      article.publish_date),
        ("Autor",     article.author),
        ("Kategoria", article.category),
        ("Obraz",     article.image_url),
        ("Lead",      article.summary),
        ("Tagi",      ", ".join(article.tags)),
    ):
        meta.add_row(label, escape(value) if value else "-")

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",     justify="right", no_wrap=True, style="dim")
    table.add_column("LEN",   justify="right", no_wrap=True)
    table.add_column("ZDANIE", no_wrap=False, max_width=90)

    for i, sentence in enumerate(article.sentences, start=1):
        table.add_row(str(i), str(len(sentence)), escape(sentence))

    console.print()
    console.print(meta)
    console.print(table)
    console.print(f"  [dim]{len(article.sentences)} zdań[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    from html_parser.parser import parse_article_url

    url: str = args.url
    json_path = Path(args.out or f"{_article_id_from_url(url)}.article.json")

    console.print(f"Pobieranie [bold]{escape(url)}[/bold] …")

    try:
        article = parse_article_url(url, timeout=args.timeout)
    except FetchFailed as e:
        console.print(f"[red]Błąd pobierania:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if not article.content:
        console.print("[yellow]Nie znaleziono treści artykułu.[/yellow]")

    _write_json(article, json_path, source_url=url)

    if args.show:
        _show_table(article)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "crawl",
        help="Pobiera artykuł NHK i zapisuje wynik ekstrakcji do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera stronę artykułu NHK, wyciąga tytuł, treść, akapity, zdania
i metadane, po czym zapisuje wynik (ExtractedArticle) do pliku JSON.

Przykłady:
  nhkr crawl https://www3.nhk.or.jp/news/html/20240101/k10014912345000.html --show
  nhkr crawl URL --out artykul.json
        """,
    )
    p.add_argument(
        "url",
        metavar="URL",
        help="Adres URL artykułu.",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=None,
        help="Plik wynikowy JSON (domyślnie: <id>.article.json).",
    )
    p.add_argument(
        "--timeout",
        type=int,
        default=DEFAULT_TIMEOUT,
        metavar="SEK",
        help=f"Limit czasu żądania HTTP (domyślnie: {DEFAULT_TIMEOUT}).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl metadane i zdania w terminalu po zapisie.",
    )
    p.set_defaults(func=run)
