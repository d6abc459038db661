"""Komenda: nhkr extract — ekstrakcja artykułu z zapisanego pliku HTML."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from html_parser.parser import parse_article_html
from nhkr.commands.crawl import _show_table, _write_json

console = Console()


def run(args: argparse.Namespace) -> None:
    html_path = Path(args.html_file)
    if not html_path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {escape(str(html_path))}")
        raise SystemExit(1)

    html = html_path.read_text(encoding="utf-8", errors="replace")
    article = parse_article_html(html, publisher=args.publisher)

    if not article.content:
        console.print("[yellow]Nie znaleziono treści artykułu.[/yellow]")

    json_path = Path(args.out) if args.out else html_path.with_suffix(".article.json")
    _write_json(article, json_path, source_url=args.source_url or "")

    if args.show:
        _show_table(article)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Ekstrakcja artykułu z zapisanego pliku HTML (bez sieci).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje lokalny plik HTML strony artykułu NHK tak samo jak crawl.

Przykłady:
  nhkr extract strona.html --show
  nhkr extract strona.html --source-url https://www3.nhk.or.jp/news/... --out a.json
        """,
    )
    p.add_argument(
        "html_file",
        metavar="PLIK.html",
        help="Ścieżka do pliku HTML.",
    )
    p.add_argument(
        "--source-url",
        metavar="URL",
        default=None,
        help="Adres źródłowy zapisywany w JSON (opcjonalnie).",
    )
    p.add_argument(
        "--publisher",
        default="NHK",
        help="Nazwa wydawcy odrzucana w polu autora (domyślnie: NHK).",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=None,
        help="Plik wynikowy JSON (domyślnie: <plik>.article.json).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl metadane i zdania w terminalu po zapisie.",
    )
    p.set_defaults(func=run)
