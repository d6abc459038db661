"""
nhkr — narzędzie CLI dla nhk-reader.

Użycie:
  nhkr <komenda> [opcje]

Komendy:
  feed       Listuje wiadomości z kanału RSS NHK.
  crawl      Pobiera artykuł NHK i zapisuje wynik ekstrakcji do JSON.
  extract    Ekstrakcja artykułu z zapisanego pliku HTML (bez sieci).
  analyze    Wysyła artykuł do Gemini i zapisuje słownictwo/gramatykę do JSON.
  highlight  Wyświetla zdania artykułu z podświetlonym słownictwem.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby japońskie znaki
# były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from nhkr.commands import feed as cmd_feed
from nhkr.commands import crawl as cmd_crawl
from nhkr.commands import extract as cmd_extract
from nhkr.commands import analyze as cmd_analyze
from nhkr.commands import highlight as cmd_highlight


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nhkr",
        description="nhk-reader — czytnik wiadomości NHK z analizą słownictwa.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="nhkr 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_feed.add_parser(subparsers)
    cmd_crawl.add_parser(subparsers)
    cmd_extract.add_parser(subparsers)
    cmd_analyze.add_parser(subparsers)
    cmd_highlight.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
