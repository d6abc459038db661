"""Komenda: nhkr analyze — analiza słownictwa i gramatyki artykułu przez Gemini."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from llm_query import (
    AnalysisParseError,
    DEFAULT_MAX_GRAMMAR,
    DEFAULT_MAX_VOCAB,
    DEFAULT_MODEL,
    SYSTEM_PROMPT,
    analysis_to_dict,
    build_analysis_prompt,
    call_gemini,
    parse_analysis_response,
)
from nhkr.commands.crawl import read_article


def run(args: argparse.Namespace) -> None:
    article_path = Path(args.article)
    try:
        article = read_article(article_path)
    except (OSError, ValueError) as e:
        print(f"Błąd odczytu artykułu: {e}", file=sys.stderr)
        raise SystemExit(1)

    try:
        prompt = build_analysis_prompt(
            article.content,
            article.sentences,
            max_vocab=args.max_vocab,
            max_grammar=args.max_grammar,
        )
    except ValueError as e:
        print(e, file=sys.stderr)
        raise SystemExit(1)

    if args.show_prompt:
        print("=== PROMPT ===")
        print(prompt)
        print("=== KONIEC PROMPTU ===\n")

    print(f"Wysyłam do Gemini ({args.model})...", file=sys.stderr)

    try:
        raw = call_gemini(prompt, system_instruction=SYSTEM_PROMPT, model=args.model)
    except ValueError as e:
        print(f"Błąd konfiguracji: {e}", file=sys.stderr)
        raise SystemExit(1)
    except Exception as e:
        print(f"Błąd Gemini API: {e}", file=sys.stderr)
        raise SystemExit(1)

    try:
        result = parse_analysis_response(raw)
    except AnalysisParseError as e:
        print(f"[warn] {e}", file=sys.stderr)
        raise SystemExit(1)

    print(
        f"  słownictwo: {len(result.vocab)}, gramatyka: {len(result.grammar)}",
        file=sys.stderr,
    )

    text = json.dumps(analysis_to_dict(result), ensure_ascii=False, indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.write_text(text, encoding="utf-8")
        print(f"Wynik zapisany do: {out_path}", file=sys.stderr)
    else:
        print(text)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "analyze",
        help="Wysyła artykuł do Gemini i zapisuje słownictwo/gramatykę (JSON).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Buduje prompt z treści i zdań artykułu (JSON z crawl/extract), wysyła go
do Gemini i waliduje odpowiedź: pozycje bez formy/znaczenia są odrzucane.
Wynik {"vocab": [...], "grammar": [...]} trafia na stdout lub do pliku.

Wymaga zmiennej środowiskowej GOOGLE_GEMINI_API_KEY (lub pliku .env).

Przykłady:
  nhkr analyze k10014912345000.article.json --out analiza.json
  nhkr analyze artykul.json --max-vocab 40 --max-grammar 5
  nhkr analyze artykul.json --show-prompt --model gemini-2.5-pro
        """,
    )
    p.add_argument(
        "article",
        metavar="ARTYKUŁ.json",
        help="Plik JSON z wynikiem crawl/extract.",
    )
    p.add_argument(
        "--max-vocab",
        type=int,
        default=DEFAULT_MAX_VOCAB,
        metavar="N",
        help=f"Maks. liczba pozycji słownictwa, 5..60 (domyślnie: {DEFAULT_MAX_VOCAB}).",
    )
    p.add_argument(
        "--max-grammar",
        type=int,
        default=DEFAULT_MAX_GRAMMAR,
        metavar="N",
        help=f"Maks. liczba pozycji gramatyki, 0..30 (domyślnie: {DEFAULT_MAX_GRAMMAR}).",
    )
    p.add_argument(
        "--model", "-m",
        default=DEFAULT_MODEL,
        metavar="MODEL",
        help=f"Model Gemini (domyślnie: {DEFAULT_MODEL}).",
    )
    p.add_argument(
        "--show-prompt",
        action="store_true",
        help="Wypisz prompt przed wysłaniem (do weryfikacji).",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        help="Zapisz wynik JSON do pliku (domyślnie: stdout).",
    )
    p.set_defaults(func=run)
