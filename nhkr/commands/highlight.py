"""Komenda: nhkr highlight — zdania artykułu z podświetlonym słownictwem."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape
from rich.text import Text

from data_model.vocab import AnalysisResult, Segment
from highlighter import resolve_article, segment_sentence
from llm_query import AnalysisParseError, collect_candidates, parse_analysis_response
from nhkr.commands.crawl import read_article

console = Console()

HIGHLIGHT_STYLE = "bold black on yellow"
MARKER_STYLE    = "dim cyan"


def render_sentence(sentence: str, segments: list[Segment], markers: bool = True) -> Text:
    """Składa zdanie z segmentów; po podświetleniu opcjonalny znacznik [index]."""
    text = Text()
    for seg in segments:
        if seg.highlighted:
            text.append(seg.text, style=HIGHLIGHT_STYLE)
            if markers:
                text.append(f"[{seg.candidate_index}]", style=MARKER_STYLE)
        else:
            text.append(seg.text)
    return text


def _show_vocab(result: AnalysisResult) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("FORMA",   no_wrap=True, style="bold yellow")
    table.add_column("CZYTANIE", no_wrap=True)
    table.add_column("POS",     no_wrap=True, style="dim")
    table.add_column("JLPT",    no_wrap=True, justify="center")
    table.add_column("ZNACZENIE", no_wrap=False, max_width=50)

    for i, v in enumerate(result.vocab):
        table.add_row(
            str(i),
            escape(v.surface_form),
            escape(v.reading or "-"),
            escape(v.part_of_speech or "-"),
            escape(v.jlpt or "-"),
            escape(v.meaning_vi),
        )

    console.print()
    console.print(table)

    if result.grammar:
        console.print("[bold]Gramatyka:[/bold]")
        for g in result.grammar:
            console.print(f"  [cyan]{escape(g.pattern)}[/cyan]: {escape(g.explanation_vi)}")
    console.print()


def run(args: argparse.Namespace) -> None:
    try:
        article = read_article(Path(args.article))
        raw = Path(args.analysis).read_text(encoding="utf-8")
    except (OSError, ValueError) as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        result = parse_analysis_response(raw)
    except AnalysisParseError as e:
        console.print(f"[red]Niepoprawny plik analizy:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if not article.sentences:
        console.print("[yellow]Artykuł nie zawiera zdań.[/yellow]")
        return

    candidates = collect_candidates(result)
    layouts = resolve_article(article.sentences, candidates)

    if article.title:
        console.print(f"\n[bold]{escape(article.title)}[/bold]\n")

    hits = 0
    for sentence, ranges in zip(article.sentences, layouts):
        hits += len(ranges)
        segments = segment_sentence(sentence, ranges)
        console.print(render_sentence(sentence, segments, markers=not args.no_markers))

    console.print(
        f"\n  [dim]{len(article.sentences)} zdań, {hits} podświetleń, "
        f"{len(candidates)} pozycji słownictwa[/dim]"
    )

    if args.vocab:
        _show_vocab(result)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "highlight",
        help="Wyświetla zdania artykułu z podświetlonym słownictwem.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Łączy zdania artykułu (JSON z crawl/extract) ze słownictwem z analizy
(JSON z analyze) i wyświetla każde zdanie z podświetlonymi, nienakładającymi
się wystąpieniami. Przy nakładaniu wygrywa wcześniejsze, a przy równym
starcie dłuższe dopasowanie. Znacznik [n] wskazuje pozycję słownictwa.

Przykłady:
  nhkr highlight artykul.json analiza.json
  nhkr highlight artykul.json analiza.json --vocab
  nhkr highlight artykul.json analiza.json --no-markers
        """,
    )
    p.add_argument(
        "article",
        metavar="ARTYKUŁ.json",
        help="Plik JSON z wynikiem crawl/extract.",
    )
    p.add_argument(
        "analysis",
        metavar="ANALIZA.json",
        help="Plik JSON z wynikiem analyze.",
    )
    p.add_argument(
        "--vocab",
        action="store_true",
        help="Wyświetl tabelę słownictwa i listę gramatyki pod tekstem.",
    )
    p.add_argument(
        "--no-markers",
        action="store_true",
        help="Nie dopisuj znaczników [n] po podświetleniach.",
    )
    p.set_defaults(func=run)
