"""
llm_query/prompt.py — prompt analizy słownictwa i gramatyki artykułu.

Funkcje publiczne:
  clamp_limits(max_vocab, max_grammar)                            -> (int, int)
  build_analysis_prompt(content, sentences, max_vocab, max_grammar) -> str

SYSTEM_PROMPT trafia do system_instruction wywołania Gemini.
"""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_MAX_VOCAB   = 25
DEFAULT_MAX_GRAMMAR = 10
VOCAB_LIMITS        = (5, 60)
GRAMMAR_LIMITS      = (0, 30)

SYSTEM_PROMPT = (
    "You are a Japanese teaching assistant for Vietnamese learners.\n"
    "Output must be valid JSON only: no explanations, no markdown.\n"
    "Extract the important vocabulary (kanji/words) and grammar from a Japanese news article.\n"
    "Only pick items worth studying (skip trivial words and filler).\n"
    "Every item gets short, accurate, polite examples with natural Vietnamese translations."
)

_SCHEMA = (
    '{"vocab":[{"surfaceForm":"...","reading":"...","lemma":"...","meaningVi":"...",'
    '"partOfSpeech":"...","jlpt":"N3","examples":[{"jp":"...","vi":"..."}]}],'
    '"grammar":[{"pattern":"...","explanationVi":"...","usage":"...",'
    '"examples":[{"jp":"...","vi":"..."}]}]}'
)


def _clamp(value: int | None, default: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    if value is None:
        value = default
    return min(max(value, low), high)


def clamp_limits(max_vocab: int | None = None, max_grammar: int | None = None) -> tuple[int, int]:
    """Ogranicza liczbę pozycji: słownictwo 5..60 (domyślnie 25), gramatyka 0..30 (domyślnie 10)."""
    return (
        _clamp(max_vocab, DEFAULT_MAX_VOCAB, VOCAB_LIMITS),
        _clamp(max_grammar, DEFAULT_MAX_GRAMMAR, GRAMMAR_LIMITS),
    )


def build_analysis_prompt(
    content: str,
    sentences: Sequence[str] | None = None,
    max_vocab: int | None = None,
    max_grammar: int | None = None,
) -> str:
    """
    Buduje treść zapytania użytkownika dla modelu.

    Args:
        content:     treść artykułu (ExtractedArticle.content)
        sentences:   zdania po podziale (opcjonalnie, jako podpowiedź)
        max_vocab:   limit pozycji słownictwa (przycinany do 5..60)
        max_grammar: limit pozycji gramatyki (przycinany do 0..30)

    Raises:
        ValueError: pusta treść artykułu.
    """
    if not content or not content.strip():
        raise ValueError("Brak treści artykułu do analizy.")

    n_vocab, n_grammar = clamp_limits(max_vocab, max_grammar)

    lines: list[str] = [
        "Japanese article:",
        "-----",
        content,
        "-----",
    ]
    if sentences:
        lines.append("Pre-split sentences (reference):")
        lines.extend(sentences)

    lines += [
        "",
        "Requirements:",
        f"1) Build a vocabulary list (vocab) of at most {n_vocab} items.",
        "   - surfaceForm: the form exactly as it appears in the article",
        "   - reading: kana reading, if any",
        "   - lemma: dictionary form (if different)",
        "   - meaningVi: short, precise Vietnamese meaning",
        "   - partOfSpeech: e.g. 名詞, 動詞, 形容詞, 副詞, 連体詞, 助詞, 助動詞",
        "   - jlpt: N5..N1 if known (do not guess)",
        "   - examples: 1-2 natural examples (jp, vi) containing surfaceForm",
        "",
        f"2) Build a grammar list (grammar) of at most {n_grammar} items.",
        "   - pattern: the grammar pattern as it appears in the article",
        "   - explanationVi: Vietnamese explanation",
        "   - usage: nuance or politeness notes (if needed)",
        "   - examples: 1-2 examples (jp, vi)",
        "",
        "3) Return JSON with exactly this schema:",
        _SCHEMA,
    ]
    return "\n".join(lines)
