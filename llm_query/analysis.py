"""
llm_query/analysis.py — walidacja i normalizacja odpowiedzi modelu.

Odpowiedź: {"vocab": [...], "grammar": [...]} (często w otoczce ```json```
albo z tekstem wokół). Obie listy są wymagane; pojedyncze wadliwe pozycje
są odrzucane, nie powodują błędu.

Publiczne API:
  parse_analysis_response(raw)   -> AnalysisResult
  normalize_analysis(data)       -> AnalysisResult
  collect_candidates(result)     -> list[VocabCandidate]
  analysis_to_dict(result)       -> dict
  AnalysisParseError
"""

from __future__ import annotations

import json
import re
from typing import Any

from data_model.vocab import (
    AnalysisResult,
    Example,
    GrammarEntry,
    VocabCandidate,
    VocabEntry,
)

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


class AnalysisParseError(ValueError):
    """Odpowiedź modelu nie daje się sprowadzić do schematu {vocab, grammar}."""


# ---------------------------------------------------------------------------
# Parsowanie
# ---------------------------------------------------------------------------

def _strip_fence(raw: str) -> str:
    text = raw.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[-1]
    if text.endswith("```"):
        text = text.rsplit("```", 1)[0]
    return text.strip()


def _load_json(raw: str) -> Any:
    text = _strip_fence(raw)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    m = _JSON_OBJECT_RE.search(text)
    if not m:
        return None
    try:
        return json.loads(m.group(0))
    except json.JSONDecodeError:
        return None


def parse_analysis_response(raw: str) -> AnalysisResult:
    """
    Parsuje tekst odpowiedzi modelu.

    Raises:
        AnalysisParseError: brak poprawnego JSON-a lub vocab/grammar nie są listami.
    """
    data = _load_json(raw or "")
    if not isinstance(data, dict):
        raise AnalysisParseError("Odpowiedź modelu nie jest obiektem JSON.")
    if not isinstance(data.get("vocab"), list) or not isinstance(data.get("grammar"), list):
        raise AnalysisParseError("Odpowiedź modelu nie zawiera list 'vocab' i 'grammar'.")
    return normalize_analysis(data)


# ---------------------------------------------------------------------------
# Normalizacja
# ---------------------------------------------------------------------------

def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _optional(value: Any) -> str | None:
    return _text(value) or None


def _examples(value: Any) -> tuple[Example, ...]:
    if not isinstance(value, list):
        return ()
    out: list[Example] = []
    for ex in value:
        if not isinstance(ex, dict):
            continue
        jp, vi = _text(ex.get("jp")), _text(ex.get("vi"))
        if jp and vi:
            out.append(Example(jp=jp, vi=vi))
    return tuple(out)


def _vocab_entry(item: Any) -> VocabEntry | None:
    if not isinstance(item, dict):
        return None
    surface_form = _text(item.get("surfaceForm"))
    meaning_vi = _text(item.get("meaningVi"))
    if not surface_form or not meaning_vi:
        return None
    return VocabEntry(
        surface_form=surface_form,
        meaning_vi=meaning_vi,
        reading=_optional(item.get("reading")),
        lemma=_optional(item.get("lemma")),
        part_of_speech=_optional(item.get("partOfSpeech")),
        jlpt=_optional(item.get("jlpt")),
        examples=_examples(item.get("examples")),
    )


def _grammar_entry(item: Any) -> GrammarEntry | None:
    if not isinstance(item, dict):
        return None
    pattern = _text(item.get("pattern"))
    explanation_vi = _text(item.get("explanationVi"))
    if not pattern or not explanation_vi:
        return None
    return GrammarEntry(
        pattern=pattern,
        explanation_vi=explanation_vi,
        usage=_optional(item.get("usage")),
        examples=_examples(item.get("examples")),
    )


def normalize_analysis(data: dict) -> AnalysisResult:
    """Sprowadza słownik z odpowiedzi do AnalysisResult, pomijając niekompletne pozycje."""
    vocab = [v for v in map(_vocab_entry, data.get("vocab") or []) if v is not None]
    grammar = [g for g in map(_grammar_entry, data.get("grammar") or []) if g is not None]
    return AnalysisResult(vocab=tuple(vocab), grammar=tuple(grammar))


# ---------------------------------------------------------------------------
# Wyjście
# ---------------------------------------------------------------------------

def collect_candidates(result: AnalysisResult) -> list[VocabCandidate]:
    """Kandydaci do podświetlenia; index = pozycja w result.vocab."""
    return [
        VocabCandidate(surface_form=v.surface_form, index=i, payload=v)
        for i, v in enumerate(result.vocab)
    ]


def _examples_to_list(examples: tuple[Example, ...]) -> list[dict[str, str]]:
    return [{"jp": ex.jp, "vi": ex.vi} for ex in examples]


def analysis_to_dict(result: AnalysisResult) -> dict[str, list[dict[str, Any]]]:
    return {
        "vocab": [
            {
                "surfaceForm":  v.surface_form,
                "reading":      v.reading,
                "lemma":        v.lemma,
                "meaningVi":    v.meaning_vi,
                "partOfSpeech": v.part_of_speech,
                "jlpt":         v.jlpt,
                "examples":     _examples_to_list(v.examples),
            }
            for v in result.vocab
        ],
        "grammar": [
            {
                "pattern":       g.pattern,
                "explanationVi": g.explanation_vi,
                "usage":         g.usage,
                "examples":      _examples_to_list(g.examples),
            }
            for g in result.grammar
        ],
    }
