"""
data_model/vocab.py — słownictwo i gramatyka zwracane przez model oraz
zakresy podświetleń w zdaniach.

Mapowanie na odpowiedź modelu: {"vocab": [...], "grammar": [...]}
  vocab[i]   → VocabEntry
  grammar[i] → GrammarEntry
  examples   → Example

VocabCandidate to widok VocabEntry widziany przez highlighter:
tylko surface_form i index są interpretowane, payload jest nieprzezroczysty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Example:
    jp: str
    vi: str


@dataclass(frozen=True, slots=True)
class VocabEntry:
    """
    Pozycja słownictwa.

    - surface_form:   forma występująca w tekście (klucz dopasowania)
    - reading:        czytanie w kanie (furigana)
    - lemma:          forma słownikowa, jeśli inna
    - meaning_vi:     znaczenie po wietnamsku
    - part_of_speech: np. 名詞, 動詞
    - jlpt:           poziom N5..N1, jeśli znany
    """
    surface_form: str
    meaning_vi: str
    reading: str | None = None
    lemma: str | None = None
    part_of_speech: str | None = None
    jlpt: str | None = None
    examples: tuple[Example, ...] = ()


@dataclass(frozen=True, slots=True)
class GrammarEntry:
    pattern: str
    explanation_vi: str
    usage: str | None = None
    examples: tuple[Example, ...] = ()


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    vocab: tuple[VocabEntry, ...] = ()
    grammar: tuple[GrammarEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class VocabCandidate:
    """Kandydat do podświetlenia; index to stabilny identyfikator pozycji w AnalysisResult.vocab."""
    surface_form: str
    index: int
    payload: Any = field(default=None, compare=False, hash=False)


@dataclass(frozen=True, slots=True)
class MatchRange:
    """Półotwarty przedział [start, end) w obrębie jednego zdania."""
    start: int
    end: int
    candidate_index: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Segment:
    """Fragment zdania: zwykły tekst (candidate_index=None) lub podświetlenie."""
    text: str
    start: int
    end: int
    candidate_index: int | None = None

    @property
    def highlighted(self) -> bool:
        return self.candidate_index is not None
