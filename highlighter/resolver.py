"""
highlighter/resolver.py — rozmieszczenie podświetleń słownictwa w zdaniach.

Architektura:
  (zdanie, kandydaci) → find_occurrences() dla każdego kandydata
  → sort (start ↑, długość ↓) → zachłanny wybór bez nakładania
  → list[MatchRange] → segment_sentence() → list[Segment]

Gwarancje:
  - zakresy jednego zdania są rozłączne i posortowane po start
  - segmenty pokrywają zdanie dokładnie raz, bez luk
  - wynik zależy tylko od (zdanie, lista kandydatów)

Dla dwóch kandydatów o identycznej formie wygrywa ten, który jest
wcześniej na liście (sort stabilny); wywołujący nie powinni na tym polegać.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from typing import TypeAlias

from data_model.vocab import MatchRange, Segment, VocabCandidate

_CACHE_SIZE = 4096

CandidateKey: TypeAlias = tuple[tuple[str, int], ...]


def find_occurrences(sentence: str, surface_form: str, candidate_index: int) -> list[MatchRange]:
    """Wszystkie dosłowne wystąpienia formy w zdaniu, również nakładające się."""
    ranges: list[MatchRange] = []
    if not surface_form:
        return ranges

    length = len(surface_form)
    pos = sentence.find(surface_form)
    while pos != -1:
        ranges.append(MatchRange(pos, pos + length, candidate_index))
        pos = sentence.find(surface_form, pos + 1)
    return ranges


def _candidate_key(candidates: Iterable[VocabCandidate]) -> CandidateKey:
    return tuple(
        (c.surface_form, c.index)
        for c in candidates
        if c.surface_form and c.surface_form.strip()
    )


def _resolve(sentence: str, key: CandidateKey) -> tuple[MatchRange, ...]:
    occurrences: list[MatchRange] = []
    for surface_form, index in key:
        occurrences.extend(find_occurrences(sentence, surface_form, index))

    # Najpierw najwcześniejszy start, przy remisie najdłuższe dopasowanie.
    occurrences.sort(key=lambda r: (r.start, -r.length))

    accepted: list[MatchRange] = []
    last_end = 0
    for r in occurrences:
        if r.start >= last_end:
            accepted.append(r)
            last_end = r.end
    return tuple(accepted)


@functools.lru_cache(maxsize=_CACHE_SIZE)
def _resolve_cached(sentence: str, key: CandidateKey) -> tuple[MatchRange, ...]:
    return _resolve(sentence, key)


def resolve_ranges(sentence: str, candidates: Iterable[VocabCandidate]) -> list[MatchRange]:
    """
    Wylicza rozłączne zakresy podświetleń dla jednego zdania.

    Kandydaci z pustą (lub białą) formą są pomijani. Zwraca pustą listę,
    gdy nic nie pasuje.
    """
    return list(_resolve(sentence, _candidate_key(candidates)))


def resolve_article(
    sentences: Sequence[str],
    candidates: Iterable[VocabCandidate],
) -> list[list[MatchRange]]:
    """Zakresy dla każdego zdania artykułu (wyniki cache'owane po parze zdanie/kandydaci)."""
    key = _candidate_key(candidates)
    return [list(_resolve_cached(sentence, key)) for sentence in sentences]


def segment_sentence(sentence: str, ranges: Sequence[MatchRange]) -> list[Segment]:
    """
    Tnie zdanie na naprzemienne fragmenty zwykłe i podświetlone.

    `ranges` muszą być wynikiem resolve_ranges() dla tego samego zdania.
    Puste fragmenty zwykłe nie są emitowane.
    """
    segments: list[Segment] = []
    cursor = 0
    for r in ranges:
        if r.start > cursor:
            segments.append(Segment(sentence[cursor:r.start], cursor, r.start))
        segments.append(Segment(sentence[r.start:r.end], r.start, r.end, r.candidate_index))
        cursor = r.end
    if cursor < len(sentence):
        segments.append(Segment(sentence[cursor:], cursor, len(sentence)))
    return segments


def highlight_sentence(sentence: str, candidates: Iterable[VocabCandidate]) -> list[Segment]:
    """resolve_ranges() + segment_sentence() w jednym wywołaniu."""
    return segment_sentence(sentence, resolve_ranges(sentence, candidates))
