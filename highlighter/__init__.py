"""
highlighter — podświetlanie słownictwa z odpowiedzi modelu w zdaniach artykułu.

Publiczne API:
  find_occurrences(sentence, surface_form, index) -> list[MatchRange]
  resolve_ranges(sentence, candidates)            -> list[MatchRange]
  resolve_article(sentences, candidates)          -> list[list[MatchRange]]
  segment_sentence(sentence, ranges)              -> list[Segment]
  highlight_sentence(sentence, candidates)        -> list[Segment]
"""

from .resolver import (
    find_occurrences,
    resolve_ranges,
    resolve_article,
    segment_sentence,
    highlight_sentence,
)

__all__ = [
    "find_occurrences",
    "resolve_ranges",
    "resolve_article",
    "segment_sentence",
    "highlight_sentence",
]
