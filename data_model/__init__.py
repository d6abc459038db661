"""
data_model — struktury danych nhk-reader.

Użycie:
  from data_model import ExtractedArticle, VocabCandidate, MatchRange, ...

Moduły:
  articles — ExtractedArticle
  vocab    — Example, VocabEntry, GrammarEntry, AnalysisResult,
             VocabCandidate, MatchRange, Segment
  feed     — FeedItem

Mapowanie na JSON:
  ExtractedArticle.to_dict() → title, content, contentParagraphs,
                               contentSentences, publishDate, author,
                               category, imageUrl, summary, tags
  AnalysisResult             → {"vocab": [...], "grammar": [...]}
"""

from .articles import ExtractedArticle
from .vocab import (
    Example,
    VocabEntry,
    GrammarEntry,
    AnalysisResult,
    VocabCandidate,
    MatchRange,
    Segment,
)
from .feed import FeedItem

__all__ = [
    # articles
    "ExtractedArticle",
    # vocab
    "Example",
    "VocabEntry",
    "GrammarEntry",
    "AnalysisResult",
    "VocabCandidate",
    "MatchRange",
    "Segment",
    # feed
    "FeedItem",
]
