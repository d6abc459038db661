"""Rozmieszczenie podświetleń: rozłączność, pokrycie, najdłuższe dopasowanie."""

import pytest

from data_model.vocab import MatchRange, VocabCandidate
from highlighter import (
    find_occurrences,
    highlight_sentence,
    resolve_article,
    resolve_ranges,
    segment_sentence,
)


def _candidates(*forms: str) -> list[VocabCandidate]:
    return [VocabCandidate(surface_form=f, index=i) for i, f in enumerate(forms)]


def _assert_disjoint_sorted(ranges: list[MatchRange]) -> None:
    for a, b in zip(ranges, ranges[1:]):
        assert a.start < b.start
        assert a.end <= b.start


SENTENCES = [
    "東京都に行く",
    "今日は晴れです。",
    "日本の経済は日本銀行の政策に左右される。",
    "ああああ",
    "",
    "abcABCabc",
]
CANDIDATE_LISTS = [
    _candidates("東京", "東京都"),
    _candidates("日本", "日本銀行", "銀行", "政策"),
    _candidates("ああ", "あ"),
    _candidates("abc", "ABC", "cA", "bcAB"),
    _candidates(),
]


class TestFindOccurrences:
    def test_all_occurrences(self):
        assert find_occurrences("日本と日本", "日本", 3) == [
            MatchRange(0, 2, 3),
            MatchRange(3, 5, 3),
        ]

    def test_overlapping_occurrences(self):
        assert [r.start for r in find_occurrences("ああああ", "ああ", 0)] == [0, 1, 2]

    def test_case_sensitive_literal(self):
        assert find_occurrences("a.c abc ABC", "abc", 0) == [MatchRange(4, 7, 0)]
        assert find_occurrences("a.c", ".", 0) == [MatchRange(1, 2, 0)]

    def test_empty_surface_form(self):
        assert find_occurrences("なにか", "", 0) == []


class TestResolveRanges:
    def test_longest_match_preferred(self):
        ranges = resolve_ranges("東京都に行く", _candidates("東京", "東京都"))
        assert ranges == [MatchRange(0, 3, 1)]

    def test_no_match_is_empty(self):
        assert resolve_ranges("今日は晴れです。", [VocabCandidate("雨", 0)]) == []

    def test_leftmost_wins_over_longer_later(self):
        # 銀行 zaczyna się wcześniej, więc nakładające się 行く odpada
        ranges = resolve_ranges("銀行く", _candidates("行く", "銀行"))
        assert ranges == [MatchRange(0, 2, 1)]

    def test_rejected_overlap_not_truncated(self):
        ranges = resolve_ranges("日本銀行", _candidates("日本", "本銀行"))
        assert ranges == [MatchRange(0, 2, 0)]

    def test_adjacent_ranges_both_kept(self):
        ranges = resolve_ranges("日本銀行", _candidates("日本", "銀行"))
        assert ranges == [MatchRange(0, 2, 0), MatchRange(2, 4, 1)]

    def test_whitespace_candidates_ignored(self):
        sentence = "a b"
        assert resolve_ranges(sentence, [VocabCandidate(" ", 0), VocabCandidate("", 1)]) == []

    def test_identical_surface_forms_keep_one(self):
        ranges = resolve_ranges("経済の話", [VocabCandidate("経済", 7), VocabCandidate("経済", 2)])
        assert len(ranges) == 1
        assert (ranges[0].start, ranges[0].end) == (0, 2)
        assert ranges[0].candidate_index in (7, 2)

    def test_empty_sentence(self):
        assert resolve_ranges("", _candidates("何か")) == []

    def test_payload_ignored(self):
        a = resolve_ranges("東京", [VocabCandidate("東京", 0, payload={"x": 1})])
        b = resolve_ranges("東京", [VocabCandidate("東京", 0, payload=None)])
        assert a == b

    @pytest.mark.parametrize("sentence", SENTENCES)
    @pytest.mark.parametrize("candidates", CANDIDATE_LISTS)
    def test_disjoint_and_sorted(self, sentence, candidates):
        _assert_disjoint_sorted(resolve_ranges(sentence, candidates))

    @pytest.mark.parametrize("sentence", SENTENCES)
    @pytest.mark.parametrize("candidates", CANDIDATE_LISTS)
    def test_deterministic(self, sentence, candidates):
        assert resolve_ranges(sentence, candidates) == resolve_ranges(sentence, list(candidates))


class TestSegmentSentence:
    @pytest.mark.parametrize("sentence", SENTENCES)
    @pytest.mark.parametrize("candidates", CANDIDATE_LISTS)
    def test_segments_cover_sentence_exactly(self, sentence, candidates):
        segments = segment_sentence(sentence, resolve_ranges(sentence, candidates))
        assert "".join(s.text for s in segments) == sentence
        cursor = 0
        for seg in segments:
            assert seg.start == cursor
            assert sentence[seg.start:seg.end] == seg.text
            cursor = seg.end
        assert cursor == len(sentence)

    def test_alternating_layout(self):
        segments = highlight_sentence("日本の経済", _candidates("日本", "経済"))
        assert [(s.text, s.candidate_index) for s in segments] == [
            ("日本", 0),
            ("の", None),
            ("経済", 1),
        ]

    def test_plain_sentence_single_segment(self):
        segments = highlight_sentence("今日は晴れです。", _candidates("雨"))
        assert len(segments) == 1
        assert not segments[0].highlighted
        assert segments[0].text == "今日は晴れです。"

    def test_empty_sentence_no_segments(self):
        assert segment_sentence("", []) == []


def test_resolve_article_per_sentence():
    sentences = ["東京都に行く", "今日は晴れです。", "東京と大阪"]
    candidates = _candidates("東京", "東京都", "大阪")
    layouts = resolve_article(sentences, candidates)
    assert layouts == [
        [MatchRange(0, 3, 1)],
        [],
        [MatchRange(0, 2, 0), MatchRange(3, 5, 2)],
    ]
    # Ponowne wywołanie (z cache) daje ten sam wynik.
    assert resolve_article(sentences, candidates) == layouts
