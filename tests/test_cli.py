"""Komendy nhkr: crawl / extract / analyze / highlight / feed."""

import json

import pytest

from data_model.articles import ExtractedArticle
from html_parser.fetch import FetchFailed
from nhkr.cli import build_parser, main
from nhkr.commands import analyze as cmd_analyze
from nhkr.commands import feed as cmd_feed
from nhkr.commands import highlight as cmd_highlight

from tests.test_parser import ARTICLE_HTML
from tests.test_rss import FEED_XML

ANALYSIS = {
    "vocab": [
        {"surfaceForm": "市場", "reading": "しじょう", "meaningVi": "thị trường"},
        {"surfaceForm": "外国為替市場", "reading": "がいこくかわせしじょう", "meaningVi": "thị trường ngoại hối"},
    ],
    "grammar": [{"pattern": "〜ています", "explanationVi": "đang"}],
}


def test_parser_registers_all_commands():
    parser = build_parser()
    for argv in (
        ["feed"],
        ["crawl", "https://example.com"],
        ["extract", "a.html"],
        ["analyze", "a.json"],
        ["highlight", "a.json", "b.json"],
    ):
        assert parser.parse_args(argv).command == argv[0]


def test_extract_writes_article_json(tmp_path):
    html_path = tmp_path / "page.html"
    html_path.write_text(ARTICLE_HTML, encoding="utf-8")
    out = tmp_path / "out.json"

    main(["extract", str(html_path), "--out", str(out), "--source-url", "https://example.com/a"])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["sourceUrl"] == "https://example.com/a"
    assert data["article"]["title"] == "円相場 一時1ドル＝150円台に"
    assert data["article"]["contentSentences"][2] == "【背景】"
    assert "crawledAt" in data


def test_extract_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main(["extract", str(tmp_path / "missing.html")])


def test_crawl_uses_parser(tmp_path, monkeypatch):
    article = ExtractedArticle(title="T", content="本文。", paragraphs=("本文。",), sentences=("本文。",))
    monkeypatch.setattr("html_parser.parser.parse_article_url", lambda url, timeout: article)
    out = tmp_path / "crawl.json"

    main(["crawl", "https://www3.nhk.or.jp/news/html/20240101/k1.html", "--out", str(out), "--show"])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["article"]["contentSentences"] == ["本文。"]


def test_crawl_fetch_failure_exits(monkeypatch):
    def failing(url, timeout):
        raise FetchFailed(url, 500, "boom")

    monkeypatch.setattr("html_parser.parser.parse_article_url", failing)
    with pytest.raises(SystemExit):
        main(["crawl", "https://example.com/a.html"])


def _write_article(tmp_path):
    html_path = tmp_path / "page.html"
    html_path.write_text(ARTICLE_HTML, encoding="utf-8")
    out = tmp_path / "article.json"
    main(["extract", str(html_path), "--out", str(out)])
    return out


def test_analyze_writes_normalized_result(tmp_path, monkeypatch):
    article_path = _write_article(tmp_path)
    prompts = []

    def fake_call(prompt, system_instruction, model):
        prompts.append((prompt, system_instruction))
        return "```json\n" + json.dumps(ANALYSIS, ensure_ascii=False) + "\n```"

    monkeypatch.setattr(cmd_analyze, "call_gemini", fake_call)
    out = tmp_path / "analysis.json"

    main(["analyze", str(article_path), "--out", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [v["surfaceForm"] for v in data["vocab"]] == ["市場", "外国為替市場"]
    assert "市場関係者は今後の動向を注視しています。" in prompts[0][0]
    assert prompts[0][1] == cmd_analyze.SYSTEM_PROMPT


def test_analyze_unparseable_response_exits(tmp_path, monkeypatch):
    article_path = _write_article(tmp_path)
    monkeypatch.setattr(cmd_analyze, "call_gemini", lambda prompt, system_instruction, model: "nope")
    with pytest.raises(SystemExit):
        main(["analyze", str(article_path)])


def test_highlight_renders_longest_matches(tmp_path, capsys):
    article_path = _write_article(tmp_path)
    analysis_path = tmp_path / "analysis.json"
    analysis_path.write_text(json.dumps(ANALYSIS, ensure_ascii=False), encoding="utf-8")

    main(["highlight", str(article_path), str(analysis_path), "--vocab"])

    out = capsys.readouterr().out
    assert "外国為替市場[1]" in out
    assert "市場[0]関係者" in out


def test_render_sentence_markers():
    from data_model.vocab import Segment

    segments = [Segment("日本", 0, 2, 3), Segment("の", 2, 3)]
    assert cmd_highlight.render_sentence("日本の", segments).plain == "日本[3]の"
    assert cmd_highlight.render_sentence("日本の", segments, markers=False).plain == "日本の"


def test_feed_lists_items(monkeypatch, capsys):
    from news_feed import parse_feed

    monkeypatch.setattr(cmd_feed, "fetch_feed", lambda url: parse_feed(FEED_XML))
    main(["feed", "--limit", "2"])

    out = capsys.readouterr().out
    assert "全国で初雪" in out
    assert "選手権 開幕" not in out
    assert "経済=2" in out


def test_show_table_prints_bracketed_text_literally(capsys):
    from nhkr.commands import crawl as cmd_crawl

    article = ExtractedArticle(title="[b]速報", sentences=("速報[/b]です。",), tags=("[/i]",))
    cmd_crawl._show_table(article)

    out = capsys.readouterr().out
    assert "速報[/b]です。" in out
    assert "[b]速報" in out


def test_highlight_vocab_table_with_bracketed_entries(tmp_path, capsys):
    article_path = _write_article(tmp_path)
    analysis = {
        "vocab": [{"surfaceForm": "市場", "reading": "[/b]", "meaningVi": "chợ [/i] thị trường"}],
        "grammar": [{"pattern": "[x]", "explanationVi": "[/y]"}],
    }
    analysis_path = tmp_path / "analysis.json"
    analysis_path.write_text(json.dumps(analysis, ensure_ascii=False), encoding="utf-8")

    main(["highlight", str(article_path), str(analysis_path), "--vocab"])

    out = capsys.readouterr().out
    assert "chợ [/i] thị trường" in out
    assert "[x]: [/y]" in out


def test_read_article_accepts_wrapper_and_bare_object(tmp_path):
    from nhkr.commands.crawl import read_article

    bare = tmp_path / "bare.json"
    bare.write_text(json.dumps({"title": "T", "contentSentences": ["文。"]}, ensure_ascii=False), encoding="utf-8")
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"article": {"title": "T"}, "sourceUrl": ""}), encoding="utf-8")

    assert read_article(bare).sentences == ("文。",)
    assert read_article(wrapped).title == "T"


class TestFeedItem:
    def setup_method(self):
        from news_feed import parse_feed

        self.items = parse_feed(FEED_XML)

    def test_item_with_related(self, monkeypatch, capsys):
        monkeypatch.setattr(cmd_feed, "fetch_feed", lambda url: self.items)
        main(["feed", "--item", "全国で初雪"])

        out = capsys.readouterr().out
        assert "各地で雪が降りました。" in out
        assert "Powiązane" in out
        assert "円相場" in out
        assert "選手権 開幕" in out

    def test_related_limit(self, monkeypatch, capsys):
        monkeypatch.setattr(cmd_feed, "fetch_feed", lambda url: self.items)
        main(["feed", "--item", "全国で初雪", "--limit", "1"])

        out = capsys.readouterr().out
        assert "円相場" in out
        assert "選手権 開幕" not in out

    def test_unknown_item_exits(self, monkeypatch):
        monkeypatch.setattr(cmd_feed, "fetch_feed", lambda url: self.items)
        with pytest.raises(SystemExit):
            main(["feed", "--item", "missing"])
