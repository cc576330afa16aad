"""Tests for PatternMatcher."""

import logging

import pytest

from linker.api.match.get_file_extension import get_file_extension
from linker.api.match.PatternMatcher import PatternMatcher
from tests.conftest import make_rule


def spans(matches):
    return [(m.range.start, m.range.end) for m in matches]


def test_text_matches_overlap():
    rule = make_rule(value="aa")
    matches = PatternMatcher([rule]).find_matches("aaaa", ".txt")
    assert [m.range.start for m in matches] == [0, 1, 2]
    assert all(m.highlighted_text == "aa" for m in matches)


def test_text_match_is_case_sensitive_by_default():
    rule = make_rule(value="Example")
    assert [m.highlighted_text for m in PatternMatcher([rule]).find_matches("example EXAMPLE Example", "")] == [
        "Example"
    ]


def test_text_match_case_insensitive_reports_document_text():
    rule = make_rule(value="todo", caseSensitive=False)
    matches = PatternMatcher([rule]).find_matches("TODO and Todo", "")
    assert [m.highlighted_text for m in matches] == ["TODO", "Todo"]


def test_text_value_with_regex_metacharacters_is_literal():
    rule = make_rule(value="a.b")
    assert spans(PatternMatcher([rule]).find_matches("axb a.b", "")) == [(4, 7)]


def test_regex_is_case_insensitive_by_default():
    rule = make_rule(type="regex", value="issue-\\d+")
    matches = PatternMatcher([rule]).find_matches("ISSUE-12 issue-3", "")
    assert [m.highlighted_text for m in matches] == ["ISSUE-12", "issue-3"]


def test_regex_case_sensitive_when_requested():
    rule = make_rule(type="regex", value="issue-\\d+", caseSensitive=True)
    matches = PatternMatcher([rule]).find_matches("ISSUE-12 issue-3", "")
    assert [m.highlighted_text for m in matches] == ["issue-3"]


def test_regex_capture_groups():
    rule = make_rule(type="regex", value="#(\\d+)")
    (match,) = PatternMatcher([rule]).find_matches("see #42", "")
    assert match.full_match == "#42"
    assert match.capture_groups == ("#42", "42")
    assert match.highlighted_text == "#42"


def test_highlight_group():
    rule = make_rule(type="regex", value="issue-(\\d+)", highlightGroup=1)
    text = "fix issue-77 now"
    (match,) = PatternMatcher([rule]).find_matches(text, "")
    assert match.highlighted_text == "77"
    assert match.range.start == text.index("77")
    assert match.range.end == text.index("77") + 2
    assert match.full_match == "issue-77"


def test_highlight_group_not_participating_falls_back_to_whole_match():
    rule = make_rule(type="regex", value="foo(bar)?", highlightGroup=1)
    (match,) = PatternMatcher([rule]).find_matches("foo", "")
    assert match.highlighted_text == "foo"
    assert (match.range.start, match.range.end) == (0, 3)


def test_highlight_group_out_of_range_uses_whole_match():
    rule = make_rule(type="regex", value="ab", highlightGroup=3)
    (match,) = PatternMatcher([rule]).find_matches("xab", "")
    assert match.highlighted_text == "ab"


def test_js_named_groups_are_accepted():
    rule = make_rule(type="regex", value="(?<user>\\w+)/(?<repo>\\w+)", highlightGroup=2)
    (match,) = PatternMatcher([rule]).find_matches("org/project", "")
    assert match.highlighted_text == "project"


def test_invalid_regex_is_skipped(caplog):
    bad = make_rule(name="bad", type="regex", value="(unclosed")
    good = make_rule(name="good", value="hello")
    with caplog.at_level(logging.WARNING):
        matches = PatternMatcher([bad, good]).find_matches("hello", "")
    assert [m.rule.name for m in matches] == ["good"]
    assert "Invalid regex pattern" in caplog.text


def test_context_before_and_after():
    rule = make_rule(value="TODO", context={"before": "// ", "after": ":"})
    text = "TODO: x\n// TODO: y\n// TODO z"
    matches = PatternMatcher([rule]).find_matches(text, "")
    assert spans(matches) == [(text.index("// TODO:") + 3, text.index("// TODO:") + 7)]


def test_context_before_at_document_start():
    rule = make_rule(value="TODO", context={"before": "// "})
    assert PatternMatcher([rule]).find_matches("TODO", "") == []


def test_regex_after_context_is_read_past_source_length():
    # "v\d+" is four characters long, so "after" is read at match start + 4
    rule = make_rule(type="regex", value="v\\d+", context={"after": ")"})
    assert PatternMatcher([rule]).find_matches("(v12) (v3", "") == []

    rule = make_rule(type="regex", value="ab?", context={"after": "Z"})
    assert PatternMatcher([rule]).find_matches("aZ abZ", "") == []

    rule = make_rule(type="regex", value="\\d+", context={"after": "!"})
    text = "7ab!"
    (match,) = PatternMatcher([rule]).find_matches(text, "")
    assert match.highlighted_text == "7"


def test_regex_before_context_is_checked_at_match_start():
    rule = make_rule(type="regex", value="v\\d+", context={"before": "("})
    matches = PatternMatcher([rule]).find_matches("(v12) v3", "")
    assert [m.highlighted_text for m in matches] == ["v12"]


def test_file_extension_gate():
    rule = make_rule(value="config.json", fileExtensions=[".py", ".ts"])
    matcher = PatternMatcher([rule])
    assert len(matcher.find_matches("load config.json", ".py")) == 1
    assert matcher.find_matches("load config.json", ".md") == []
    assert matcher.find_matches("load config.json", "") == []


def test_line_pattern_one_match_per_line():
    rule = make_rule(type="line", value="FIXME")
    text = "a FIXME FIXME\nnothing\nb FIXME"
    matches = PatternMatcher([rule]).find_matches(text, "")
    assert spans(matches) == [(2, 7), (text.index("b FIXME") + 2, len(text))]


def test_line_pattern_repeated_line_reports_first_position():
    rule = make_rule(type="line", value="x")
    matches = PatternMatcher([rule]).find_matches("x\nx", "")
    assert spans(matches) == [(0, 1), (0, 1)]


def test_order_follows_rules_then_patterns():
    first = make_rule(name="first", value="b")
    second = make_rule(name="second", value="a")
    matches = PatternMatcher([first, second]).find_matches("ab", "")
    assert [m.rule.name for m in matches] == ["first", "second"]


@pytest.mark.parametrize(
    "pattern",
    [
        {"type": "text", "value": "lo"},
        {"type": "regex", "value": "l+o"},
        {"type": "line", "value": "wor"},
    ],
)
def test_ranges_are_in_bounds_and_cover_highlighted_text(pattern):
    rule = make_rule(**pattern)
    text = "hello\nworld lo"
    for match in PatternMatcher([rule]).find_matches(text, ""):
        assert 0 <= match.range.start <= match.range.end <= len(text)
        assert text[match.range.start : match.range.end] == match.highlighted_text


def test_find_matches_is_repeatable():
    matcher = PatternMatcher([make_rule(value="a"), make_rule(type="regex", value="b+")])
    text = "abba"
    assert matcher.find_matches(text, "") == matcher.find_matches(text, "")


def test_rules_argument_overrides_matcher_rules():
    matcher = PatternMatcher([make_rule(value="a")])
    other = make_rule(name="other", value="b")
    assert [m.rule.name for m in matcher.find_matches("ab", "", [other])] == ["other"]


def test_update_rules():
    matcher = PatternMatcher()
    assert matcher.find_matches("example", "") == []
    matcher.update_rules([make_rule()])
    assert len(matcher.rules) == 1
    assert len(matcher.find_matches("example", "")) == 1


def test_match_at_offset_inclusive_bounds():
    matcher = PatternMatcher([make_rule(value="link")])
    text = "a link here"
    start = text.index("link")
    assert matcher.match_at_offset(text, start) is not None
    assert matcher.match_at_offset(text, start + 4) is not None
    assert matcher.match_at_offset(text, start - 1) is None


def test_matches_at_offset_returns_overlapping():
    matcher = PatternMatcher([make_rule(name="a", value="ab"), make_rule(name="b", value="bc")])
    assert [m.rule.name for m in matcher.matches_at_offset("abc", 1)] == ["a", "b"]


def test_matches_in_range():
    matcher = PatternMatcher([make_rule(value="x")])
    text = "x..x..x"
    assert spans(matcher.matches_in_range(text, 1, 5)) == [(3, 4)]
    assert len(matcher.matches_in_range(text, 0, len(text))) == 3


def test_match_to_dict():
    rule = make_rule(name="Issue", type="regex", value="#(\\d+)")
    (match,) = PatternMatcher([rule]).find_matches("#5", "")
    data = match.to_dict()
    assert data["name"] == "Issue"
    assert data["type"] == "url"
    assert data["pattern"] == "regex"
    assert data["range"] == {"start": 0, "end": 2}
    assert data["capture_groups"] == ["#5", "5"]


@pytest.mark.parametrize(
    "name,expected",
    [("a.py", ".py"), ("/x/y/z.test.ts", ".ts"), ("Makefile", ""), ("/dir.d/file", "")],
)
def test_get_file_extension(name, expected):
    assert get_file_extension(name) == expected


def test_line_pattern_ignores_case_setting():
    rule = make_rule(type="line", value="fixme", caseSensitive=False)
    assert PatternMatcher([rule]).find_matches("FIXME", "") == []


@pytest.mark.parametrize("text,count", [("// test", 1), ("/* test", 0), ("xtest", 0)])
def test_context_before_comment_marker(text, count):
    rule = make_rule(value="test", context={"before": "// "})
    assert len(PatternMatcher([rule]).find_matches(text, "")) == count
