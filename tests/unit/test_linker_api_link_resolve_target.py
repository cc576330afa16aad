"""Tests for resolving rule matches and annotation hrefs to targets."""

import pytest

from linker.api.annotation.AnnotationPairer import AnnotationPairer
from linker.api.link.resolve_annotation_target import resolve_annotation_target
from linker.api.link.resolve_target import resolve_target
from linker.api.link.ResolvedTarget import ResolvedTarget
from linker.api.match.PatternMatcher import PatternMatcher
from linker.api.rules.LinkKind import LinkKind
from linker.api.variables.VariableContext import VariableContext
from tests.conftest import make_rule

CONTEXT = VariableContext(workspace_folder="/ws", file="/ws/src/a.py")


def first_match(text: str, **rule):
    return PatternMatcher([make_rule(**rule)]).find_matches(text, ".py")[0]


def test_url_with_capture_group():
    match = first_match(
        "see gh:org/repo", kind="url", target="https://github.com/${1}", type="regex", value=r"gh:(\S+)"
    )
    resolved = resolve_target(match, CONTEXT)
    assert resolved == ResolvedTarget(kind=LinkKind.URL, target="https://github.com/org/repo")
    assert resolved.preview == "URL: https://github.com/org/repo"


def test_capture_groups_not_available_to_text_patterns():
    match = first_match("docs", kind="file", target="${workspaceFolder}/${1}.md", value="docs")
    assert resolve_target(match, CONTEXT).target == "/ws/${1}.md"


def test_invalid_url():
    match = first_match("example", kind="url", target="not a url")
    with pytest.raises(ValueError, match="Invalid URL"):
        resolve_target(match, CONTEXT)


def test_file_target_with_prefix():
    match = first_match("helper", kind="file", target="~:helper.py", value="helper")
    resolved = resolve_target(match, CONTEXT)
    assert resolved.kind == LinkKind.FILE
    assert resolved.target == "/ws/src/helper.py"
    assert resolved.is_text_file
    assert resolved.preview == "File: /ws/src/helper.py"


def test_file_target_line_number_from_match():
    match = first_match(
        "error in main.py:42",
        kind="file",
        target="${workspaceFolder}/${1}",
        type="regex",
        value=r"(\w+\.py):(\d+)",
    )
    resolved = resolve_target(match, CONTEXT)
    assert resolved.target == "/ws/main.py"
    assert resolved.line_number == 42


def test_binary_file_target():
    match = first_match("logo", kind="file", target="#:assets/logo.png", value="logo")
    assert resolve_target(match, CONTEXT).is_text_file is False


def test_relative_file_without_workspace():
    match = first_match("example", kind="file", target="docs/a.md")
    with pytest.raises(ValueError, match="No workspace folder found"):
        resolve_target(match, VariableContext())


def annotation(href: str):
    pairer = AnnotationPairer()
    (found,) = pairer.find_annotations(f"// @link [#x]({href})\nx = 1")
    return found


def test_annotation_url():
    resolved = resolve_annotation_target(annotation("https://example.com/x"))
    assert resolved.kind == LinkKind.URL
    assert resolved.target == "https://example.com/x"


def test_annotation_absolute_file_with_line():
    resolved = resolve_annotation_target(annotation("/ws/src/x.py:12"))
    assert resolved.target == "/ws/src/x.py"
    assert resolved.line_number == 12


def test_annotation_relative_file_joins_workspace():
    # no document or workspace while pairing, so the href stays relative
    resolved = resolve_annotation_target(annotation("./x.py"), "/ws")
    assert resolved.target == "/ws/x.py"
    assert resolved.line_number is None


@pytest.mark.parametrize("href", ["mailto:someone@example.com", "x.py", "ftp://host/file"])
def test_annotation_unsupported(href):
    with pytest.raises(ValueError, match="Unsupported link type"):
        resolve_annotation_target(annotation(href))


def test_resolved_target_to_dict():
    data = ResolvedTarget(kind=LinkKind.FILE, target="/a.py", line_number=3).to_dict()
    assert data == {"type": "file", "target": "/a.py", "line_number": 3, "is_text_file": True, "exists": False}


def test_resolved_target_exists(tmp_path):
    present = tmp_path / "a.py"
    present.write_text("")
    assert ResolvedTarget(kind=LinkKind.FILE, target=str(present)).exists is True
    assert ResolvedTarget(kind=LinkKind.URL, target="https://example.com").exists is None
