"""RulesWatcher against a real watchdog observer."""

import time

import pytest

from linker.api.link.LinkScanner import LinkScanner
from linker.api.watch.RulesWatcher import RulesWatcher
from tests.conftest import rule_dict

RULE = rule_dict("Example", "url", "https://example.com", {"type": "text", "value": "example"})


def poll_until(watcher: RulesWatcher, deadline: float = 5.0) -> tuple[bool, bool]:
    end = time.monotonic() + deadline
    while time.monotonic() < end:
        changed = watcher.poll()
        if any(changed):
            return changed
        time.sleep(0.05)
    return False, False


@pytest.mark.timeout(15)
def test_rule_file_edit_is_picked_up(workspace, write_rules):
    write_rules([RULE])
    scanner = LinkScanner.load(str(workspace))
    assert len(scanner.matcher.rules) == 1

    with RulesWatcher(scanner) as watcher:
        time.sleep(0.2)
        write_rules([RULE, {**RULE, "name": "Second"}])
        rules_changed, _ = poll_until(watcher)

    assert rules_changed
    assert [r.name for r in scanner.matcher.rules] == ["Example", "Second"]
    assert len(scanner.find_matches("example", str(workspace / "src" / "a.py"))) == 2


@pytest.mark.timeout(15)
def test_document_edit_is_reported(workspace):
    document = workspace / "src" / "a.py"
    document.write_text("one\n")
    scanner = LinkScanner.load(str(workspace))

    with RulesWatcher(scanner, document, watch_rules=False) as watcher:
        time.sleep(0.2)
        document.write_text("two\n")
        _, document_changed = poll_until(watcher)

    assert document_changed
