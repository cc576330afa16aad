"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from pathlib import Path

import pytest

from linker.api.rules.LinkRule import LinkRule


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests touching the filesystem watcher")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def make_rule(name: str = "rule", kind: str = "url", target: str = "https://example.com", **pattern) -> LinkRule:
    """Build a single-pattern rule from keyword arguments of the pattern."""
    pattern.setdefault("type", "text")
    pattern.setdefault("value", "example")
    return LinkRule.model_validate({"name": name, "type": kind, "target": target, "patterns": [pattern]})


def rule_dict(name: str, kind: str, target: str, *patterns: dict) -> dict:
    return {"name": name, "type": kind, "target": target, "patterns": list(patterns)}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def linker_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LINKER_HOME at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("LINKER_HOME", str(home))
    return home


@pytest.fixture
def workspace(tmp_path: Path, linker_home: Path) -> Path:
    """An empty workspace root with an isolated linker home."""
    root = tmp_path / "ws"
    (root / "src").mkdir(parents=True)
    return root


@pytest.fixture
def write_rules(workspace: Path):
    """Write a rule file into the workspace and return its path."""

    def _write(rules) -> Path:
        path = workspace / ".linker" / "links.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rules if isinstance(rules, str) else json.dumps(rules), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
