"""Every third-party import of the package is declared in setup.py."""

import ast
import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]

# import name -> distribution name where they differ
DISTRIBUTIONS = {"yaml": "pyyaml"}


def _install_requires() -> set[str]:
    tree = ast.parse((ROOT / "setup.py").read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.keyword) and node.arg == "install_requires":
            names = ast.literal_eval(node.value)
            return {re.split(r"[<>=!~\[ ]", name, maxsplit=1)[0].lower() for name in names}
    raise AssertionError("install_requires not found in setup.py")


def _imported_modules() -> set[str]:
    modules: set[str] = set()
    for path in (ROOT / "linker").rglob("*.py"):
        for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
            if isinstance(node, ast.Import):
                modules.update(alias.name.split(".")[0] for alias in node.names)
            elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                modules.add(node.module.split(".")[0])
    return modules


def test_third_party_imports_are_declared():
    third_party = {m for m in _imported_modules() if m not in sys.stdlib_module_names and m != "linker"}
    required = _install_requires()
    missing = {DISTRIBUTIONS.get(m, m) for m in third_party} - required
    assert not missing, f"undeclared dependencies: {sorted(missing)}"


def test_cli_dependencies_declared():
    assert {"typer", "click", "rich", "pyyaml"} <= _install_requires()
