import ast
from pathlib import Path

import pytest

REPOSITORIES_DIR = Path(__file__).resolve().parents[3] / "pinkstar" / "repositories"
FORBIDDEN_CALLS = {"commit", "rollback"}


def _session_calls(tree: ast.AST) -> list[str]:
    calls: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call) or not isinstance(node.func, ast.Attribute):
            continue
        if node.func.attr not in FORBIDDEN_CALLS:
            continue
        target = node.func.value
        if isinstance(target, ast.Attribute) and target.attr == "session":
            calls.append(node.func.attr)
    return calls


@pytest.mark.unit
def test_repositories_do_not_commit_or_rollback() -> None:
    offenders: dict[str, list[str]] = {}
    for path in sorted(REPOSITORIES_DIR.glob("*.py")):
        calls = _session_calls(ast.parse(path.read_text(encoding="utf-8")))
        if calls:
            offenders[path.name] = calls

    assert offenders == {}
