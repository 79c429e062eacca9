from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from docseed.core.config import Config
from docseed.models.interaction import ASSISTANT, HUMAN
from docseed.services.codebase_context import LocalCodebaseContext, NullCodebaseContext, extract_terms


@pytest.fixture
def repo(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DOCSEED_REPO_NAME", raising=False)
    (tmp_path / "billing").mkdir()
    (tmp_path / "billing" / "invoice.py").write_text(
        "def compute_total(items, tax_rate):\n    return sum(items) * (1 + tax_rate)\n"
    )
    (tmp_path / "billing" / "tax.py").write_text("def apply(tax_rate):\n    return tax_rate\n")
    (tmp_path / "readme.md").write_text("Nothing relevant here.\n")
    (tmp_path / "target.py").write_text("total = compute_total(items, tax_rate)\n")
    return tmp_path


def test_extract_terms_ignores_short_tokens() -> None:
    assert extract_terms("a = compute_Total(x, items)") == {"compute_total", "items"}


def test_null_context_is_never_connected() -> None:
    context = NullCodebaseContext()

    assert context.check_embeddings_connection() is False
    assert asyncio.run(context.get_context_messages("anything", 4, 0)) == []


def test_empty_repo_is_not_connected(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert LocalCodebaseContext(Config()).check_embeddings_connection() is False


def test_search_ranks_by_shared_terms_and_excludes_selection_file(repo: Path) -> None:
    context = LocalCodebaseContext(Config(), repo, exclude="target.py")

    results = context.search("compute_total(items, tax_rate)", limit=4)

    assert results == [("billing/invoice.py", 3), ("billing/tax.py", 1)]


def test_search_respects_limit(repo: Path) -> None:
    context = LocalCodebaseContext(Config(), repo)

    results = context.search("compute_total items tax_rate", limit=1)

    assert [path for path, _ in results] == ["billing/invoice.py"]


def test_context_messages_are_code_snippet_exchanges(repo: Path) -> None:
    context = LocalCodebaseContext(Config(), repo, exclude="target.py")

    assert context.check_embeddings_connection() is True
    messages = asyncio.run(context.get_context_messages("compute_total", 4, 0))

    assert [m.speaker for m in messages] == [HUMAN, ASSISTANT]
    assert messages[0].text.startswith("Use following code snippet from file `billing/invoice.py`:\n```python\n")
    assert messages[0].file.file_name == "billing/invoice.py"
    assert messages[1].text == "Ok."


def test_exclusion_matches_the_exact_repo_path_only(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "lib").mkdir()
    (tmp_path / "util.py").write_text("def compute_total(items):\n    return sum(items)\n")
    (tmp_path / "lib" / "util.py").write_text("def compute_total(items):\n    return len(items)\n")

    top_level = LocalCodebaseContext(Config(), tmp_path, exclude="util.py")
    nested = LocalCodebaseContext(Config(), tmp_path, exclude="lib/util.py")

    assert top_level.search("compute_total items", 4) == [("lib/util.py", 2)]
    assert nested.search("compute_total items", 4) == [("util.py", 2)]


def test_absolute_exclude_is_made_repo_relative(repo: Path) -> None:
    context = LocalCodebaseContext(Config(), repo, exclude=str(repo / "billing" / "invoice.py"))

    assert [path for path, _ in context.search("compute_total tax_rate", 4)] == ["target.py", "billing/tax.py"]


def test_exclude_outside_repo_excludes_nothing(repo: Path, tmp_path_factory) -> None:
    outside = tmp_path_factory.mktemp("elsewhere") / "target.py"
    context = LocalCodebaseContext(Config(), repo, exclude=str(outside))

    assert context.exclude is None
    assert "target.py" in [path for path, _ in context.search("compute_total", 4)]
