from __future__ import annotations

from pathlib import Path

import pytest

from docseed.core.config import Config
from docseed.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("DOCSEED_MAX_INPUT_TOKENS", "DOCSEED_MAX_SURROUNDING_TOKENS", "DOCSEED_REPO_NAME"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = Config()

    assert config.max_input_tokens == 2000
    assert config.max_surrounding_tokens == 500
    assert config.chars_per_token == 4
    assert config.repo_name is None
    assert ".py" in config.supported_extensions


def test_values_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "docseed.yaml"
    path.write_text("max_input_tokens: 100\nmax_surrounding_tokens: 20\nrepo_name: demo\n")

    config = Config(config_path=path)

    assert config.max_input_tokens == 100
    assert config.max_surrounding_tokens == 20
    assert config.repo_name == "demo"


def test_default_file_in_working_directory_is_loaded(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "docseed.yaml").write_text("max_input_tokens: 1500\n")

    assert Config().max_input_tokens == 1500


def test_environment_overrides_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "docseed.yaml"
    path.write_text("max_input_tokens: 100\n")
    monkeypatch.setenv("DOCSEED_MAX_INPUT_TOKENS", "300")
    monkeypatch.setenv("DOCSEED_MAX_SURROUNDING_TOKENS", "50")
    monkeypatch.setenv("DOCSEED_REPO_NAME", "from-env")

    config = Config(config_path=path)

    assert config.max_input_tokens == 300
    assert config.max_surrounding_tokens == 50
    assert config.repo_name == "from-env"


def test_missing_explicit_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        Config(config_path=tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "max_input_tokens: [unclosed\n",
        "max_input_tokens: lots\n",
        "max_input_tokens: 0\n",
        "max_input_tokens: 100\nmax_surrounding_tokens: 200\n",
    ],
)
def test_invalid_files_are_rejected(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content)

    with pytest.raises(ConfigurationError):
        Config(config_path=path)


def test_empty_file_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert Config(config_path=path).max_input_tokens == 2000


def test_lowering_only_the_input_budget_below_surrounding_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("DOCSEED_MAX_INPUT_TOKENS", "300")

    with pytest.raises(ConfigurationError, match="cannot exceed"):
        Config()
