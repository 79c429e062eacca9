from __future__ import annotations

import logging
from pathlib import Path

from docseed.core.logger import setup_logging


def test_verbose_sets_debug_on_package_logger(tmp_path: Path) -> None:
    setup_logging(verbose=True, config_path=tmp_path / "missing.yaml")

    assert logging.getLogger("docseed").level == logging.DEBUG


def test_dict_config_is_applied(tmp_path: Path) -> None:
    path = tmp_path / "logging.yaml"
    path.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  docseed.example:\n"
        "    level: ERROR\n"
    )

    setup_logging(verbose=False, config_path=path)

    assert logging.getLogger("docseed.example").level == logging.ERROR
    assert logging.getLogger("docseed").level == logging.INFO
