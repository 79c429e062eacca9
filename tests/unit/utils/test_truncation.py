from __future__ import annotations

from docseed.utils.truncation import tokens_to_chars, truncate_text, truncate_text_start


def test_short_text_is_unchanged() -> None:
    assert truncate_text("hello", 10) == "hello"
    assert truncate_text_start("hello", 10) == "hello"


def test_truncate_text_keeps_the_start() -> None:
    text = "0123456789" * 2

    assert truncate_text(text, 3) == "012345678901"


def test_truncate_text_start_keeps_the_end() -> None:
    text = "abcdefghijklmnopqrst"

    assert truncate_text_start(text, 2) == "mnopqrst"


def test_custom_chars_per_token() -> None:
    assert tokens_to_chars(5, chars_per_token=2) == 10
    assert truncate_text("abcdefghij", 2, chars_per_token=3) == "abcdef"
    assert truncate_text_start("abcdefghij", 2, chars_per_token=3) == "efghij"


def test_zero_budget_yields_empty_text() -> None:
    assert truncate_text("abc", 0) == ""
    assert truncate_text_start("abc", 0) == ""
    assert truncate_text_start("abc", -1) == ""
