"""
Token budget truncation helpers.

Tokens are approximated as a fixed number of characters, so both helpers are
deterministic for a given input.
"""

CHARS_PER_TOKEN = 4


def tokens_to_chars(tokens: int, chars_per_token: int = CHARS_PER_TOKEN) -> int:
    return max(tokens, 0) * chars_per_token


def truncate_text(text: str, max_tokens: int, chars_per_token: int = CHARS_PER_TOKEN) -> str:
    """Keep the start of the text, dropping whatever exceeds the budget."""
    max_chars = tokens_to_chars(max_tokens, chars_per_token)
    return text[:max_chars]


def truncate_text_start(text: str, max_tokens: int, chars_per_token: int = CHARS_PER_TOKEN) -> str:
    """Keep the end of the text, dropping leading content beyond the budget."""
    max_chars = tokens_to_chars(max_tokens, chars_per_token)
    if max_chars == 0:
        return ""
    return text[-max_chars:]
