"""
Token Counter for the Chunking Pipeline

The assembler never calls a tokenizer directly. It receives a token counting
strategy, a plain ``Callable[[str], int]``:

- ``estimate_tokens`` (default, "approx"): ceil(len(text) / 4), roughly four
  characters per token. Deterministic and dependency-free, which keeps chunk
  boundaries reproducible across environments.
- ``count_tokens`` ("tiktoken"): exact counts with the cl100k_base encoding.

Usage:
    from chunking.token_counter import estimate_tokens, get_token_counter

    n = estimate_tokens("Short sentence one.")   # 5
    counter = get_token_counter("tiktoken")
"""

import math
from typing import Callable

import tiktoken

from .exceptions import InvalidInputError

TokenCounter = Callable[[str], int]

CHARS_PER_TOKEN = 4

# Singleton encoder - initialized once, reused across calls.
_encoder: tiktoken.Encoding | None = None


def _get_encoder() -> tiktoken.Encoding:
    """Get or initialize the tiktoken encoder (singleton)."""
    global _encoder
    if _encoder is None:
        _encoder = tiktoken.get_encoding("cl100k_base")
    return _encoder


def estimate_tokens(text: str) -> int:
    """
    Approximate the number of tokens in a text string.

    Args:
        text: The text to measure.

    Returns:
        ceil(len(text) / 4); 0 for an empty string.
    """
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def count_tokens(text: str) -> int:
    """
    Count the number of tokens in a text string with tiktoken.

    Args:
        text: The text to tokenize.

    Returns:
        Number of tokens.
    """
    if not text:
        return 0
    return len(_get_encoder().encode(text))


def count_tokens_batch(
    texts: list[str],
    counter: TokenCounter = estimate_tokens,
) -> list[int]:
    """Count tokens for a list of texts, one count per input text."""
    return [counter(t) for t in texts]


_STRATEGIES: dict[str, TokenCounter] = {
    "approx": estimate_tokens,
    "tiktoken": count_tokens,
}


def get_token_counter(name: str) -> TokenCounter:
    """Resolve a token counting strategy by name ("approx" or "tiktoken")."""
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise InvalidInputError(
            f"Unknown tokenizer, expected one of {sorted(_STRATEGIES)}",
            field="tokenizer",
            value=name,
        ) from None
