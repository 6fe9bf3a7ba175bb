"""
Whitespace tokenizer for chain training and continuation cues.

Punctuation stays attached to its word ("malorum." is one token), so
sentence boundaries can be recovered from token shape alone.
"""
from __future__ import annotations

from typing import List

# Characters which end a sentence when they close a token.
SENTENCE_END = (".", "!", "?")


def tokenize(text: str) -> List[str]:
    """
    Split text into word tokens.

    Args:
        text: Any text; runs of whitespace collapse

    Returns:
        Tokens in original order, verbatim (no case or accent folding)
    """
    return text.split()


def ends_sentence(token: str) -> bool:
    """Check if a token closes a sentence."""
    return token.endswith(SENTENCE_END)


def is_capitalized(token: str) -> bool:
    """Default sentence-start test: the first character is uppercase."""
    return token[:1].isupper()
