"""
Tokenization of SERP titles and snippets.

Text is lowercased, every character that is not a word character, whitespace,
a hyphen or a German umlaut/eszett is replaced by a space, and the result is
split on whitespace. Short tokens are dropped. There is no stemming and no
Unicode normalization.
"""

import re
from typing import Optional


# Python's \w is Unicode-aware; the umlauts are listed to keep the allowed
# character class explicit.
_DISALLOWED_CHARS = re.compile(r"[^\w\s\-äöüßÄÖÜ]")
_NUMERIC_TOKEN = re.compile(r"^\d+$")

DEFAULT_MIN_TOKEN_LENGTH = 3


def tokenize(
    text: Optional[str],
    min_length: int = DEFAULT_MIN_TOKEN_LENGTH,
    drop_numeric: bool = False,
) -> list[str]:
    """
    Split raw text into lowercase candidate word tokens.

    Args:
        text: Title or snippet text. None and empty strings yield no tokens.
        min_length: Minimum token length to keep. The default of 3 drops
            every token of length two or less.
        drop_numeric: Also drop tokens made only of digits.

    Returns:
        Tokens in their original order.
    """
    if not text:
        return []

    cleaned = _DISALLOWED_CHARS.sub(" ", text.lower())
    tokens = [token for token in cleaned.split() if len(token) >= min_length]

    if drop_numeric:
        tokens = [token for token in tokens if not _NUMERIC_TOKEN.match(token)]

    return tokens
