"""
Text normalization and tokenization.
Shared by the signal extractor (substring haystack) and the TF-IDF engine.
"""

import re
from typing import Iterable, List, Optional

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """
    Lowercase text, replace non-alphanumerics with spaces and collapse whitespace.
    
    Args:
        text: Raw text (None is treated as empty)
        
    Returns:
        Normalized single-spaced string, empty for blank input
    """
    if not text:
        return ""
    text = _NON_ALNUM.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(
    text: Optional[str],
    stopwords: Iterable[str] = (),
    min_length: int = 2
) -> List[str]:
    """
    Split text into lowercase alphanumeric tokens for vectorization.
    
    Args:
        text: Raw text
        stopwords: Tokens to drop
        min_length: Tokens shorter than this are dropped
        
    Returns:
        Token list in input order (repeats kept)
    """
    normalized = normalize(text)
    if not normalized:
        return []

    stop = stopwords if isinstance(stopwords, (set, frozenset)) else frozenset(stopwords)
    return [
        token for token in normalized.split(" ")
        if len(token) >= min_length and token not in stop
    ]
