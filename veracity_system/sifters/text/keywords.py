"""Shared lexical features: keyword extraction and well-established fact detection.

The directness estimator, stance classifier and claim planner all use
extract_keywords so their notion of a "claim keyword" stays identical.
"""

import re

from veracity_system.config.lexicon import (
    ARITHMETIC_PATTERN,
    STOP_WORDS,
    WELL_ESTABLISHED_FACT_PATTERNS,
)

MAX_KEYWORDS = 8
MIN_KEYWORD_LENGTH = 3

_WORD_SPLIT = re.compile(r"\W+")
# A period between two digits is a decimal point, not a clause boundary
_CLAUSE_SPLIT = re.compile(r"(?:[,;:!?()]|(?<!\d)\.|\.(?!\d))+")
_ARITHMETIC_RE = re.compile(ARITHMETIC_PATTERN, re.IGNORECASE)
_FACT_PATTERNS = [re.compile(p, re.IGNORECASE) for p in WELL_ESTABLISHED_FACT_PATTERNS]


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Stop-word filtered tokens longer than two characters, in claim order.

    Arithmetic claims ("2 + 2 = 5") keep their numeric operands whatever
    their length; otherwise the claim would have no keywords at all.

    Args:
        text: Claim text.
        limit: Maximum number of keywords kept.

    Returns:
        Lowercase keywords, at most ``limit`` of them. Duplicates are kept.
    """
    keep_numbers = bool(_ARITHMETIC_RE.search(text))
    return [
        word
        for word in _WORD_SPLIT.split(text.lower())
        if word
        and word not in STOP_WORDS
        and (len(word) >= MIN_KEYWORD_LENGTH or (keep_numbers and word.isdigit()))
    ][:limit]


def tokenize(text: str) -> set[str]:
    """Set of lowercase word tokens."""
    return {word for word in _WORD_SPLIT.split(text.lower()) if word}


def count_matched_keywords(keywords: list[str], snippet: str) -> int:
    """Number of keywords (with repeats) present as whole words in the snippet."""
    tokens = tokenize(snippet)
    return sum(1 for keyword in keywords if keyword in tokens)


def claim_clauses(claim: str, min_length: int = 11) -> list[str]:
    """Lowercased claim clauses long enough to count as a verbatim phrase match."""
    return [
        clause.strip()
        for clause in _CLAUSE_SPLIT.split(claim.lower())
        if len(clause.strip()) >= min_length
    ]


def is_well_established_fact(claim: str) -> bool:
    """True when the claim matches a geography, physics, anatomy, arithmetic or history pattern."""
    return any(pattern.search(claim) for pattern in _FACT_PATTERNS)


__all__ = [
    "MAX_KEYWORDS",
    "claim_clauses",
    "count_matched_keywords",
    "extract_keywords",
    "is_well_established_fact",
    "tokenize",
]
