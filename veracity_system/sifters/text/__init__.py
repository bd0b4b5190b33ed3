"""Lexical features shared across sifters."""

from veracity_system.sifters.text.keywords import (
    claim_clauses,
    count_matched_keywords,
    extract_keywords,
    is_well_established_fact,
    tokenize,
)
from veracity_system.sifters.text.language import detect_language, normalize_language

__all__ = [
    "claim_clauses",
    "count_matched_keywords",
    "detect_language",
    "extract_keywords",
    "is_well_established_fact",
    "normalize_language",
    "tokenize",
]
