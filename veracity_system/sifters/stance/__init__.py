"""Stance classification as an ordered (predicate, outcome) rule chain."""

from veracity_system.sifters.stance.stance_classifier import (
    STANCE_RULES,
    StanceClassifier,
    StanceContext,
    StanceRule,
)

__all__ = ["STANCE_RULES", "StanceClassifier", "StanceContext", "StanceRule"]
