"""Methodology signal: does the snippet talk like research?"""

import re
from typing import Optional

from veracity_system.config.lexicon import METHODOLOGY_PATTERN

DEFAULT_METHODOLOGY = 0.5
RESEARCH_METHODOLOGY = 0.8

_METHOD_RE = re.compile(METHODOLOGY_PATTERN, re.IGNORECASE)


class MethodologyEstimator:
    """0.8 when research-method vocabulary appears in the snippet, else 0.5."""

    def score(self, snippet: Optional[str]) -> float:
        if snippet and _METHOD_RE.search(snippet):
            return RESEARCH_METHODOLOGY
        return DEFAULT_METHODOLOGY
