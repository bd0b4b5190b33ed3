"""Source credibility configuration for evidence scoring.

Hand-curated trust tiers (from most to least credible):
1. Government, academic and major wire services: 0.85-0.92
2. Encyclopedic references and major outlets: 0.7-0.8
3. Generic non-profit / educational sites: 0.6
4. Low-trust community and social sites: 0.4
5. Unknown: 0.5

Fact-checkers on the allow-list are floored at FACTCHECK_FLOOR regardless of
the table value.
"""

from typing import Dict

# Key: registrable domain (lowercase, no www.)
# Value: trust score 0.0-1.0
BASE_TRUST: Dict[str, float] = {
    # Fact-checkers
    "snopes.com": 0.9,
    "politifact.com": 0.9,
    "factcheck.org": 0.9,
    "fullfact.org": 0.88,

    # Wire services
    "reuters.com": 0.85,
    "apnews.com": 0.82,
    "afp.com": 0.85,

    # Government / intergovernmental / academic
    "who.int": 0.92,
    "nih.gov": 0.92,
    "cdc.gov": 0.9,
    "nasa.gov": 0.9,
    "noaa.gov": 0.9,
    "nature.com": 0.92,
    "science.org": 0.9,
    "harvard.edu": 0.9,
    "mayoclinic.org": 0.85,
    "hopkinsmedicine.org": 0.85,

    # Encyclopedic references
    "britannica.com": 0.8,
    "wikipedia.org": 0.75,
    "khanacademy.org": 0.75,

    # Major outlets
    "bbc.com": 0.82,
    "bbc.co.uk": 0.82,
    "nytimes.com": 0.8,
    "washingtonpost.com": 0.8,
    "theguardian.com": 0.78,
    "scientificamerican.com": 0.8,
    "nationalgeographic.com": 0.78,
    "smithsonianmag.com": 0.78,
    "history.com": 0.72,
    "webmd.com": 0.7,
    "howstuffworks.com": 0.65,

    # Low-trust community / social
    "reddit.com": 0.4,
    "quora.com": 0.4,
    "medium.com": 0.4,
    "twitter.com": 0.4,
    "x.com": 0.4,
    "facebook.com": 0.4,
    "tiktok.com": 0.4,
    "youtube.com": 0.4,
}

# TLD-based defaults, checked in order after the trust table
DOMAIN_PATTERN_DEFAULTS: Dict[str, float] = {
    ".gov": 0.85,
    ".mil": 0.85,
    ".int": 0.85,
    ".edu": 0.85,
    ".org": 0.6,
}

# Source-type defaults for domains with no table or TLD match
SOURCE_TYPE_DEFAULTS: Dict[str, float] = {
    "factcheck": 0.88,
    "academic": 0.88,
    "gov": 0.85,
    "edu": 0.8,
    "news": 0.7,
    "ngo": 0.6,
    "blog": 0.4,
    "unknown": 0.5,
}

DEFAULT_CREDIBILITY: float = 0.5

# Fact-checker allow-list; overridable via FACTCHECK_DOMAINS
DEFAULT_FACTCHECK_DOMAINS: tuple[str, ...] = (
    "snopes.com",
    "politifact.com",
    "factcheck.org",
    "reuters.com",
    "apnews.com",
)

FACTCHECK_FLOOR: float = 0.88
FACTCHECK_BOOST: float = 0.05
