"""Lexical patterns for the heuristic estimators and the claim planner.

All entries are regex source strings; consumers compile them with
re.IGNORECASE. Kept here so tuning a vocabulary never touches scoring code.
"""

STOP_WORDS = frozenset({
    "the", "is", "are", "was", "were", "a", "an", "and", "or", "but",
    "in", "on", "at", "to", "for", "of", "with", "by", "have", "has",
    "had", "do", "does", "did", "will", "would", "could", "should", "may",
    "might", "can", "that", "this", "these", "those",
})

# Denial vocabulary. A hit only counts when a claim keyword follows closely.
NEGATION_PATTERN = (
    r"\b(?:not|no|false|hoax|myths?|refut(?:e|es|ed|ing)|debunk(?:s|ed|ing)?"
    r"|den(?:y|ies|ied|ying)|disput(?:e|es|ed|ing)|contradict(?:s|ed|ing)?"
    r"|incorrect|wrong|untrue|misleading)\b"
)

AFFIRMATION_PATTERN = (
    r"\b(?:confirm(?:s|ed|ing)?|corroborat(?:e|es|ed|ing)|support(?:s|ed|ing)?"
    r"|affirm(?:s|ed|ing)?|verif(?:y|ies|ied)|true|correct|accurate"
    r"|established|proven|validates?|demonstrates?|shows that)\b"
)

DEFINITIONAL_PATTERN = (
    r"\b(?:definition|defined as|means|refers to|known as|consists of"
    r"|composed of|is made of|is a type of|is called)\b"
)

EXPLANATORY_PATTERN = (
    r"\b(?:because|due to|caused by|as a result|therefore|according to"
    r"|study shows|studies show|research shows|evidence suggests"
    r"|scientists say|experts say)\b"
)

METHODOLOGY_PATTERN = (
    r"\b(?:study|studies|dataset|methodology|replication|survey"
    r"|randomi[sz]ed|placebo|meta-?analysis|peer[- ]?review(?:ed)?|journal"
    r"|clinical trial|cohort|sample size)\b"
)

# Simple arithmetic statements such as "2 + 2 = 4"
ARITHMETIC_PATTERN = (
    r"\b\d+\s*(?:\+|-|\*|x|×|/|plus|minus|times|divided by)\s*\d+\s*(?:=|equals|is)\s*\d+\b"
)

# Claims presumed to need less stringent confirmation
WELL_ESTABLISHED_FACT_PATTERNS = [
    # Geography
    r"\bcapital of\b",
    r"\b(?:largest|smallest|longest|tallest|highest|deepest)\s+"
    r"(?:ocean|continent|country|desert|river|mountain|lake|planet)\b",
    r"\b(?:is|are)\s+(?:located|situated)\s+in\b",
    r"\bearth\s+(?:is round|orbits the sun|revolves around the sun)\b",
    r"\bsky is blue\b",

    # Physical constants
    r"\b(?:boils?|freezes?|melts?)\s+at\b",
    r"\bspeed of (?:light|sound)\b",
    r"\bgravit(?:y|ational)\b",

    # Anatomy
    r"\bhumans?\s+(?:have|has)\s+(?:\d+|one|two|three|four|five|ten|twenty|thirty)\b",
    r"\b(?:heart|skeleton|body)\s+(?:has|have|contains?)\s+(?:\d+|one|two|three|four|five)\b",

    # Basic arithmetic
    ARITHMETIC_PATTERN,

    # Well-documented historical dates
    r"\b(?:moon landing|landed on the moon|world war (?:i|ii|1|2|one|two)"
    r"|declaration of independence|berlin wall|titanic|french revolution)\b"
    r"[^.]*\b(?:1[0-9]{3}|20[0-9]{2})\b",
    r"\b(?:1[0-9]{3}|20[0-9]{2})\b[^.]*\b(?:moon landing|landed on the moon"
    r"|world war|independence|berlin wall|titanic)\b",
]

# Claim-type detection, evaluated in this order; first match wins
CLAIM_TYPE_PATTERNS = {
    "scientific": [
        r"\b(?:sky|light|color|physics|gravity|temperature|boils?|melts?|freezes?"
        r"|atmosphere|wavelength|energy|matter|chemical|reaction)\b",
    ],
    "medical": [
        r"\b(?:human|body|anatomy|medical|health|disease|organ|bone|muscle"
        r"|blood|brain|heart|lung|leg|arm|eye|ear)\b",
    ],
    "historical": [
        r"\b(?:history|historical|year|century|war|battle|ancient|medieval"
        r"|renaissance|revolution|empire|king|queen|president)\b",
        r"\b(?:19|20)\d{2}\b",
        r"\b(?:happened|occurred|founded|established|discovered|invented"
        r"|died|born|ruled)\b",
    ],
    "political": [
        r"\b(?:government|politics|political|policy|law|congress|senate"
        r"|president|minister|election|vote|democrat|republican|liberal"
        r"|conservative)\b",
    ],
}

CLAIM_TYPE_CONTEXT = {
    "scientific": ["scientific explanation", "physics", "research", "study", "evidence"],
    "medical": ["medical", "anatomy", "physiology", "health", "research"],
    "historical": ["historical", "history", "documented", "records", "evidence"],
    "political": ["political", "government", "policy", "fact check", "verification"],
    "general": ["fact check", "verification", "evidence"],
}

BASE_RELEVANT_DOMAINS = [
    "wikipedia.org",
    "britannica.com",
    "snopes.com",
    "factcheck.org",
    "reuters.com",
    "apnews.com",
    "bbc.com",
]

CLAIM_TYPE_DOMAINS = {
    "scientific": [
        "nasa.gov", "noaa.gov", "scientificamerican.com", "nature.com",
        "science.org", "physics.org", "nationalgeographic.com",
        "howstuffworks.com", "khanacademy.org",
    ],
    "medical": [
        "mayoclinic.org", "webmd.com", "nih.gov", "who.int", "cdc.gov",
        "health.harvard.edu", "hopkinsmedicine.org",
    ],
    "historical": [
        "history.com", "smithsonianmag.com", "nationalarchives.gov",
        "loc.gov", "historynet.com",
    ],
    "political": [
        "politifact.com", "factcheck.org", "snopes.com",
        "washingtonpost.com", "nytimes.com", "congress.gov",
    ],
}
