"""Claim language detection.

Uses langdetect on the first 500 characters of the claim. Text that is
too short to identify, or that langdetect cannot classify, falls back to
English.
"""

import re
from typing import Optional

from langdetect import DetectorFactory, LangDetectException, detect

from veracity_system.config.logging import get_logger

# langdetect is probabilistic; a fixed seed keeps results stable between runs
DetectorFactory.seed = 0

DEFAULT_LANGUAGE = "en"
MIN_DETECTION_LENGTH = 20
DETECTION_SAMPLE_CHARS = 500

_LANGUAGE_CODE = re.compile(r"^([a-z]{2,3})(?:[-_][a-z0-9]+)?$")

logger = get_logger("LanguageDetector")


def normalize_language(code: Optional[str], fallback: str = DEFAULT_LANGUAGE) -> str:
    """Lowercase primary subtag of a language tag ("zh-CN" -> "zh").

    Anything that does not look like a language tag becomes ``fallback``.
    """
    match = _LANGUAGE_CODE.match((code or "").strip().lower())
    return match.group(1) if match else fallback


def detect_language(
    text: Optional[str],
    fallback: str = DEFAULT_LANGUAGE,
    min_length: int = MIN_DETECTION_LENGTH,
) -> str:
    """
    Detect the language of a claim.

    Args:
        text: Claim text.
        fallback: Code returned when detection is not possible.
        min_length: Shorter text is not sent to the detector.

    Returns:
        Primary language code, e.g. "en" or "fr".
    """
    sample = (text or "").strip()[:DETECTION_SAMPLE_CHARS]
    if len(sample) < min_length:
        return fallback

    try:
        language = detect(sample)
    except LangDetectException as e:
        logger.warning(f"Language detection failed: {e}")
        return fallback

    return normalize_language(language, fallback)


__all__ = ["DEFAULT_LANGUAGE", "detect_language", "normalize_language"]
