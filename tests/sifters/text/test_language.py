"""Tests for claim language detection.

Tests cover:
- Detection of clearly English, French and German sentences
- English fallback for short, empty and unclassifiable text
- Normalization of language tags
"""

import pytest

from veracity_system.sifters.text import detect_language, normalize_language


class TestDetectLanguage:
    """Tests for detect_language."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("The government announced a new pension reform for next year in the capital.", "en"),
            ("Le gouvernement a annoncé une nouvelle réforme des retraites pour l'année prochaine.", "fr"),
            ("Die Regierung hat eine neue Rentenreform für das nächste Jahr angekündigt.", "de"),
        ],
    )
    def test_detects_language(self, text, expected):
        assert detect_language(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "Ça va", "Hola amigo"])
    def test_short_text_falls_back(self, text):
        """Text under twenty characters is not sent to the detector."""
        assert detect_language(text) == "en"

    def test_custom_fallback(self):
        assert detect_language("Bonjour", fallback="fr") == "fr"

    def test_undetectable_text_falls_back(self):
        """Digits and punctuation carry no language features."""
        assert detect_language("1234567890 !!! 0987654321 ???") == "en"

    def test_deterministic(self):
        text = "Water boils at one hundred degrees Celsius at sea level on Earth."
        assert len({detect_language(text) for _ in range(5)}) == 1


class TestNormalizeLanguage:
    """Tests for normalize_language."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("en", "en"),
            ("FR", "fr"),
            ("zh-cn", "zh"),
            ("pt_BR", "pt"),
            (" de ", "de"),
        ],
    )
    def test_primary_subtag(self, code, expected):
        assert normalize_language(code) == expected

    @pytest.mark.parametrize("code", [None, "", "english please", "e", "12"])
    def test_invalid_codes_fall_back(self, code):
        assert normalize_language(code) == "en"
