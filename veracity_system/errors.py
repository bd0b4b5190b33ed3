"""Error taxonomy for the veracity system.

The scoring core never raises: it substitutes defaults for missing or
malformed fields. These errors are raised at the edges only.
"""


class VeracityError(Exception):
    """Base class for all veracity system errors."""


class InputError(VeracityError):
    """Malformed claim or source records at the intake boundary."""


class ConfigurationError(VeracityError):
    """Invalid or missing tunables (top-N, variant, fact-checker list)."""


__all__ = ["VeracityError", "InputError", "ConfigurationError"]
