class ScoringError(Exception):
    """Base exception for all scoring-related errors."""


class ConfigurationError(ScoringError):
    """Raised when the criteria configuration cannot produce a score."""
