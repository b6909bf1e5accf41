"""Custom exception hierarchy for lexicon-kit."""


class LexiconKitError(Exception):
    """Base exception for all lexicon-kit errors."""


class ValidationError(LexiconKitError):
    """Invalid data (empty language name, expression text or group)."""

