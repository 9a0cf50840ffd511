"""
Error Taxonomy

ConfigurationError is fatal for the message that triggered it (the store
client could not be built). Every TranslationError is local to a single
message and is reported through the completion channel, never retried.
"""

from typing import Optional


class LineBridgeError(Exception):
    """Base class for all line bridge errors."""
    pass


class ConfigurationError(LineBridgeError):
    """The store client could not be created from the connection config."""
    pass


class TranslationError(LineBridgeError):
    """A single message could not be turned into a written point."""
    pass


class MissingDatabaseError(TranslationError):
    pass


class MissingMeasurementError(TranslationError):
    pass


class InvalidPayloadError(TranslationError):
    pass


class InvalidFieldsError(TranslationError):
    pass


class NoFieldsError(TranslationError):
    pass


class SubmissionError(TranslationError):
    """The store rejected the write or could not be reached."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
