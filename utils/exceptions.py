"""
Custom Exceptions
Error taxonomy for the generation pipeline
"""


class JuoruFeedError(Exception):
    """Base exception for the feed generator."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(JuoruFeedError):
    """Missing or inconsistent configuration"""
    pass


class InvalidArgument(JuoruFeedError):
    """Programming-contract violation (bad limit, empty name list, ...)"""
    pass


class GenerationError(JuoruFeedError):
    """Per-subject generation failure"""

    def __init__(self, message: str, subject: str = None, **kwargs):
        super().__init__(message, kwargs)
        self.subject = subject


class MalformedResponse(GenerationError):
    """Provider output did not contain a parsable JSON object"""
    pass


class EmptyField(GenerationError):
    """Required field empty after normalization"""
    pass


class TransportError(JuoruFeedError):
    """External collaborator call failed"""

    def __init__(self, message: str, provider: str = None, **kwargs):
        super().__init__(message, kwargs)
        self.provider = provider


class StorageError(JuoruFeedError):
    """Archive or booking file could not be read or written"""
    pass
