"""
Utils Module
Logging and error types shared across the project
"""
from .logger import configure_app_logging
from .exceptions import (
    JuoruFeedError,
    ConfigurationError,
    EmptyField,
    GenerationError,
    InvalidArgument,
    MalformedResponse,
    StorageError,
    TransportError,
)

__all__ = [
    "configure_app_logging",
    "JuoruFeedError",
    "ConfigurationError",
    "EmptyField",
    "GenerationError",
    "InvalidArgument",
    "MalformedResponse",
    "StorageError",
    "TransportError",
]
