"""Application-level exception types for mc-messaging."""

from __future__ import annotations


class McMessagingError(Exception):
    """Base exception for mc-messaging."""


class ConfigurationError(McMessagingError):
    """Base exception for configuration and startup validation errors."""


class MessageFileError(ConfigurationError):
    """Raised when the message file cannot be read or parsed."""
