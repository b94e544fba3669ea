"""
Custom exceptions for audioscrobbler.
"""

from typing import Optional

from .config import ERROR_MESSAGES


class AudioscrobblerError(Exception):
    """Base exception for audioscrobbler."""
    pass


class ConfigurationError(AudioscrobblerError):
    """Exception raised when configuration is invalid."""
    pass


class ConstructionError(AudioscrobblerError, ValueError):
    """Exception raised when an entity is built without its identity."""
    pass


class FetchError(AudioscrobblerError, ConnectionError):
    """Exception raised when a feed cannot be retrieved."""

    def __init__(self, url: str, message: Optional[str] = None):
        self.url = url
        super().__init__(message or f"{ERROR_MESSAGES['FETCH_FAILED']} '{url}'")


class DecodeError(AudioscrobblerError):
    """Exception raised when a feed payload is not a well-formed document."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(f"{message} ({url})" if url else message)


class MappingError(AudioscrobblerError):
    """Exception raised when a feed record cannot be turned into an entity."""

    def __init__(self, message: str, record_key: Optional[str] = None):
        self.record_key = record_key
        super().__init__(f"{message}: '{record_key}'" if record_key else message)


class UnsupportedRelationship(AudioscrobblerError):
    """Exception raised for relationships the service does not offer."""

    def __init__(self, kind: str, relationship: str):
        self.kind = kind
        self.relationship = relationship
        super().__init__(ERROR_MESSAGES["UNSUPPORTED"].format(relationship=relationship, kind=kind))
