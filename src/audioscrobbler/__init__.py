"""
audioscrobbler - an object-oriented interface to the Audioscrobbler web service feeds.
"""

from .client import Audioscrobbler
from .core.config import PROJECT_VERSION as __version__, ServiceConfig
from .core.exceptions import (
    AudioscrobblerError,
    ConfigurationError,
    ConstructionError,
    DecodeError,
    FetchError,
    MappingError,
    UnsupportedRelationship,
)
from .models import Artist, Track, Tag, User, SimilarArtist, SimilarUser

__all__ = [
    'Audioscrobbler',
    'ServiceConfig',
    'Artist',
    'Track',
    'Tag',
    'User',
    'SimilarArtist',
    'SimilarUser',
    'AudioscrobblerError',
    'ConfigurationError',
    'ConstructionError',
    'DecodeError',
    'FetchError',
    'MappingError',
    'UnsupportedRelationship',
]
