"""
Data models for audioscrobbler.
"""

from .entities import Entity, Artist, Track, Tag, User, SimilarArtist, SimilarUser

__all__ = [
    'Entity',
    'Artist',
    'Track',
    'Tag',
    'User',
    'SimilarArtist',
    'SimilarUser'
]
