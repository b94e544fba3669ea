"""
Service modules for audioscrobbler.
"""

from .feed_fetcher import FeedFetcher
from .feeds import FEED_TABLE, FeedOptions, FeedSpec

__all__ = [
    'FeedFetcher',
    'FeedOptions',
    'FeedSpec',
    'FEED_TABLE'
]
