"""
Client modules for the Audioscrobbler web service.
"""

from .transport import HttpTransport
from .feed_decoder import XmlFeedDecoder

__all__ = [
    'HttpTransport',
    'XmlFeedDecoder'
]
