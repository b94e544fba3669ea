"""
Audioscrobbler facade.
Hands out artist, track, tag and user handles bound to one feed fetcher.
"""

from typing import Optional, Union

from .core.config import ServiceConfig
from .models.entities import Artist, SimilarArtist, Tag, Track, User
from .services.feed_fetcher import FeedFetcher


class Audioscrobbler:
    """
    Entry point to the Audioscrobbler web service.

    Constructing a handle never touches the network; feeds are only fetched when a
    relationship accessor such as ``artist.similar_artists()`` is called.

        ws = Audioscrobbler()
        for similar in ws.artist("Metallica").similar_artists(50):
            print(similar.name, similar.match)
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        transport=None,
        decoder=None,
        fetcher: Optional[FeedFetcher] = None
    ):
        if fetcher is None:
            fetcher = FeedFetcher(config or ServiceConfig(), transport=transport, decoder=decoder)
        self.fetcher = fetcher
        self.config = fetcher.config

    def artist(self, name: str) -> Artist:
        """Return a handle for the artist called ``name``."""
        return Artist.from_fields(name).bind(self.fetcher)

    def track(self, artist: Union[str, Artist, SimilarArtist], title: str) -> Track:
        """
        Return a handle for a track.

        Args:
            artist: Artist handle, similar-artist handle or artist name
            title: Track title
        """
        if isinstance(artist, SimilarArtist):
            artist = artist.artist
        elif not isinstance(artist, Artist):
            artist = self.artist(artist)
        return Track.from_fields(artist, title).bind(self.fetcher)

    def tag(self, name: str) -> Tag:
        """Return a handle for the tag called ``name``."""
        return Tag.from_fields(name).bind(self.fetcher)

    def user(self, name: str) -> User:
        """Return a handle for the user called ``name``."""
        return User.from_fields(name).bind(self.fetcher)
