"""
Feed table: which relationships each entity type offers and how to fetch them.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

from ..core.config import FEED_POSTFIXES, SORT_FIELDS
from .mappers import (
    map_artist,
    map_friend,
    map_similar_artist,
    map_similar_user,
    map_tag,
    map_track,
)

Mapper = Callable[..., Any]


@dataclass(frozen=True)
class FeedOptions:
    """How the records of one feed are located, filtered and ordered."""
    sort_field: Optional[str] = SORT_FIELDS["DEFAULT"]
    list_feed: bool = False  # positional records behind a header record
    filter_field: Optional[str] = None
    filter_threshold: Optional[float] = None
    refresh_context: bool = False  # merge the feed's root fields into the queried entity


@dataclass(frozen=True)
class FeedSpec:
    """One relationship feed of an entity type."""
    postfix: str
    record_key: str
    mapper: Mapper
    options: FeedOptions = field(default_factory=FeedOptions)


SIMILARITY_FEED = FeedOptions(
    sort_field=SORT_FIELDS["SIMILARITY"],
    list_feed=True,
    filter_field="match",
)

FEED_TABLE: Dict[str, Dict[str, FeedSpec]] = {
    "artist": {
        "tracks": FeedSpec(
            FEED_POSTFIXES["TRACKS"], "track", map_track,
            FeedOptions(sort_field=SORT_FIELDS["ARTIST_TRACKS"]),
        ),
        "tags": FeedSpec(FEED_POSTFIXES["TAGS"], "tag", map_tag),
        "similar_artists": FeedSpec(
            FEED_POSTFIXES["SIMILAR_ARTISTS"], "artist", map_similar_artist,
            replace(SIMILARITY_FEED, refresh_context=True),
        ),
    },
    "track": {
        "tags": FeedSpec(FEED_POSTFIXES["TAGS"], "tag", map_tag),
        "artists": FeedSpec(FEED_POSTFIXES["ARTISTS"], "artist", map_artist),
    },
    "tag": {
        "tracks": FeedSpec(FEED_POSTFIXES["TRACKS"], "track", map_track),
        "artists": FeedSpec(FEED_POSTFIXES["ARTISTS"], "artist", map_artist),
    },
    "user": {
        "tracks": FeedSpec(
            FEED_POSTFIXES["TRACKS"], "track", map_track,
            FeedOptions(sort_field=SORT_FIELDS["USER"]),
        ),
        "artists": FeedSpec(
            FEED_POSTFIXES["ARTISTS"], "artist", map_artist,
            FeedOptions(sort_field=SORT_FIELDS["USER"]),
        ),
        "tags": FeedSpec(FEED_POSTFIXES["USER_TAGS"], "tag", map_tag),
        "neighbours": FeedSpec(FEED_POSTFIXES["NEIGHBOURS"], "user", map_similar_user, SIMILARITY_FEED),
        "friends": FeedSpec(
            FEED_POSTFIXES["FRIENDS"], "user", map_friend,
            FeedOptions(sort_field=None, list_feed=True),
        ),
    },
}
