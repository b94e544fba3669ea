"""
Entity mappers: turn one decoded feed record into a typed entity.

Every mapper takes the entity the feed was fetched for, the decoded record and,
for keyed-collection feeds, the record's natural key. Results are bound to the
same fetcher as the context entity.
"""

from typing import Any, Dict, Optional, Union

from ..core.config import ERROR_MESSAGES
from ..core.exceptions import ConstructionError, MappingError
from ..models.entities import Artist, Entity, SimilarArtist, SimilarUser, Tag, Track, User
from ..utils.field_parsers import parse_flag, text_value

Record = Dict[str, Any]
Context = Union[Entity, SimilarArtist, SimilarUser]


def _with_key(record: Any, key: Optional[str]) -> Record:
    """Copy a record, injecting its collection key as the name."""
    fields = dict(record) if isinstance(record, dict) else {"content": record}
    if key is not None:
        fields["name"] = key
    return fields


def _first(fields: Record, *names: str) -> Optional[str]:
    for name in names:
        value = text_value(fields.get(name))
        if value is not None:
            return value
    return None


def _unwrap(context: Context) -> Entity:
    if isinstance(context, SimilarArtist):
        return context.artist
    if isinstance(context, SimilarUser):
        return context.user
    return context


def map_artist(context: Context, record: Record, key: Optional[str] = None) -> Artist:
    """Map a top-artists record."""
    fields = _with_key(record, key)
    try:
        artist = Artist.from_fields({
            "name": _first(fields, "name", "content"),
            "mbid": fields.get("mbid"),
            "streamable": fields.get("streamable"),
            "picture_url": _first(fields, "picture", "image"),
        })
    except ConstructionError as e:
        raise MappingError(str(e), key) from e
    return artist.bind(context.bound_fetcher)


def map_similar_artist(context: Context, record: Record, key: Optional[str] = None) -> SimilarArtist:
    """Map a similar-artists record; the picture lives under ``image`` in this feed."""
    fields = _with_key(record, key)
    related_to = _unwrap(context)
    try:
        artist = Artist.from_fields({
            "name": fields.get("name"),
            "mbid": fields.get("mbid"),
            "streamable": fields.get("streamable"),
            "picture_url": fields.get("image"),
        })
    except ConstructionError as e:
        raise MappingError(str(e), key) from e

    artist.bind(context.bound_fetcher)
    return SimilarArtist(artist=artist, match=fields.get("match"), related_to=related_to)


def map_track(context: Context, record: Record, key: Optional[str] = None) -> Track:
    """
    Map a top-tracks record.

    The track's artist is taken from the record's ``artist`` sub-record when there
    is one; otherwise the feed must belong to an artist, which is reused.
    """
    fields = _with_key(record, key)
    name = _first(fields, "name", "title")
    owner = _unwrap(context)

    try:
        if fields.get("artist") is not None:
            artist = Artist.from_fields(fields["artist"]).bind(context.bound_fetcher)
        elif isinstance(owner, Artist):
            artist = owner
        else:
            raise MappingError(ERROR_MESSAGES["MISSING_ARTIST"], name or key)

        track = Track(
            artist=artist,
            name=name,
            mbid=text_value(fields.get("mbid")),
            url=text_value(fields.get("url")),
            streamable=parse_flag(fields.get("streamable")),
        )
    except ConstructionError as e:
        raise MappingError(str(e), name or key) from e

    return track.bind(context.bound_fetcher)


def map_tag(context: Context, record: Record, key: Optional[str] = None) -> Tag:
    """Map a top-tags record."""
    fields = _with_key(record, key)
    try:
        tag = Tag.from_fields({"name": _first(fields, "name", "content"), "url": fields.get("url")})
    except ConstructionError as e:
        raise MappingError(str(e), key) from e
    return tag.bind(context.bound_fetcher)


def _user_fields(fields: Record) -> Record:
    # user feeds name the user either ``username`` or ``name``
    return {
        "name": _first(fields, "username", "name"),
        "url": fields.get("url"),
        "picture_url": _first(fields, "image", "picture"),
    }


def map_friend(context: Context, record: Record, key: Optional[str] = None) -> User:
    """Map a friends record."""
    fields = _with_key(record, key)
    try:
        user = User.from_fields(_user_fields(fields))
    except ConstructionError as e:
        raise MappingError(str(e), key) from e
    return user.bind(context.bound_fetcher)


def map_similar_user(context: Context, record: Record, key: Optional[str] = None) -> SimilarUser:
    """Map a neighbours record."""
    fields = _with_key(record, key)
    user = map_friend(context, fields)
    return SimilarUser(user=user, match=fields.get("match"), related_to=_unwrap(context))
