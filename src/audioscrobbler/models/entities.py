"""
Entity models for the Audioscrobbler database: artists, tracks, tags and users.

Entities are plain dataclasses. Relationship accessors (``tracks()``, ``tags()``,
``artists()`` ...) delegate to the FeedFetcher the entity is bound to; the facade
binds the entities it constructs and every fetched entity inherits the binding of
the entity it was fetched for.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union, TYPE_CHECKING

from ..core.config import ERROR_MESSAGES, ServiceConfig
from ..core.exceptions import ConfigurationError, ConstructionError, UnsupportedRelationship
from ..core.validation import validate_identity
from ..utils.field_parsers import escape_segment, parse_flag, parse_number, text_value

if TYPE_CHECKING:
    from ..services.feed_fetcher import FeedFetcher

Fields = Dict[str, Any]


class Entity(ABC):
    """Identity, resource URL and feed access shared by every entity."""

    kind: ClassVar[str] = ""
    _fetcher: Optional["FeedFetcher"] = None

    def bind(self, fetcher: Optional["FeedFetcher"]) -> "Entity":
        """Attach the fetcher used by this entity's relationship accessors."""
        self._fetcher = fetcher
        return self

    @property
    def bound_fetcher(self) -> Optional["FeedFetcher"]:
        return self._fetcher

    @property
    def fetcher(self) -> "FeedFetcher":
        if self._fetcher is None:
            raise ConfigurationError(
                ERROR_MESSAGES["UNBOUND"].format(kind=self.kind, name=self.name)
            )
        return self._fetcher

    @abstractmethod
    def identity_path(self) -> List[str]:
        """Unescaped path segments identifying this entity below its type segment."""

    def resource_url(self, config: Optional[ServiceConfig] = None) -> str:
        """
        Return the URL every feed of this entity is derived from.

        Args:
            config: Configuration to resolve the base URL against; defaults to the
                bound fetcher's configuration, or the stock configuration when unbound
        """
        if config is None:
            config = self._fetcher.config if self._fetcher is not None else ServiceConfig()
        segments = [config.base_url, config.segment_for(self.kind)]
        segments.extend(escape_segment(segment) for segment in self.identity_path())
        return "/".join(segments)

    def __hash__(self):
        return hash((self.kind, *self.identity_path()))

    def load_fields(self, data: Fields):
        """
        Merge denormalized fields from a feed; fields already set are kept.

        Entities whose feeds carry no such fields have nothing to merge, so the
        base implementation leaves the entity untouched.
        """

    def _related(self, relationship: str, **options) -> List[Any]:
        return self.fetcher.fetch_relationship(self, relationship, **options)

    def _merge(self, field_name: str, value: Any):
        # first write wins
        if value is not None and getattr(self, field_name) is None:
            setattr(self, field_name, value)


@dataclass
class Artist(Entity):
    """An artist within the Audioscrobbler database."""
    name: str
    mbid: Optional[str] = None
    streamable: Optional[bool] = None
    picture_url: Optional[str] = None

    kind: ClassVar[str] = "artist"
    __hash__ = Entity.__hash__

    def __post_init__(self):
        self.name = validate_identity(self.kind, "name", self.name)

    @classmethod
    def from_fields(cls, name_or_fields: Union[str, Fields, "Artist", "SimilarArtist"]) -> "Artist":
        """
        Create an artist from either a bare name or a field mapping.

        A mapping without ``name`` may carry the name as element text
        (``content``), which is how feeds embed an artist inside a track.
        """
        if isinstance(name_or_fields, SimilarArtist):
            return name_or_fields.artist
        if isinstance(name_or_fields, Artist):
            return name_or_fields
        if not isinstance(name_or_fields, dict):
            return cls(name=name_or_fields)

        fields = name_or_fields
        name = text_value(fields.get("name"))
        if name is None:
            name = text_value(fields.get("content"))
        if name is None:
            raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=cls.kind, field="name"))

        return cls(
            name=name,
            mbid=text_value(fields.get("mbid")),
            streamable=parse_flag(fields.get("streamable")),
            picture_url=text_value(fields.get("picture_url")),
        )

    def identity_path(self) -> List[str]:
        return [self.name]

    def load_fields(self, data: Fields):
        self._merge("streamable", parse_flag(data.get("streamable")))
        self._merge("picture_url", text_value(data.get("picture")))
        self._merge("mbid", text_value(data.get("mbid")))

    def tracks(self) -> List["Track"]:
        """The artist's top tracks, ordered by reach."""
        return self._related("tracks")

    def tags(self) -> List["Tag"]:
        """The artist's top tags."""
        return self._related("tags")

    def similar_artists(self, threshold: Optional[float] = None) -> List["SimilarArtist"]:
        """
        Artists similar to this one.

        Args:
            threshold: Minimum similarity (0-100) a result needs to be returned;
                defaults to the configured filter threshold

        Returns:
            SimilarArtist objects in feed order (most similar first)
        """
        return self._related("similar_artists", threshold=threshold)

    artists = similar_artists
    related_artists = similar_artists


@dataclass
class Track(Entity):
    """A track within the Audioscrobbler database, identified by artist and title."""
    artist: Artist
    name: str
    mbid: Optional[str] = None
    url: Optional[str] = None
    streamable: Optional[bool] = None

    kind: ClassVar[str] = "track"
    __hash__ = Entity.__hash__

    def __post_init__(self):
        if isinstance(self.artist, (str, dict, SimilarArtist)):
            self.artist = Artist.from_fields(self.artist)
        if not isinstance(self.artist, Artist):
            raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=self.kind, field="artist"))
        self.name = validate_identity(self.kind, "name", self.name)

    @classmethod
    def from_fields(cls, artist_or_fields: Union[str, Artist, Fields], title: Optional[str] = None) -> "Track":
        """Create a track from an artist and a title, or from a field mapping."""
        if not isinstance(artist_or_fields, dict):
            return cls(artist=artist_or_fields, name=title)

        fields = artist_or_fields
        name = text_value(fields.get("name"))
        if name is None:
            name = text_value(fields.get("title"))
        if name is None:
            raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=cls.kind, field="name"))
        if fields.get("artist") is None:
            raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=cls.kind, field="artist"))

        return cls(
            artist=fields["artist"],
            name=name,
            mbid=text_value(fields.get("mbid")),
            url=text_value(fields.get("url")),
            streamable=parse_flag(fields.get("streamable")),
        )

    @property
    def title(self) -> str:
        return self.name

    def identity_path(self) -> List[str]:
        return [self.artist.name, self.name]

    def tags(self) -> List["Tag"]:
        """The track's top tags."""
        return self._related("tags")

    def artists(self) -> List[Artist]:
        return self._related("artists")

    def tracks(self):
        raise UnsupportedRelationship(self.kind, "tracks")


@dataclass
class Tag(Entity):
    """A tag (genre-like label) within the Audioscrobbler database."""
    name: str
    url: Optional[str] = None

    kind: ClassVar[str] = "tag"
    __hash__ = Entity.__hash__

    def __post_init__(self):
        self.name = validate_identity(self.kind, "name", self.name)

    @classmethod
    def from_fields(cls, name_or_fields: Union[str, Fields, "Tag"]) -> "Tag":
        if isinstance(name_or_fields, Tag):
            return name_or_fields
        if not isinstance(name_or_fields, dict):
            return cls(name=name_or_fields)

        fields = name_or_fields
        name = text_value(fields.get("name"))
        if name is None:
            name = text_value(fields.get("content"))
        if name is None:
            raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=cls.kind, field="name"))

        return cls(name=name, url=text_value(fields.get("url")))

    @property
    def title(self) -> str:
        return self.name

    def identity_path(self) -> List[str]:
        return [self.name]

    def tracks(self) -> List[Track]:
        """Tracks tagged with this tag."""
        return self._related("tracks")

    def artists(self) -> List[Artist]:
        """Artists tagged with this tag."""
        return self._related("artists")

    def tags(self):
        raise UnsupportedRelationship(self.kind, "tags")


@dataclass
class User(Entity):
    """A user of the Audioscrobbler / Last.fm service."""
    name: str
    picture_url: Optional[str] = None
    url: Optional[str] = None

    kind: ClassVar[str] = "user"
    __hash__ = Entity.__hash__

    def __post_init__(self):
        self.name = validate_identity(self.kind, "name", self.name)

    @classmethod
    def from_fields(cls, name_or_fields: Union[str, Fields, "User", "SimilarUser"]) -> "User":
        """Create a user from a bare name or a mapping keyed by ``name`` or ``username``."""
        if isinstance(name_or_fields, SimilarUser):
            return name_or_fields.user
        if isinstance(name_or_fields, User):
            return name_or_fields
        if not isinstance(name_or_fields, dict):
            return cls(name=name_or_fields)

        fields = name_or_fields
        name = text_value(fields.get("name"))
        if name is None:
            name = text_value(fields.get("username"))
        if name is None:
            raise ConstructionError(ERROR_MESSAGES["MISSING_IDENTITY"].format(kind=cls.kind, field="name"))

        return cls(
            name=name,
            picture_url=text_value(fields.get("picture_url")),
            url=text_value(fields.get("url")),
        )

    def identity_path(self) -> List[str]:
        return [self.name]

    def tracks(self) -> List[Track]:
        """The user's top tracks, ordered by play count."""
        return self._related("tracks")

    def artists(self) -> List[Artist]:
        """The user's top artists, ordered by play count."""
        return self._related("artists")

    def tags(self) -> List[Tag]:
        """The user's top tags."""
        return self._related("tags")

    def neighbours(self, threshold: Optional[float] = None) -> List["SimilarUser"]:
        """
        Users with a similar musical taste.

        Args:
            threshold: Minimum similarity (0-100); defaults to the configured filter threshold
        """
        return self._related("neighbours", threshold=threshold)

    def friends(self) -> List["User"]:
        """The user's friends."""
        return self._related("friends")


class _Wrapped:
    """Forwards attribute access to the wrapped entity."""

    _wrapped_field: ClassVar[str] = ""

    def __getattr__(self, item: str) -> Any:
        if item.startswith("__") or item == self._wrapped_field:
            raise AttributeError(item)
        return getattr(getattr(self, self._wrapped_field), item)

    def __hash__(self):
        return hash((getattr(self, self._wrapped_field), self.related_to))


@dataclass
class SimilarArtist(_Wrapped):
    """
    An artist annotated with its similarity to another artist.

    Name, MusicBrainz ID, feeds and every other Artist attribute are read through
    the wrapped ``artist``.
    """
    artist: Artist
    match: float
    related_to: Artist

    kind: ClassVar[str] = "artist"
    _wrapped_field: ClassVar[str] = "artist"
    __hash__ = _Wrapped.__hash__

    def __post_init__(self):
        self.match = parse_number(self.match) or 0.0


@dataclass
class SimilarUser(_Wrapped):
    """A user annotated with its similarity to another user (a neighbour)."""
    user: User
    match: float
    related_to: User

    kind: ClassVar[str] = "user"
    _wrapped_field: ClassVar[str] = "user"
    __hash__ = _Wrapped.__hash__

    def __post_init__(self):
        self.match = parse_number(self.match) or 0.0
