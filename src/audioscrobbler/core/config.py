"""
Configuration for the Audioscrobbler object model.
Contains all constants, default feed settings, and the service configuration object.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# Project Information
PROJECT_NAME = "audioscrobbler"
PROJECT_VERSION = "0.4.0"
PROJECT_DESCRIPTION = "Object-oriented interface to the Audioscrobbler web service feeds"

# Audioscrobbler Configuration
AUDIOSCROBBLER_CONFIG = {
    "BASE_URL": "http://ws.audioscrobbler.com/1.0",
    "USER_AGENT": f"{PROJECT_NAME}/{PROJECT_VERSION} (contact@example.com)",
    "TIMEOUT": 30,
    "FILTER_THRESHOLD": 1,  # similarity records below this match are dropped
}

# Path segment of each entity type below the base URL
TYPE_SEGMENTS = {
    "ARTIST": "artist",
    "TRACK": "track",
    "TAG": "tag",
    "USER": "user",
}

# Feed postfixes appended to an entity's resource URL
FEED_POSTFIXES = {
    "TRACKS": "toptracks.xml",
    "TAGS": "toptags.xml",
    "ARTISTS": "topartists.xml",
    "SIMILAR_ARTISTS": "similar.xml",
    "NEIGHBOURS": "neighbours.xml",
    "FRIENDS": "friends.xml",
    "USER_TAGS": "tags.xml",
}

# Record fields used to order feed results
SORT_FIELDS = {
    "DEFAULT": "count",
    "SECONDARY": "count",
    "ARTIST_TRACKS": "reach",
    "USER": "playcount",
    "SIMILARITY": "match",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": "WARNING",
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error Messages
ERROR_MESSAGES = {
    "FETCH_FAILED": "Error while fetching information from",
    "EMPTY_RESPONSE": "Empty response received from",
    "DECODE_FAILED": "Malformed feed received from",
    "MISSING_IDENTITY": "Can't create {kind} without a {field}",
    "MISSING_ARTIST": "Couldn't determine artist for track",
    "UNSUPPORTED": "Audioscrobbler doesn't provide data regarding {relationship} related to a {kind}",
    "UNBOUND": "{kind} '{name}' is not bound to a feed fetcher",
}

# User Interface Configuration
UI_CONFIG = {
    "MAX_DISPLAY_RESULTS": 25,
}


@dataclass
class ServiceConfig:
    """Settings shared by every entity handed out by one facade."""
    base_url: str = AUDIOSCROBBLER_CONFIG["BASE_URL"]
    user_agent: str = AUDIOSCROBBLER_CONFIG["USER_AGENT"]
    timeout: float = AUDIOSCROBBLER_CONFIG["TIMEOUT"]
    filter_threshold: float = AUDIOSCROBBLER_CONFIG["FILTER_THRESHOLD"]
    secondary_sort_field: str = SORT_FIELDS["SECONDARY"]
    type_segments: Dict[str, str] = field(
        default_factory=lambda: {key.lower(): value for key, value in TYPE_SEGMENTS.items()}
    )

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_mapping(cls, settings: Optional[Dict[str, Any]] = None) -> "ServiceConfig":
        """
        Build a configuration from an upper-case settings mapping.

        Unknown keys are ignored; missing keys fall back to AUDIOSCROBBLER_CONFIG.
        """
        merged = dict(AUDIOSCROBBLER_CONFIG)
        merged.update(settings or {})
        return cls(
            base_url=merged["BASE_URL"],
            user_agent=merged["USER_AGENT"],
            timeout=merged["TIMEOUT"],
            filter_threshold=merged["FILTER_THRESHOLD"],
        )

    def segment_for(self, kind: str) -> str:
        """Return the URL path segment for an entity kind."""
        return self.type_segments[kind]
