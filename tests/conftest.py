"""
Pytest configuration and shared fixtures.
"""

import copy
import pytest
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from audioscrobbler.client import Audioscrobbler
from audioscrobbler.core.config import ServiceConfig
from audioscrobbler.core.exceptions import FetchError


BASE_URL = "http://ws.audioscrobbler.com/1.0"

SIMILAR_ARTISTS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<similarartists artist="Metallica" streamable="1" picture="http://img.example/metallica.jpg" mbid="65f4f0c5-ef9e-490c-aee3-909e7ae6b2ab">
  <artist>
    <name>Metallica</name>
    <mbid>65f4f0c5-ef9e-490c-aee3-909e7ae6b2ab</mbid>
    <match>100</match>
    <image>http://img.example/metallica.jpg</image>
    <streamable>1</streamable>
  </artist>
  <artist>
    <name>Megadeth</name>
    <mbid>a9044915-8be3-4c7e-b11f-9e2d2ea0a91e</mbid>
    <match>87</match>
    <image>http://img.example/megadeth.jpg</image>
    <streamable>1</streamable>
  </artist>
  <artist>
    <name>Slayer</name>
    <mbid></mbid>
    <match>64.5</match>
    <image>http://img.example/slayer.jpg</image>
    <streamable>0</streamable>
  </artist>
  <artist>
    <name>Bon Jovi</name>
    <mbid></mbid>
    <match>0</match>
    <image>http://img.example/bonjovi.jpg</image>
    <streamable>1</streamable>
  </artist>
</similarartists>
"""

ARTIST_TOP_TRACKS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<mostknowntracks artist="Metallica">
  <track>
    <name>Nothing Else Matters</name>
    <mbid></mbid>
    <reach>2100</reach>
    <url>http://www.last.fm/music/Metallica/_/Nothing+Else+Matters</url>
  </track>
  <track>
    <name>Enter Sandman</name>
    <mbid></mbid>
    <reach>2400</reach>
    <url>http://www.last.fm/music/Metallica/_/Enter+Sandman</url>
  </track>
  <track>
    <name>One</name>
    <mbid></mbid>
    <reach>1800</reach>
    <url>http://www.last.fm/music/Metallica/_/One</url>
  </track>
</mostknowntracks>
"""

TAG_TOP_TRACKS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<tag tag="thrash metal" count="5423">
  <track name="Raining Blood" count="311" streamable="yes">
    <artist name="Slayer">
      <mbid>bdacc37b-8633-4bf8-9dd5-4662ee651aec</mbid>
      <url>http://www.last.fm/music/Slayer</url>
    </artist>
    <url>http://www.last.fm/music/Slayer/_/Raining+Blood</url>
  </track>
  <track name="Master of Puppets" count="402" streamable="no">
    <artist name="Metallica">
      <mbid>65f4f0c5-ef9e-490c-aee3-909e7ae6b2ab</mbid>
      <url>http://www.last.fm/music/Metallica</url>
    </artist>
    <url>http://www.last.fm/music/Metallica/_/Master+of+Puppets</url>
  </track>
</tag>
"""

NEIGHBOURS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<neighbours user="RJ">
  <user username="RJ">
    <url>http://www.last.fm/user/RJ/</url>
    <image>http://img.example/rj.jpg</image>
    <match>100</match>
  </user>
  <user username="mokele">
    <url>http://www.last.fm/user/mokele/</url>
    <image>http://img.example/mokele.jpg</image>
    <match>42.1</match>
  </user>
  <user username="lobsterclaw">
    <url>http://www.last.fm/user/lobsterclaw/</url>
    <image>http://img.example/lobsterclaw.jpg</image>
    <match>0.5</match>
  </user>
</neighbours>
"""

FRIENDS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<friends user="RJ">
  <user username="RJ">
    <url>http://www.last.fm/user/RJ/</url>
  </user>
  <user username="Russ">
    <url>http://www.last.fm/user/Russ/</url>
    <image>http://img.example/russ.jpg</image>
  </user>
  <user username="Jonty">
    <url>http://www.last.fm/user/Jonty/</url>
    <image>http://img.example/jonty.jpg</image>
  </user>
</friends>
"""


class RecordingTransport:
    """Transport double answering by feed postfix and recording every URL."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        self.responses = responses or {}
        self.calls: List[str] = []

    def get(self, url: str):
        self.calls.append(url)
        for postfix, body in self.responses.items():
            if url.endswith("/" + postfix):
                return body
        raise FetchError(url)


class StaticDecoder:
    """Decoder double returning a fresh copy of a prepared structure."""

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self.calls: List[Any] = []

    def decode(self, text):
        self.calls.append(text)
        return copy.deepcopy(self.data)


@pytest.fixture
def service_config() -> ServiceConfig:
    """Stock service configuration."""
    return ServiceConfig(base_url=BASE_URL)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Transport double serving the sample XML feeds."""
    return RecordingTransport({
        "similar.xml": SIMILAR_ARTISTS_XML,
        "toptracks.xml": ARTIST_TOP_TRACKS_XML,
        "neighbours.xml": NEIGHBOURS_XML,
        "friends.xml": FRIENDS_XML,
    })


@pytest.fixture
def ws(service_config, recording_transport) -> Audioscrobbler:
    """Facade wired to the recording transport and the real XML decoder."""
    return Audioscrobbler(service_config, transport=recording_transport)


@pytest.fixture
def make_ws(service_config):
    """Factory for a facade whose decoder returns the given structure."""
    def _make(data: Dict[str, Any], body: str = "<feed/>"):
        transport = RecordingTransport({
            postfix: body for postfix in (
                "toptracks.xml", "toptags.xml", "topartists.xml", "tags.xml",
                "similar.xml", "neighbours.xml", "friends.xml",
            )
        })
        return Audioscrobbler(service_config, transport=transport, decoder=StaticDecoder(data)), transport
    return _make
