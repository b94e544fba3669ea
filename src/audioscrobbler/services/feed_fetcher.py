"""
Feed fetching service.
Retrieves one feed for one entity, decodes it, and maps its records into entities.
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from ..clients.feed_decoder import XmlFeedDecoder
from ..clients.transport import HttpTransport
from ..core.config import ERROR_MESSAGES, ServiceConfig
from ..core.exceptions import DecodeError, FetchError, UnsupportedRelationship
from ..core.logger import get_logger
from ..utils.field_parsers import parse_number, text_value
from .feeds import FEED_TABLE, FeedOptions, FeedSpec, Mapper

logger = get_logger("services.feed_fetcher")

KeyedRecord = Tuple[Optional[str], Dict[str, Any]]
NATURAL_KEYS = ("name", "title")


class FeedFetcher:
    """Fetches relationship feeds relative to an entity's resource URL."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        transport=None,
        decoder=None,
        feeds: Optional[Dict[str, Dict[str, FeedSpec]]] = None
    ):
        """
        Args:
            config: Service configuration (base URL, timeout, filter threshold)
            transport: Object with ``get(url)``; defaults to an HttpTransport
            decoder: Object with ``decode(text)``; defaults to an XmlFeedDecoder
            feeds: Relationship table per entity kind; defaults to FEED_TABLE
        """
        self.config = config or ServiceConfig()
        self.transport = transport or HttpTransport(self.config)
        self.decoder = decoder or XmlFeedDecoder()
        self.feeds = FEED_TABLE if feeds is None else feeds

    def feed_url(self, entity, postfix: str) -> str:
        """Return the URL of one of the entity's feeds."""
        return f"{entity.resource_url(self.config)}/{postfix}"

    def fetch_relationship(self, entity, relationship: str, threshold: Optional[float] = None) -> List[Any]:
        """
        Fetch a named relationship of an entity (``tracks``, ``tags``, ``neighbours`` ...).

        Args:
            entity: The entity to query
            relationship: Relationship name as listed in the feed table
            threshold: Similarity threshold for filtered feeds; defaults to the configured one

        Raises:
            UnsupportedRelationship: If the service offers no such feed for the entity type;
                raised before any request is made
        """
        spec = self.feeds.get(entity.kind, {}).get(relationship)
        if spec is None:
            raise UnsupportedRelationship(entity.kind, relationship)

        options = spec.options
        if options.filter_field is not None:
            options = replace(
                options,
                filter_threshold=self.config.filter_threshold if threshold is None else threshold
            )

        return self.fetch_feed(entity, spec.postfix, spec.record_key, spec.mapper, options)

    def fetch_data(self, entity, postfix: str) -> Dict[str, Any]:
        """
        Retrieve and decode a feed without mapping it.

        Raises:
            FetchError: When the transport fails or returns nothing
            DecodeError: When the payload is malformed
        """
        url = self.feed_url(entity, postfix)

        body = self.transport.get(url)
        if not body:
            raise FetchError(url, f"{ERROR_MESSAGES['EMPTY_RESPONSE']} '{url}'")

        try:
            data = self.decoder.decode(body)
        except DecodeError as e:
            logger.warning(f"Could not decode feed {url}: {e}")
            raise DecodeError(str(e), url) from e

        if not isinstance(data, dict):
            raise DecodeError(f"{ERROR_MESSAGES['DECODE_FAILED']} feed", url)

        return data

    def fetch_feed(
        self,
        entity,
        postfix: str,
        record_key: str,
        mapper: Mapper,
        options: Optional[FeedOptions] = None
    ) -> List[Any]:
        """
        Fetch one feed for an entity and map its records.

        Args:
            entity: Entity whose resource URL roots the feed
            postfix: Feed file appended to the resource URL
            record_key: Key of the record collection inside the decoded feed
            mapper: Callable ``(entity, record, key)`` producing one entity
            options: Ordering, filtering and record-layout options

        Returns:
            Mapped entities, ordered descending by the sort field

        Raises:
            FetchError, DecodeError: As raised by fetch_data
            MappingError: If any record cannot be mapped; no partial result is returned
        """
        options = options or FeedOptions()
        data = self.fetch_data(entity, postfix)

        if options.refresh_context:
            entity.load_fields(data)

        if options.list_feed:
            records = self._list_records(data.get(record_key))
        else:
            records = self._keyed_records(data.get(record_key))

        if options.filter_field is not None:
            threshold = options.filter_threshold
            if threshold is None:
                threshold = self.config.filter_threshold
            records = [
                (key, record) for key, record in records
                if (parse_number(record.get(options.filter_field)) or 0.0) >= threshold
            ]

        records = self._order(records, options.sort_field)
        results = [mapper(entity, record, key) for key, record in records]

        logger.debug(f"Mapped {len(results)} '{record_key}' records from {self.feed_url(entity, postfix)}")
        return results

    def _keyed_records(self, value: Any) -> List[KeyedRecord]:
        """Normalize a keyed-collection feed into (natural key, record) pairs."""
        if isinstance(value, list):
            return [self._fold(record) for record in value]

        if isinstance(value, dict):
            if self._natural_key(value) is not None:
                return [self._fold(value)]
            if all(record is None or isinstance(record, dict) for record in value.values()):
                return [(key, record or {}) for key, record in value.items()]

        return []

    def _list_records(self, value: Any) -> List[KeyedRecord]:
        """Normalize a list feed into records, dropping the leading header record."""
        if isinstance(value, dict):
            value = [value]
        if not isinstance(value, list):
            return []

        return [
            (None, record if isinstance(record, dict) else {"content": record})
            for record in value[1:]
        ]

    def _fold(self, record: Any) -> KeyedRecord:
        if not isinstance(record, dict):
            return text_value(record), {}
        return self._natural_key(record), record

    @staticmethod
    def _natural_key(record: Dict[str, Any]) -> Optional[str]:
        for field_name in NATURAL_KEYS:
            value = record.get(field_name)
            if value is not None and not isinstance(value, dict):
                return text_value(value)
        return None

    def _order(self, records: List[KeyedRecord], sort_field: Optional[str]) -> List[KeyedRecord]:
        """
        Order records descending by ``sort_field``, falling back to the secondary field.

        Records carrying neither keep their decode order after the weighted ones.
        """
        if not sort_field:
            return records

        secondary = self.config.secondary_sort_field

        def weight(record: Dict[str, Any]) -> Optional[float]:
            value = parse_number(record.get(sort_field))
            if value is None and secondary:
                value = parse_number(record.get(secondary))
            return value

        weighted = [(weight(record), key, record) for key, record in records]
        weighted.sort(key=lambda item: (item[0] is None, -(item[0] or 0.0)))
        return [(key, record) for _, key, record in weighted]
