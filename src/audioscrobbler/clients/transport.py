"""
HTTP Transport Module
Performs the single blocking GET every feed fetch is built on.
"""

from typing import Optional, Union

import requests

from ..core.config import ERROR_MESSAGES, ServiceConfig
from ..core.exceptions import FetchError
from ..core.logger import get_logger

logger = get_logger("clients.transport")


class HttpTransport:
    """Blocking HTTP client for Audioscrobbler feeds."""

    def __init__(self, config: Optional[ServiceConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or ServiceConfig()
        self.timeout = self.config.timeout

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.config.user_agent,
            'Accept': 'application/xml, text/xml'
        })

    def get(self, url: str) -> Union[bytes, str]:
        """
        Fetch a URL and return the raw response body.

        Redirects are followed; the timeout comes from the service configuration.

        Args:
            url: Absolute feed URL

        Returns:
            Response body as bytes, so the decoder can honour the XML encoding declaration

        Raises:
            FetchError: On connection failure, non-2xx status, or an empty body
        """
        logger.debug(f"Fetching data from {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            logger.warning(f"HTTP {status} while fetching {url}")
            raise FetchError(url, f"{ERROR_MESSAGES['FETCH_FAILED']} '{url}': HTTP {status}") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request Error for {url}: {e}")
            raise FetchError(url, f"{ERROR_MESSAGES['FETCH_FAILED']} '{url}': {e}") from e

        body = response.content
        if not body or not body.strip():
            logger.warning(f"Empty response from {url}")
            raise FetchError(url, f"{ERROR_MESSAGES['EMPTY_RESPONSE']} '{url}'")

        return body
