"""
PokeAPI fetch layer.

Every GET goes through the TimedCache keyed by the full request URL.
Failures are raised as FetchError and are never cached or retried.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests

from pokedex.cache import TimedCache
from pokedex.config import settings
from pokedex.errors import FetchError
from pokedex.utils import get_logger

logger = get_logger("PokeAPIClient")


@dataclass
class Fetched:
    """A response body and whether it was served from the cache."""
    url: str
    payload: bytes
    from_cache: bool


class PokeAPIClient:
    """
    Thin HTTP client for the PokeAPI catalog service.
    """

    def __init__(
        self,
        cache: TimedCache,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        page_size: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize client.

        Args:
            cache: Response cache shared for the session
            base_url: API root, defaults to settings.POKEAPI_BASE_URL
            timeout: Per-request timeout in seconds
            page_size: Location areas per page
            session: Optional pre-built requests session (tests)
        """
        self.cache = cache
        self.base_url = (base_url or settings.POKEAPI_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.page_size = page_size or settings.LOCATION_PAGE_SIZE
        self.session = session or requests.Session()

    def __enter__(self) -> "PokeAPIClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # ========== URL builders ==========

    def location_areas_url(self) -> str:
        return f"{self.base_url}/location-area/?offset=0&limit={self.page_size}"

    def location_area_url(self, name: str) -> str:
        return f"{self.base_url}/location-area/{_slug(name)}"

    def pokemon_url(self, name: str) -> str:
        return f"{self.base_url}/pokemon/{_slug(name)}"

    # ========== Fetching ==========

    def fetch(self, url: str) -> Fetched:
        """
        Return the body for ``url``, from cache when present.

        Raises:
            FetchError: on transport failure or a non-200 response
        """
        payload, found = self.cache.get(url)
        if found:
            logger.debug(f"Cache hit: {url}")
            return Fetched(url=url, payload=payload, from_cache=True)

        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request failed for {url}: {e}")
            raise FetchError(f"request failed: {e}", url=url) from e

        if response.status_code != 200:
            logger.warning(f"{url} returned {response.status_code}")
            raise FetchError(
                f"error fetching data: {response.status_code} {response.reason or ''}".rstrip(),
                url=url,
                status_code=response.status_code,
            )

        body = response.content
        self.cache.add(url, body)
        logger.info(f"Fetched {url} ({len(body)} bytes)")
        return Fetched(url=url, payload=body, from_cache=False)


def _slug(name: str) -> str:
    return quote(name.strip().lower(), safe="")
