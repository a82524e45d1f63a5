# gasmflux/core/fetch.py

from typing import Optional

import httpx

from .config import DEFAULT_USER_AGENT
from .errors import NetworkError
from .logging import get_logger

logger = get_logger(__name__)

class PageFetcher:
    """
    Downloads pages and returns their body as text.

    Any transport failure or non-2xx response is raised as a NetworkError.
    A client passed in by the caller is left open on close().
    """
    def __init__(self, client: Optional[httpx.Client] = None, timeout: float = 10.0,
                 user_agent: str = DEFAULT_USER_AGENT):
        self._owns_client = client is None
        # Add headers to mimic a real browser
        headers = {"User-Agent": user_agent}
        self.client = client if client else httpx.Client(headers=headers, timeout=timeout)

    def fetch(self, url: str) -> str:
        logger.debug(f"Fetching {url}")
        try:
            response = self.client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug(f"Request to {url} returned HTTP {status}")
            raise NetworkError(url, f"HTTP {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise NetworkError(url, str(e) or e.__class__.__name__) from e
        return response.text

    def close(self) -> None:
        """Closes the underlying HTTP client if we created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
