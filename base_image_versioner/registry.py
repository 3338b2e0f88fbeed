"""
Docker Hub Tag Source

Fetches the complete, paginated tag list of an image repository from the
Docker Hub API. This is the only module that talks to the network.
"""

import logging
from time import sleep
from typing import Any, Dict, List, Optional

import requests

from .config import (
    DOCKER_HUB_URL,
    IMPLICIT_NAMESPACE,
    MAX_PAGES,
    MAX_RETRIES,
    PAGE_SIZE,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from .exceptions import FetchError
from .models import Tag

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


def build_tags_url(image: str, base_url: str = DOCKER_HUB_URL) -> str:
    """Build the tags endpoint URL for an image.

    Official images ('node', 'alpine') live in the implicit 'library'
    namespace.
    """
    repository = image if "/" in image else f"{IMPLICIT_NAMESPACE}/{image}"
    return f"{base_url}/v2/repositories/{repository}/tags?page_size={PAGE_SIZE}"


class DockerHubClient:
    """Read-only client for the Docker Hub tags API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = 1.0,
        timeout: float = REQUEST_TIMEOUT,
        base_url: str = DOCKER_HUB_URL,
    ):
        """Initialize the client.

        Args:
            session: HTTP session to use (a new one is created if omitted)
            max_retries: Extra attempts per page on transient failures
            retry_delay: Base delay in seconds between attempts
            timeout: Per-request timeout in seconds
            base_url: Registry API base URL
        """
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", USER_AGENT)
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self.base_url = base_url

    def fetch_tags(self, image: str) -> List[Tag]:
        """Fetch every active tag of an image across all pages.

        Pagination stops when the response has no 'next' link or after
        MAX_PAGES pages.

        Args:
            image: Image identifier, e.g. 'node' or 'verdaccio/verdaccio'

        Returns:
            Active tags in the order the registry returns them (may be empty)

        Raises:
            FetchError: If a page cannot be fetched or parsed
        """
        logger.info(f"Fetching tags for Docker image: {image}")

        tags: List[Tag] = []
        url = build_tags_url(image, self.base_url)
        page = 0

        while url and page < MAX_PAGES:
            page += 1
            logger.debug(f"Fetching page {page}: {url}")

            try:
                payload = self._get_page(url)
                results = payload.get("results") or []
                for entry in results:
                    if entry.get("tag_status") == "active":
                        tags.append(Tag.from_api(entry))
            except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
                raise FetchError(image, e) from e

            url = payload.get("next") or ""

        if url:
            logger.warning(f"Stopped after {MAX_PAGES} pages for {image}, remaining tags ignored")

        logger.info(f"Found {len(tags)} tags for {image}")
        return tags

    def _get_page(self, url: str) -> Dict[str, Any]:
        """Fetch one page, retrying transient failures.

        Raises:
            requests.RequestException: When retries are exhausted
            ValueError: When the page has no parseable result
        """
        for attempt in range(self.max_retries + 1):
            try:
                response = self.session.get(url, timeout=self.timeout)
                if response.status_code in RETRYABLE_STATUS_CODES:
                    response.raise_for_status()
                break
            except (requests.ConnectionError, requests.Timeout, requests.HTTPError) as e:
                if attempt >= self.max_retries:
                    raise
                logger.debug(
                    f"Request failed ({e}), retrying... (attempt {attempt + 1}/{self.max_retries})"
                )
                sleep(self.retry_delay * (attempt + 1))

        if response.status_code == 404:
            raise ValueError("No result returned")
        response.raise_for_status()

        if not response.content:
            raise ValueError("No result returned")
        payload = response.json()
        if not isinstance(payload, dict):
            raise ValueError("No result returned")
        return payload
