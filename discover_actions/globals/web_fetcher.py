"""Web fetching utilities with caching and retry logic.

This module provides the HTTP client used to look up repository metadata on
the GitHub REST API. It includes:

- Response caching to avoid redundant requests
- Configurable retry logic with a fixed backoff
- Optional token authentication

Typical usage:
    fetcher = WebFetcher(github_token=os.getenv("GH_TOKEN"))
    readme = fetcher.fetch_readme("actions", "checkout")
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class IWebFetcher(ABC):
    """Abstract interface for web fetching with caching capabilities."""

    @abstractmethod
    def fetch(self, url: str) -> Optional[requests.Response]:
        """Fetch a URL and return the HTTP response.

        Args:
            url: The URL to fetch. Should be a valid HTTP/HTTPS URL.

        Returns:
            The HTTP response object if successful, None if the request
            failed after all retries.
        """
        pass

    @abstractmethod
    def clear_cache(self) -> None:
        pass

    def fetch_readme(self, owner: str, repo: str) -> Optional[str]:
        """Fetch the README of a repository through the contents API.

        Args:
            owner: Owner (user or organization) of the repository.
            repo: Name of the repository.

        Returns:
            The ``content`` field of the API payload (base64 encoded, as
            GitHub serves it), or None when the repository has no README or
            the request failed.
        """
        url = f"{GITHUB_API_URL}/repos/{owner}/{repo}/contents/README.md"
        response = self.fetch(url)
        if response is None:
            logger.debug(f"No readme file found in repository: {repo}")
            return None
        try:
            return response.json()["content"]
        except (ValueError, KeyError, TypeError):
            logger.debug(f"No readme file found in repository: {repo}")
            return None


class WebFetcher(IWebFetcher):
    """Implementation of IWebFetcher with caching and retry logic.

    - **Response Caching**: Responses are cached in memory for the lifetime
      of the fetcher, failures included.
    - **Retry Logic**: Failed requests are retried ``max_retries`` times.
    - **Session Reuse**: One ``requests.Session`` is shared by all requests.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        max_retries: int = 3,
        request_timeout: int = 5,
        retry_backoff_factor: float = 0.5,
        github_token: Optional[str] = None,
    ) -> None:
        """Initialize the WebFetcher.

        Args:
            session: Optional requests.Session to use. If None, a new session
                will be created.
            max_retries: Maximum number of retry attempts for failed requests.
                Set to 0 to disable retries.
            request_timeout: Timeout in seconds for each HTTP request.
            retry_backoff_factor: Seconds to sleep between retries.
            github_token: Token sent as ``Authorization`` header, if given.
        """
        self.cache: Dict[str, Optional[requests.Response]] = {}
        self.session = session or requests.Session()
        self.max_retries = max_retries
        self.request_timeout = request_timeout
        self.retry_backoff_factor = retry_backoff_factor
        if github_token:
            self.session.headers.update({"Authorization": f"token {github_token}"})

    def fetch(self, url: str) -> Optional[requests.Response]:
        """Fetch a URL with caching and retries.

        Returns:
            The HTTP response if the request succeeded (status 2xx), or None
            if it failed after all retries. Failures are cached as None.
        """
        if url in self.cache:
            return self.cache[url]

        for attempt in range(self.max_retries + 1):
            try:
                response = self.session.get(url, timeout=self.request_timeout)
                response.raise_for_status()
                self.cache[url] = response
                return response
            except requests.RequestException as e:
                logger.debug(f"Request to {url} failed (attempt {attempt + 1}): {e}")
                if attempt < self.max_retries:
                    time.sleep(self.retry_backoff_factor)

        self.cache[url] = None
        return None

    def clear_cache(self) -> None:
        """Clear all cached HTTP responses."""
        self.cache.clear()
