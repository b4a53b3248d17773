"""Unit tests for web fetching functionality."""

import logging
from unittest.mock import Mock

import requests

from discover_actions.globals.web_fetcher import WebFetcher


def _response(status_code: int, json_data=None) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


class TestWebFetcher:
    """Unit tests for WebFetcher."""

    def test_fetch_caches_successful_responses(self):
        """Test that a second fetch of the same URL is served from the cache."""
        session = Mock()
        session.headers = {}
        session.get.return_value = _response(200, {"ok": True})
        fetcher = WebFetcher(session=session)

        first = fetcher.fetch("https://example.com/a")
        second = fetcher.fetch("https://example.com/a")

        assert first is second
        assert session.get.call_count == 1

    def test_fetch_retries_and_caches_failure(self):
        """Test that failures are retried and the final failure is cached."""
        session = Mock()
        session.headers = {}
        session.get.side_effect = requests.ConnectionError("down")
        fetcher = WebFetcher(session=session, max_retries=2, retry_backoff_factor=0)

        assert fetcher.fetch("https://example.com/a") is None
        assert fetcher.fetch("https://example.com/a") is None
        assert session.get.call_count == 3

    def test_clear_cache(self):
        """Test that clearing the cache forces a new request."""
        session = Mock()
        session.headers = {}
        session.get.return_value = _response(200)
        fetcher = WebFetcher(session=session)

        fetcher.fetch("https://example.com/a")
        fetcher.clear_cache()
        fetcher.fetch("https://example.com/a")

        assert session.get.call_count == 2

    def test_token_sets_authorization_header(self):
        """Test that a GitHub token is sent as an authorization header."""
        session = Mock()
        session.headers = {}
        WebFetcher(session=session, github_token="secret")
        assert session.headers["Authorization"] == "token secret"

    def test_fetch_readme(self):
        """Test that the readme content is taken from the contents API payload."""
        session = Mock()
        session.headers = {}
        session.get.return_value = _response(200, {"content": "IyBSZWFkbWU="})
        fetcher = WebFetcher(session=session)

        assert fetcher.fetch_readme("octo", "repo") == "IyBSZWFkbWU="
        url = session.get.call_args[0][0]
        assert url == "https://api.github.com/repos/octo/repo/contents/README.md"

    def test_missing_readme_logs_debug(self, caplog):
        """Test that a missing readme is logged at debug level and gives None."""
        session = Mock()
        session.headers = {}
        session.get.return_value = _response(404)
        fetcher = WebFetcher(session=session, max_retries=0)

        with caplog.at_level(logging.DEBUG, logger="discover_actions.globals.web_fetcher"):
            assert fetcher.fetch_readme("octo", "repo") is None

        assert "No readme file found in repository: repo" in caplog.text

    def test_readme_payload_without_content(self):
        """Test that a payload without a content key gives None."""
        session = Mock()
        session.headers = {}
        session.get.return_value = _response(200, {"message": "Not Found"})
        fetcher = WebFetcher(session=session)

        assert fetcher.fetch_readme("octo", "repo") is None
