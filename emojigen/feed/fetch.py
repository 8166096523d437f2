"""Downloading the emoji feed and the alias database."""

from __future__ import annotations

import logging
from typing import Any

import requests

from ..core.errors import FeedFetchError

logger = logging.getLogger(__name__)

FEED_URL_TEMPLATE = "https://unicode.org/Public/emoji/{version}/emoji-test.txt"
GEMOJI_URL = "https://raw.githubusercontent.com/github/gemoji/master/db/emoji.json"


def feed_url(version: str) -> str:
    return FEED_URL_TEMPLATE.format(version=version)


def fetch_text(url: str, timeout: float = 30.0) -> str:
    """GET a URL and return its body as text.

    Raises:
        FeedFetchError: On connection errors or non-2xx responses.
    """
    logger.info("Downloading %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FeedFetchError(f"Failed to download {url}: {e}") from e
    resp.encoding = "utf-8"
    return resp.text


def fetch_feed(url: str, timeout: float = 30.0) -> str:
    """Download an ``emoji-test.txt`` feed."""
    text = fetch_text(url, timeout=timeout)
    logger.info("Fetched feed (%d lines)", text.count("\n"))
    return text


def fetch_json(url: str, timeout: float = 30.0) -> Any:
    """Download and decode a JSON document."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except requests.exceptions.RequestException as e:
        raise FeedFetchError(f"Failed to download {url}: {e}") from e
    except ValueError as e:
        raise FeedFetchError(f"Invalid JSON from {url}: {e}") from e
