"""Tests for downloading the feed and the gemoji database."""

import pytest
import requests

from emojigen.core.errors import FeedFetchError
from emojigen.feed import fetch


class FakeResponse:
    def __init__(self, text="", status_code=200, payload=None):
        self.text = text
        self.status_code = status_code
        self.encoding = None
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def test_feed_url():
    assert fetch.feed_url("13.1") == "https://unicode.org/Public/emoji/13.1/emoji-test.txt"


def test_fetch_feed(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(text="# group: Flags\n")

    monkeypatch.setattr(fetch.requests, "get", fake_get)

    assert fetch.fetch_feed("https://example.com/feed.txt", timeout=5) == "# group: Flags\n"
    assert calls == [("https://example.com/feed.txt", 5)]


def test_connection_error(monkeypatch):
    def fake_get(url, timeout):
        raise requests.exceptions.ConnectionError("unreachable")

    monkeypatch.setattr(fetch.requests, "get", fake_get)

    with pytest.raises(FeedFetchError, match="Failed to download"):
        fetch.fetch_feed("https://example.com/feed.txt")


def test_http_error(monkeypatch):
    monkeypatch.setattr(
        fetch.requests, "get", lambda url, timeout: FakeResponse(status_code=404)
    )
    with pytest.raises(FeedFetchError, match="404"):
        fetch.fetch_text("https://example.com/missing.txt")


def test_fetch_json(monkeypatch):
    payload = [{"emoji": "\U0001F600", "aliases": ["grinning"]}]
    monkeypatch.setattr(
        fetch.requests, "get", lambda url, timeout: FakeResponse(payload=payload)
    )
    assert fetch.fetch_json(fetch.GEMOJI_URL) == payload


def test_fetch_json_invalid(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda url, timeout: FakeResponse())
    with pytest.raises(FeedFetchError, match="Invalid JSON"):
        fetch.fetch_json(fetch.GEMOJI_URL)
