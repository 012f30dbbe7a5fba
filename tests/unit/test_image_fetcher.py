from __future__ import annotations

import threading
import time

import pytest
import requests

from listgen.core.errors import ImageFetchError, ProviderError
from listgen.core.media.fetcher import fetch_image, fetch_images
from tests.utils import PNG_STUB


class _FakeResp:
    def __init__(self, *, status: int = 200, headers: dict[str, str] | None = None, body: bytes = PNG_STUB):
        self.status_code = status
        self.headers = headers or {}
        self.content = body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


def test_fetch_image_uses_content_type(monkeypatch):
    seen: dict = {}

    def fake_get(url, *, headers, timeout):
        seen.update(url=url, headers=headers, timeout=timeout)
        return _FakeResp(headers={"Content-Type": "image/webp; charset=binary"})

    monkeypatch.setattr("listgen.core.media.fetcher.requests.get", fake_get)
    part = fetch_image("https://cdn.example.com/a", timeout_s=7.5, user_agent="TestAgent/1.0")

    assert part.data == PNG_STUB
    assert part.mime_type == "image/webp"
    assert part.source_url == "https://cdn.example.com/a"
    assert seen["timeout"] == 7.5
    assert seen["headers"]["User-Agent"] == "TestAgent/1.0"


@pytest.mark.parametrize(
    "url,content_type,expected",
    [
        ("https://x/y/photo.png", None, "image/png"),
        ("https://x/y/photo.png?w=200", "application/octet-stream", "image/png"),
        ("https://x/y/photo", None, "image/jpeg"),
    ],
)
def test_mime_guessing(monkeypatch, url, content_type, expected):
    headers = {"Content-Type": content_type} if content_type else {}
    monkeypatch.setattr("listgen.core.media.fetcher.requests.get", lambda *a, **k: _FakeResp(headers=headers))
    assert fetch_image(url).mime_type == expected


@pytest.mark.parametrize(
    "resp_or_exc",
    [
        _FakeResp(status=404),
        _FakeResp(body=b""),
        requests.ConnectionError("refused"),
        requests.Timeout("slow"),
    ],
)
def test_fetch_failures_raise_image_fetch_error(monkeypatch, resp_or_exc):
    def fake_get(*args, **kwargs):
        if isinstance(resp_or_exc, Exception):
            raise resp_or_exc
        return resp_or_exc

    monkeypatch.setattr("listgen.core.media.fetcher.requests.get", fake_get)
    with pytest.raises(ImageFetchError) as ei:
        fetch_image("https://cdn.example.com/bad.jpg")
    assert isinstance(ei.value, ProviderError)


def test_fetch_images_preserves_input_order_under_concurrency(monkeypatch):
    delays = {"https://x/0.jpg": 0.05, "https://x/1.jpg": 0.0, "https://x/2.jpg": 0.02}
    active = {"n": 0, "max": 0}
    lock = threading.Lock()

    def fake_get(url, **kwargs):
        with lock:
            active["n"] += 1
            active["max"] = max(active["max"], active["n"])
        time.sleep(delays[url])
        with lock:
            active["n"] -= 1
        return _FakeResp(body=url.encode())

    monkeypatch.setattr("listgen.core.media.fetcher.requests.get", fake_get)
    parts = fetch_images(list(delays), max_workers=3)

    assert [p.source_url for p in parts] == list(delays)
    assert [p.data for p in parts] == [u.encode() for u in delays]


def test_fetch_images_fails_whole_batch(monkeypatch):
    def fake_get(url, **kwargs):
        if url.endswith("bad.jpg"):
            return _FakeResp(status=500)
        return _FakeResp()

    monkeypatch.setattr("listgen.core.media.fetcher.requests.get", fake_get)
    with pytest.raises(ImageFetchError):
        fetch_images(["https://x/ok.jpg", "https://x/bad.jpg", "https://x/ok2.jpg"], max_workers=2)


def test_fetch_images_empty_makes_no_requests(monkeypatch):
    def boom(*a, **k):
        raise AssertionError("network should not be touched")

    monkeypatch.setattr("listgen.core.media.fetcher.requests.get", boom)
    assert fetch_images([]) == []
