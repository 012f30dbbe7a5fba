# listgen/core/media/fetcher.py
"""
Image store client: image reference (URL) → ImagePart (bytes + MIME type).

Fetches run in parallel on a small thread pool; the returned list is always
aligned 1:1 with the input order because callers treat the first image as the
primary photo. Any single failure fails the whole batch (no partial results).
"""

from __future__ import annotations

import logging
import mimetypes
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from urllib.parse import urlparse

import requests

from listgen.core.errors import ImageFetchError
from listgen.schemas.models import ImagePart

logger = logging.getLogger(__name__)

_DEFAULT_MIME = "image/jpeg"
_DEFAULT_TIMEOUT_S = 20.0
_DEFAULT_UA = "listgen/0.1 (+listing-content)"


def _mime_for(content_type: str | None, url: str) -> str:
    if content_type:
        ct = content_type.split(";", 1)[0].strip().lower()
        if ct and ct != "application/octet-stream":
            return ct
    guessed, _ = mimetypes.guess_type(Path(urlparse(url).path).name)
    return guessed or _DEFAULT_MIME


def fetch_image(url: str, *, timeout_s: float = _DEFAULT_TIMEOUT_S, user_agent: str = _DEFAULT_UA) -> ImagePart:
    """GET one image. Raises ImageFetchError on transport errors, HTTP >= 400 or an empty body."""
    headers = {"User-Agent": user_agent, "Accept": "image/*,*/*;q=0.8"}
    try:
        resp = requests.get(url, headers=headers, timeout=timeout_s)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise ImageFetchError(f"Could not fetch image {url!r}: {exc}") from exc

    data = resp.content or b""
    if not data:
        raise ImageFetchError(f"Image {url!r} returned an empty body.")
    return ImagePart(data=data, mime_type=_mime_for(resp.headers.get("Content-Type"), url), source_url=url)


def fetch_images(
    urls: Sequence[str],
    *,
    timeout_s: float = _DEFAULT_TIMEOUT_S,
    user_agent: str = _DEFAULT_UA,
    max_workers: int = 4,
) -> list[ImagePart]:
    """
    Fetch every reference, preserving input order.
    The first failure (in input order) is re-raised once all fetches settle.
    """
    refs = list(urls)
    if not refs:
        return []
    logger.debug("Fetching %d image(s) with %d worker(s)", len(refs), max_workers)

    def _one(u: str) -> ImagePart:
        return fetch_image(u, timeout_s=timeout_s, user_agent=user_agent)

    if len(refs) == 1 or max_workers <= 1:
        return [_one(u) for u in refs]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(refs))) as pool:
        # Executor.map yields in submission order and re-raises the first failed item.
        return list(pool.map(_one, refs))


__all__ = ["fetch_image", "fetch_images"]
