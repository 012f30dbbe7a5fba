from __future__ import annotations

from .fetcher import fetch_image, fetch_images

__all__ = ["fetch_image", "fetch_images"]
