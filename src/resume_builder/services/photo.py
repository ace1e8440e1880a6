"""Best-effort loading of the optional profile photo.

This is the only step of resume generation that waits on I/O. It never
raises: any failure is logged and reported as ``None`` so the document is
produced without a photo.
"""

from __future__ import annotations

import base64
import io
import logging
import os
from urllib.parse import unquote_to_bytes

import httpx
from reportlab.lib.utils import ImageReader

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_PHOTO_TIMEOUT",
    "decode_image",
    "fetch_photo",
    "get_photo_timeout",
]

DEFAULT_PHOTO_TIMEOUT = 10.0


def get_photo_timeout() -> float:
    """Return the photo download timeout in seconds.

    Read from ``RESUME_PHOTO_TIMEOUT``; invalid or non-positive values fall
    back to the default.
    """
    raw = os.getenv("RESUME_PHOTO_TIMEOUT")
    if not raw:
        return DEFAULT_PHOTO_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid RESUME_PHOTO_TIMEOUT=%r", raw)
        return DEFAULT_PHOTO_TIMEOUT
    return value if value > 0 else DEFAULT_PHOTO_TIMEOUT


def decode_image(data: bytes) -> ImageReader:
    """Wrap *data* in an :class:`ImageReader`, decoding it fully up front."""
    reader = ImageReader(io.BytesIO(data))
    reader.getSize()
    reader.getRGBData()
    return reader


def _decode_data_uri(uri: str) -> bytes:
    header, _, payload = uri.partition(",")
    if header.endswith(";base64"):
        return base64.b64decode(payload, validate=True)
    return unquote_to_bytes(payload)


async def _download(url: str, timeout: float, client: httpx.AsyncClient | None) -> bytes:
    if client is not None:
        response = await client.get(url, timeout=timeout, follow_redirects=True)
    else:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
            response = await owned.get(url)
    response.raise_for_status()
    return response.content


async def fetch_photo(
    url: str | None,
    *,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> ImageReader | None:
    """Download and decode the photo at *url*.

    Supports ``http(s)://`` URLs and ``data:`` URIs.

    Args:
        url: Photo location; blank means no photo.
        timeout: Seconds to wait for the download. Defaults to
            :func:`get_photo_timeout`.
        client: Optional shared ``httpx.AsyncClient``.

    Returns:
        A decoded image, or ``None`` when there is no usable photo.
    """
    url = (url or "").strip()
    if not url:
        return None

    try:
        if url.startswith("data:"):
            content = _decode_data_uri(url)
        elif url.lower().startswith(("http://", "https://")):
            content = await _download(url, timeout or get_photo_timeout(), client)
        else:
            logger.warning("Skipping photo with unsupported location %.80s", url)
            return None
        return decode_image(content)
    except Exception as exc:
        logger.warning("Could not load photo from %.80s: %s", url, exc)
        return None
