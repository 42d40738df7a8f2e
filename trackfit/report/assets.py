"""Header logo loading: one awaited batch, best effort, cached per process."""

from __future__ import annotations

import asyncio
import logging
from io import BytesIO
from pathlib import Path

import httpx
from reportlab.lib.utils import ImageReader

logger = logging.getLogger(__name__)

DEFAULT_LOGO_TIMEOUT = 5.0

# file path or URL -> decoded image; only successful loads are kept
_logo_cache: dict[str, ImageReader] = {}


def clear_logo_cache() -> None:
    _logo_cache.clear()


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _cache_key(source: str, base_dir: Path | None) -> str:
    if _is_url(source):
        return source
    path = Path(source)
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return str(path)


async def _fetch_bytes(key: str, client: httpx.AsyncClient) -> bytes:
    if _is_url(key):
        resp = await client.get(key)
        resp.raise_for_status()
        return resp.content
    path = Path(key)
    if not path.exists():
        raise FileNotFoundError(f"Logo not found: {path}")
    return await asyncio.to_thread(path.read_bytes)


async def _load_one(
    source: str,
    base_dir: Path | None,
    client: httpx.AsyncClient,
    timeout: float,
) -> ImageReader | None:
    key = _cache_key(source, base_dir)
    cached = _logo_cache.get(key)
    if cached is not None:
        return cached
    try:
        data = await asyncio.wait_for(_fetch_bytes(key, client), timeout)
        image = ImageReader(BytesIO(data))
    except asyncio.TimeoutError:
        logger.warning("Logo %s timed out after %.1fs; leaving blank", source, timeout)
        return None
    except Exception as e:
        logger.warning("Logo %s could not be loaded (%s); leaving blank", source, e)
        return None
    _logo_cache[key] = image
    return image


async def load_logos(
    sources: list[str],
    timeout: float = DEFAULT_LOGO_TIMEOUT,
    base_dir: str | Path | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[ImageReader | None]:
    """Load every logo concurrently; a slot is None when its logo failed.

    *sources* are file paths (relative ones resolve against *base_dir*) or
    http(s) URLs. Never raises for a bad source.
    """
    base = Path(base_dir) if base_dir is not None else None
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, transport=transport) as client:
        return list(
            await asyncio.gather(*(_load_one(s, base, client, timeout) for s in sources))
        )
