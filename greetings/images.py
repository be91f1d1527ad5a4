"""
Image probe: decides whether an image URL is usable before it is shown.

A URL is usable when it answers with a 2xx response carrying an image
content type within the probe timeout. Anything else (blank URL, network
error, timeout, HTML error page) counts as unusable.
"""

import asyncio
import logging

import httpx

from greetings.config import IMAGE_PROBE_TIMEOUT

logger = logging.getLogger(__name__)


async def _get(url: str, timeout: float, transport) -> httpx.Response:
    async with httpx.AsyncClient(
        timeout=timeout, transport=transport, follow_redirects=True,
    ) as client:
        return await client.get(url)


async def probe_image(
    url: str | None,
    *,
    timeout: float = IMAGE_PROBE_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    if not url or not url.strip():
        return False

    # httpx timeouts are per phase; wait_for bounds the whole probe
    try:
        resp = await asyncio.wait_for(_get(url.strip(), timeout, transport), timeout)
    except asyncio.TimeoutError:
        logger.info("Image probe timed out after %.1fs for %s", timeout, url)
        return False
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.info("Image probe failed for %s: %s", url, e)
        return False

    content_type = resp.headers.get("content-type", "").lower()
    usable = resp.is_success and content_type.startswith("image/")
    if not usable:
        logger.info(
            "Image probe rejected %s: status=%d content-type=%r",
            url, resp.status_code, content_type,
        )
    return usable
