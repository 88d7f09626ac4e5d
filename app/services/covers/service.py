"""Cover resolution - cache first, bounded network fallback, placeholder otherwise."""

import asyncio
import base64

import httpx
from loguru import logger

from app.repositories.catalog import CoverRepository
from app.services.network import NetworkMonitor
from settings import COVER_MIN_BYTES, COVER_TIMEOUT, COVERS_BASE_URL, PLACEHOLDER_COVER


class CoverFetchError(Exception):
    """Response was not a usable image."""


def to_data_url(content_type: str, body: bytes) -> str:
    """Encode image bytes as a text-safe data URL."""
    mime = content_type.split(";")[0].strip() or "image/jpeg"
    return f"data:{mime};base64,{base64.b64encode(body).decode('ascii')}"


class CoverService:
    """Turns an optional cover id into displayable image data.

    ``resolve`` never raises: it returns either cached/fetched image data or
    the placeholder asset path.
    """

    def __init__(
        self,
        covers: CoverRepository,
        network: NetworkMonitor,
        base_url: str = COVERS_BASE_URL,
        timeout: float = COVER_TIMEOUT,
        min_bytes: int = COVER_MIN_BYTES,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._covers = covers
        self._network = network
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._min_bytes = min_bytes
        self._transport = transport

    def cover_url(self, cover_id: int, size: str = "M") -> str:
        return f"{self._base_url}/{cover_id}-{size}.jpg"

    async def resolve(self, cover_id: int | None) -> str:
        if not cover_id:
            return PLACEHOLDER_COVER

        cached = await self._covers.get(cover_id)
        if cached:
            return cached

        if not self._network.is_online():
            return PLACEHOLDER_COVER

        try:
            image = await asyncio.wait_for(self._fetch(cover_id), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("Cover {}: timed out after {}s", cover_id, self._timeout)
            return PLACEHOLDER_COVER
        except (httpx.HTTPError, CoverFetchError) as e:
            logger.warning("Cover {}: {}", cover_id, e)
            return PLACEHOLDER_COVER
        except Exception as e:
            logger.warning("Cover {}: unexpected error: {}", cover_id, e)
            return PLACEHOLDER_COVER

        result = await self._covers.upsert(cover_id, image)
        if not result.ok:
            logger.debug("Cover {} not cached ({})", cover_id, result.value)
        return image

    async def _fetch(self, cover_id: int) -> str:
        """Download and validate one cover; returns it as a data URL."""
        async with httpx.AsyncClient(
            follow_redirects=True, timeout=self._timeout, transport=self._transport
        ) as client:
            resp = await client.get(self.cover_url(cover_id))

        if not resp.is_success:
            raise CoverFetchError(f"HTTP {resp.status_code}")

        content_type = resp.headers.get("content-type", "")
        if "image" not in content_type:
            raise CoverFetchError(f"non-image content-type '{content_type}'")

        body = resp.content
        if len(body) < self._min_bytes:
            raise CoverFetchError(f"image too small ({len(body)} bytes)")

        return to_data_url(content_type, body)
