import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from highground.config import settings

logger = logging.getLogger(__name__)


class ViewCacheInvalidator(ABC):
    """View cache invalidation interface"""

    @abstractmethod
    async def invalidate(self, path: str) -> None:
        """Mark the cached view at ``path`` stale so consumers re-fetch it"""
        pass


class LoggingCacheInvalidator(ViewCacheInvalidator):
    """Used when no revalidation endpoint is configured"""

    async def invalidate(self, path: str) -> None:
        logger.info("No revalidation endpoint configured; skipping %s", path)


class HttpCacheInvalidator(ViewCacheInvalidator):
    """Posts the stale path to the frontend's revalidation endpoint"""

    def __init__(
        self,
        url: str,
        *,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = url
        self.token = token
        # Short and separate from the Gemini request's timeout
        self.timeout = timeout if timeout is not None else settings.revalidate_timeout_seconds
        self._client = client

    async def invalidate(self, path: str) -> None:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["x-revalidate-token"] = self.token
        body = {"path": path}

        if self._client is not None:
            response = await self._client.post(
                self.url, headers=headers, json=body, timeout=self.timeout
            )
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.url, headers=headers, json=body, timeout=self.timeout
                )
        response.raise_for_status()
        logger.info("Revalidated %s", path)


def build_invalidator() -> ViewCacheInvalidator:
    if settings.revalidate_url:
        return HttpCacheInvalidator(settings.revalidate_url, token=settings.revalidate_token)
    return LoggingCacheInvalidator()
