"""Client for the external file storage service.

Uploads follow a two-step protocol: the server asks storage for a one-time
upload URL and hands it to the client, the client pushes the raw bytes there
and receives a storage id, and only that id is persisted against a user or
post. This module never sees file contents.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import httpx

from flagpost.core.errors import UpstreamIntegrationFailure
from flagpost.core.settings import settings

# Configure logger for this module
logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404


@dataclass(frozen=True)
class StorageConfig:
    """Immutable configuration for storage operations."""

    base_url: str
    api_key: str | None
    timeout_seconds: float


@dataclass(frozen=True)
class UploadTarget:
    """One-time destination for a client-side upload."""

    upload_url: str


def load_storage_config() -> StorageConfig:
    """Build configuration object from global settings."""

    return StorageConfig(
        base_url=settings.storage_base_url,
        api_key=settings.storage_api_key,
        timeout_seconds=float(settings.storage_timeout_seconds),
    )


class StorageClient:
    """HTTP client wrapper for the storage service."""

    def __init__(
        self,
        config: StorageConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or load_storage_config()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                headers = {}
                if self.config.api_key:
                    headers["Authorization"] = f"Bearer {self.config.api_key}"
                self._client = httpx.AsyncClient(
                    base_url=self.config.base_url,
                    timeout=httpx.Timeout(self.config.timeout_seconds),
                    headers=headers,
                    transport=self._transport,
                )
        return self._client

    async def _request(self, method: str, path: str) -> httpx.Response:
        client = await self._ensure_client()
        try:
            return await client.request(method, path)
        except httpx.HTTPError as exc:
            logger.warning("Storage request %s %s failed: %s", method, path, exc)
            raise UpstreamIntegrationFailure(f"Storage request failed: {exc}") from exc

    async def generate_upload_url(self) -> UploadTarget:
        """Request a one-time upload target."""

        response = await self._request("POST", "/upload-url")
        if not response.is_success:
            raise UpstreamIntegrationFailure(
                f"Storage responded with {response.status_code} when issuing an upload URL",
            )
        upload_url = response.json().get("upload_url")
        if not upload_url:
            raise UpstreamIntegrationFailure("Storage returned no upload URL")
        return UploadTarget(upload_url=upload_url)

    async def get_url(self, storage_id: str) -> str | None:
        """Resolve a storage id to a retrieval URL, or None if it does not exist."""

        response = await self._request("GET", f"/files/{storage_id}")
        if response.status_code == HTTP_NOT_FOUND:
            return None
        if not response.is_success:
            raise UpstreamIntegrationFailure(
                f"Storage responded with {response.status_code} for {storage_id}",
            )
        return response.json().get("url")

    async def ensure_exists(self, storage_id: str) -> None:
        """Raise :class:`UpstreamIntegrationFailure` unless ``storage_id`` was uploaded."""

        if await self.get_url(storage_id) is None:
            raise UpstreamIntegrationFailure(f"Stored file {storage_id} does not exist")

    async def close(self) -> None:
        """Clean up underlying HTTP client resources."""

        async with self._client_lock:
            if self._client is not None:
                await self._client.aclose()
                self._client = None


class _StorageClientSingleton:
    """Singleton wrapper for StorageClient."""

    _instance: StorageClient | None = None

    @classmethod
    def get_instance(cls) -> StorageClient:
        """Get or create the singleton StorageClient instance."""
        if cls._instance is None:
            cls._instance = StorageClient()
        return cls._instance


def get_storage_client() -> StorageClient:
    """Return a singleton storage client instance."""
    return _StorageClientSingleton.get_instance()
