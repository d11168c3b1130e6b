"""Tests for the storage service client."""

import httpx
import pytest

from flagpost.core.errors import UpstreamIntegrationFailure
from flagpost.services.storage import StorageClient, StorageConfig
from tests.conftest import BROKEN_STORAGE_ID


@pytest.mark.asyncio
async def test_generate_upload_url(storage_client, storage_requests) -> None:
    target = await storage_client.generate_upload_url()

    assert target.upload_url.endswith("/upload/one-time")
    assert storage_requests[0].headers["Authorization"] == "Bearer test-key"


@pytest.mark.asyncio
async def test_get_url_known_and_unknown(storage_client, stored_files) -> None:
    assert await storage_client.get_url("storage-id") == stored_files["storage-id"]
    assert await storage_client.get_url("storage-unknown") is None


@pytest.mark.asyncio
async def test_server_error_is_upstream_failure(storage_client) -> None:
    with pytest.raises(UpstreamIntegrationFailure):
        await storage_client.get_url(BROKEN_STORAGE_ID)


@pytest.mark.asyncio
async def test_ensure_exists(storage_client) -> None:
    await storage_client.ensure_exists("storage-selfie")
    with pytest.raises(UpstreamIntegrationFailure):
        await storage_client.ensure_exists("storage-unknown")


@pytest.mark.asyncio
async def test_transport_error_is_upstream_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = StorageClient(
        StorageConfig(base_url="http://storage.test", api_key=None, timeout_seconds=1.0),
        transport=httpx.MockTransport(handler),
    )
    try:
        with pytest.raises(UpstreamIntegrationFailure):
            await client.generate_upload_url()
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_upload_url_missing_from_response() -> None:
    client = StorageClient(
        StorageConfig(base_url="http://storage.test", api_key=None, timeout_seconds=1.0),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
    )
    with pytest.raises(UpstreamIntegrationFailure):
        await client.generate_upload_url()
    await client.close()
