"""
Unit tests for the Cloudinary transcoding gateway.
Uses httpx.MockTransport, no network access.
"""
import hashlib

import httpx
import pytest

from dinedash.core.config import AssetStorageConfig
from dinedash.domain.exceptions import RemoteUploadError
from dinedash.infrastructure.external.cloudinary_client import (
    INCOMING_TRANSFORMATION,
    build_incoming_transformation,
    CloudinaryGateway,
)
from dinedash.infrastructure.http_client_factory import close_shared_http_client
from dinedash.infrastructure.storage.staging_store import StagedFile

SECURE_URL = "https://res.cloudinary.com/demo-cloud/image/upload/v1/uploads/dish.webp"


@pytest.fixture
def config():
    return AssetStorageConfig(
        cloud_name="demo-cloud",
        api_key="123456",
        api_secret="test-secret",
    )


@pytest.fixture
def staged(tmp_path):
    path = tmp_path / "1700000000000_dish.png"
    path.write_bytes(b"\x89PNG fake image")
    return StagedFile(path, "dish.png", path.stat().st_size)


def _gateway(config, handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CloudinaryGateway(config=config, http_client=client)


class TestUploadPolicy:
    """The remote transformation policy is fixed"""

    def test_transformation_limits_width_to_1600(self):
        assert INCOMING_TRANSFORMATION == "c_limit,w_1600/f_auto,q_auto"
        assert build_incoming_transformation() == INCOMING_TRANSFORMATION

    def test_upload_params(self, config):
        params = CloudinaryGateway(config=config).build_upload_params(timestamp=1700000000)

        assert params["folder"] == "uploads"
        assert params["format"] == "webp"
        assert params["allowed_formats"] == "jpg,jpeg,png,gif,webp,heic,heif,avif"
        assert params["transformation"] == "c_limit,w_1600/f_auto,q_auto"
        assert params["timestamp"] == "1700000000"
        assert params["api_key"] == "123456"

    def test_signature(self, config):
        params = CloudinaryGateway(config=config).build_upload_params(timestamp=1700000000)
        expected = hashlib.sha1(
            (
                "allowed_formats=jpg,jpeg,png,gif,webp,heic,heif,avif"
                "&folder=uploads&format=webp&timestamp=1700000000"
                "&transformation=c_limit,w_1600/f_auto,q_auto"
                "test-secret"
            ).encode("utf-8")
        ).hexdigest()
        assert params["signature"] == expected

    def test_upload_url(self, config):
        assert config.upload_url == "https://api.cloudinary.com/v1_1/demo-cloud/image/upload"


class TestUpload:
    """Tests for CloudinaryGateway.upload"""

    @pytest.mark.asyncio
    async def test_success_returns_secure_url_and_discards_file(self, config, staged):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(200, json={"secure_url": SECURE_URL, "width": 1600})

        url = await _gateway(config, handler).upload(staged)

        assert url == SECURE_URL
        assert seen["url"] == config.upload_url
        assert b"c_limit,w_1600/f_auto,q_auto" in seen["body"]
        assert b"\x89PNG fake image" in seen["body"]
        assert not staged.path.exists()

    @pytest.mark.asyncio
    async def test_http_error_raises_and_discards_file(self, config, staged):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": {"message": "Invalid image file"}})

        with pytest.raises(RemoteUploadError) as exc_info:
            await _gateway(config, handler).upload(staged)

        assert exc_info.value.status_code == 400
        assert not staged.path.exists()

    @pytest.mark.asyncio
    async def test_transport_error_raises_and_discards_file(self, config, staged):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(RemoteUploadError):
            await _gateway(config, handler).upload(staged)
        assert not staged.path.exists()

    @pytest.mark.asyncio
    async def test_missing_secure_url_raises(self, config, staged):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"public_id": "uploads/dish"})

        with pytest.raises(RemoteUploadError):
            await _gateway(config, handler).upload(staged)
        assert not staged.path.exists()

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, config, staged):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>bad gateway</html>")

        with pytest.raises(RemoteUploadError):
            await _gateway(config, handler).upload(staged)
        assert not staged.path.exists()


class TestSharedClientLookup:
    """Tests for CloudinaryGateway.http_client without an injected client"""

    @pytest.mark.asyncio
    async def test_uses_fresh_shared_client_after_shutdown(self, config):
        gateway = CloudinaryGateway(config=config)
        first = gateway.http_client
        try:
            assert gateway.http_client is first

            await close_shared_http_client()
            assert first.is_closed

            second = gateway.http_client
            assert second is not first
            assert not second.is_closed
        finally:
            await close_shared_http_client()

    def test_injected_client_is_kept(self, config):
        client = httpx.AsyncClient()
        assert CloudinaryGateway(config=config, http_client=client).http_client is client
