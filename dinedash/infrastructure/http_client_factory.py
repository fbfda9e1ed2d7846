"""Shared HTTP client for calls to the remote asset service."""
import httpx
import logging
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)

# Process-wide client, created on first upload
_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Get or create the pooled client used by the Cloudinary gateway.
    
    The whole-request timeout comes from UPLOAD_TIMEOUT_SECONDS; it is the
    only time limit on an image upload.
    
    Returns:
        Shared AsyncClient instance
    """
    global _shared_client
    
    if _shared_client is None:
        timeout = get_settings().upload_timeout_seconds
        _shared_client = httpx.AsyncClient(
            timeout=timeout,
            limits=httpx.Limits(
                max_keepalive_connections=10,
                max_connections=50,
                keepalive_expiry=30.0,
            ),
            http2=True,
        )
        logger.info(f"Created shared upload HTTP client (timeout {timeout}s)")
    
    return _shared_client


async def close_shared_http_client() -> None:
    """Close the shared client on application shutdown."""
    global _shared_client
    
    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared upload HTTP client")
