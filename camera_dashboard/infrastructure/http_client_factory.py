"""HTTP client factory for the session-owned connection pool."""
import httpx
import logging
from typing import Any, Dict, Optional

from ..core.config import Settings

logger = logging.getLogger(__name__)


def create_http_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create the async HTTP client owned by one dashboard session.
    
    The client is reused for every call the session makes to benefit from:
    - Connection pooling
    - Keep-alive connections
    
    Args:
        settings: Application settings (timeout override)
        transport: Optional transport, used by tests to stub the remote API
        
    Returns:
        New AsyncClient instance; the caller owns it and must close it
    """
    options: Dict[str, Any] = {
        "limits": httpx.Limits(
            max_keepalive_connections=10,
            max_connections=20,
            keepalive_expiry=30.0,
        ),
        "http2": True,
    }
    # Without an override the httpx default timeout applies
    if settings.camera_api_timeout is not None:
        options["timeout"] = settings.camera_api_timeout
    if transport is not None:
        options["transport"] = transport
    
    client = httpx.AsyncClient(**options)
    logger.info("Created HTTP client for camera API session")
    return client


async def close_http_client(client: Optional[httpx.AsyncClient]) -> None:
    """
    Close a session HTTP client (call at session end).
    """
    if client is not None and not client.is_closed:
        await client.aclose()
        logger.info("Closed camera API HTTP client")
