import logging
from typing import Optional

import httpx

from .settings import Settings

log = logging.getLogger("api")


def auth_headers(token: str):
    return {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}


def create_http_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Client bound to the Afero API base url with the bearer token attached."""
    log.debug("Creating API client for %s", settings.API_BASE_URL)
    return httpx.AsyncClient(
        base_url=settings.API_BASE_URL,
        headers=auth_headers(settings.API_TOKEN),
        timeout=settings.HTTP_TIMEOUT,
        transport=transport,
    )


def account_path(account_id: str, device_id: str, *parts: str) -> str:
    return "/".join(["accounts", account_id, "devices", device_id, *parts])
