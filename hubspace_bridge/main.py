import logging
from typing import Optional

import httpx

from .account import AccountContext, StaticAccount
from .api_client import create_http_client
from .device_service import DeviceService
from .settings import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings):
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))


def build_device_service(
    account: Optional[AccountContext] = None,
    settings: Settings = default_settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DeviceService:
    # no network traffic until the first get/set
    client = create_http_client(settings, transport=transport)
    return DeviceService(
        client,
        account or StaticAccount(settings.ACCOUNT_ID),
        lock_timeout=settings.LOCK_TIMEOUT_MS / 1000,
    )
