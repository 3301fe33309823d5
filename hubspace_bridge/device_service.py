"""Reads and writes device attributes on the Afero cloud API.

All calls for the account go through one lock: the remote API answers
concurrent requests against the same account with a spurious
"The device is not available" error.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Literal, Optional

import httpx

from .account import AccountContext
from .api_client import account_path
from .device_functions import DeviceFunction, get_device_function_def
from .encoding import decode_boolean, decode_integer, encode_value
from .errors import LockTimeoutError
from .models import AferoErrorResponse, AttributeWriteRequest, DeviceStatusResponse, is_afero_error

log = logging.getLogger("device")

DEFAULT_LOCK_TIMEOUT = 5.0


@dataclass
class RemoteResult:
    status: Literal["ok", "absent", "failed"]
    value: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, value: Any = None) -> "RemoteResult":
        return cls("ok", value)

    @classmethod
    def absent(cls) -> "RemoteResult":
        return cls("absent")

    @classmethod
    def failed(cls, error: BaseException) -> "RemoteResult":
        return cls("failed", error=error)


def classify_error(error: BaseException) -> str:
    """Message to log for a failed remote call.

    Uses the Afero ``error_description`` when the response body carries one.
    """
    if isinstance(error, httpx.HTTPStatusError):
        try:
            payload = error.response.json()
        except ValueError:
            payload = None
        if is_afero_error(payload):
            return AferoErrorResponse.model_validate(payload).error_description
    return str(error) or type(error).__name__


class DeviceService:
    def __init__(self, client: httpx.AsyncClient, account: AccountContext, lock_timeout: float = DEFAULT_LOCK_TIMEOUT):
        self._client = client
        self._account = account
        self._lock_timeout = lock_timeout
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def _account_server_lock(self):
        try:
            await asyncio.wait_for(self._lock.acquire(), timeout=self._lock_timeout)
        except asyncio.TimeoutError:
            raise LockTimeoutError(self._lock_timeout) from None
        try:
            yield
        finally:
            self._lock.release()

    async def _locked(self, call: Callable[[], Awaitable[RemoteResult]]) -> RemoteResult:
        try:
            async with self._account_server_lock():
                return await call()
        except Exception as e:
            return RemoteResult.failed(e)

    def _log_failure(self, result: RemoteResult) -> None:
        if result.status == "failed":
            log.error("The remote service returned an error: %s", classify_error(result.error))

    async def set_value(self, device_id: str, function: DeviceFunction, value: Any) -> None:
        """Write ``value`` to the attribute behind ``function``.

        Remote failures are logged, never raised. Unknown functions and
        unencodable values raise before any request is made.
        """
        definition = get_device_function_def(function)
        body = AttributeWriteRequest(attrId=definition.attribute_id, data=encode_value(value))

        async def write() -> RemoteResult:
            path = account_path(self._account.account_id, device_id, "actions")
            log.debug("POST %s %s", path, body)
            r = await self._client.post(path, json=body.model_dump())
            r.raise_for_status()
            if r.status_code != 200:
                log.error("Remote server did not accept new value %s for device (ID: %s).", value, device_id)
                return RemoteResult.absent()
            return RemoteResult.ok()

        self._log_failure(await self._locked(write))

    async def get_value(self, device_id: str, function: DeviceFunction) -> Any:
        """Raw attribute value, or None when it is missing or the call failed."""
        definition = get_device_function_def(function)

        async def read() -> RemoteResult:
            path = account_path(self._account.account_id, device_id)
            log.debug("GET %s", path)
            r = await self._client.get(path, params={"expansions": "attributes"})
            r.raise_for_status()
            status = DeviceStatusResponse.model_validate(r.json())
            attribute = status.find_attribute(definition.attribute_id)
            if attribute is None:
                log.error("Failed to find value for %s for device (device ID: %s)", definition.label, device_id)
                return RemoteResult.absent()
            return RemoteResult.ok(attribute.value)

        result = await self._locked(read)
        self._log_failure(result)
        return result.value if result.status == "ok" else None

    async def get_value_as_boolean(self, device_id: str, function: DeviceFunction) -> Optional[bool]:
        return decode_boolean(await self.get_value(device_id, function))

    async def get_value_as_integer(self, device_id: str, function: DeviceFunction) -> Optional[int]:
        return decode_integer(await self.get_value(device_id, function))
