from typing import Protocol


class AccountContext(Protocol):
    """Anything exposing the authenticated account id.

    The device service reads ``account_id`` on every call and never caches it.
    """

    @property
    def account_id(self) -> str: ...


class StaticAccount:
    def __init__(self, account_id: str):
        self._account_id = account_id

    @property
    def account_id(self) -> str:
        return self._account_id
