from __future__ import annotations

from threading import Lock
from typing import Optional

from ..core.ports.credential_port import CredentialStorePort


class InMemoryCredentialStore(CredentialStorePort):
    def __init__(self, token: Optional[str] = None) -> None:
        self._lock = Lock()
        self._token = token

    def get(self) -> str | None:
        with self._lock:
            return self._token

    def set(self, token: str) -> None:
        with self._lock:
            self._token = token
