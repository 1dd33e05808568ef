from __future__ import annotations

from typing import Protocol


class CredentialStorePort(Protocol):
    def get(self) -> str | None:
        """Return the current auth token, or None if none was set."""
        ...

    def set(self, token: str) -> None:
        """Replace the stored token (last writer wins)."""
