from __future__ import annotations

from typing import Protocol

from ..domain.models import Document, SubmissionResult


class SubmissionPort(Protocol):
    def submit(self, document: Document, signature: str, product_group: str, token: str) -> SubmissionResult:
        """Send the signed document and return the remote outcome.

        Non-2xx responses are returned, not raised. Implementations raise
        SubmissionFailed only when no response was received at all.
        """
        ...
