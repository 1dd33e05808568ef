from __future__ import annotations

import logging

from ..domain.models import Document, SubmissionResult
from ..errors import InvalidArgument, PreconditionNotMet, SubmissionFailed
from ..ports.credential_port import CredentialStorePort
from ..ports.rate_limiter_port import RateLimiterPort
from ..ports.submission_port import SubmissionPort
from ...shared.utils import is_blank

logger = logging.getLogger(__name__)


class CreateDocumentUseCase:
    """Validate, wait for a permit, then hand the document to the submitter.

    A permit is consumed per attempt: failed submissions still count against
    the current window and are never refunded.
    """

    def __init__(
        self,
        rate_limiter: RateLimiterPort,
        submitter: SubmissionPort,
        credentials: CredentialStorePort,
    ) -> None:
        self._rate_limiter = rate_limiter
        self._submitter = submitter
        self._credentials = credentials

    def set_credential(self, token: str) -> None:
        self._credentials.set(token)

    def execute(self, document: Document | None, signature: str | None, product_group: str | None) -> SubmissionResult:
        if document is None:
            raise InvalidArgument("Document cannot be None")
        if is_blank(signature):
            raise InvalidArgument("Signature cannot be None or blank")
        if is_blank(product_group):
            raise InvalidArgument("Product group cannot be None or blank")
        token = self._credentials.get()
        if is_blank(token):
            raise PreconditionNotMet("Auth token is not set. Call set_auth_token() first.")

        self._rate_limiter.acquire()

        logger.info("Submitting document %s for product group %s", document.doc_id or "-", product_group)
        result = self._submitter.submit(document, signature, product_group, token)
        if not result.ok:
            logger.warning("Document submission rejected with status %d", result.status_code)
            raise SubmissionFailed(
                f"API request failed with status: {result.status_code}, body: {result.body}",
                status_code=result.status_code,
                detail=result.body,
            )
        logger.debug("Document accepted: %s", result.body)
        return result
