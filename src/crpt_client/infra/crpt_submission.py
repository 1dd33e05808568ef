from __future__ import annotations

import logging

import httpx

from ..config.urls import DEFAULT_BASE_URL, get_create_document_url
from ..core.domain.models import Document, SubmissionResult
from ..core.errors import SubmissionFailed
from ..core.ports.submission_port import SubmissionPort
from ..shared.utils import b64encode_text
from .http_client import HttpClient
from .schemas import CreateDocumentRequest, DocumentSchema

logger = logging.getLogger(__name__)


class CrptDocumentSubmitter(SubmissionPort):
    def __init__(self, http_client: HttpClient, base_url: str = DEFAULT_BASE_URL) -> None:
        self._http = http_client
        self._url = get_create_document_url(base_url)

    def build_request(self, document: Document, signature: str) -> CreateDocumentRequest:
        document_json = DocumentSchema.from_domain(document).to_json()
        return CreateDocumentRequest(
            product_document=b64encode_text(document_json),
            signature=signature,
        )

    def submit(self, document: Document, signature: str, product_group: str, token: str) -> SubmissionResult:
        body = self.build_request(document, signature).model_dump(mode="json")
        headers = {"Authorization": f"Bearer {token}"}
        try:
            resp = self._http.post_json(self._url, body, params={"pg": product_group}, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request to %s failed: %s", self._url, type(e).__name__)
            raise SubmissionFailed(f"API request failed: {e}", detail=str(e)) from e
        logger.debug("POST %s -> %d", self._url, resp.status_code)
        return SubmissionResult(status_code=resp.status_code, body=resp.text)
