from __future__ import annotations

import json

from crpt_client.core.domain.models import Document
from crpt_client.infra.schemas import CreateDocumentRequest, DocumentSchema


def test_document_json_uses_api_field_names(sample_document):
    data = json.loads(DocumentSchema.from_domain(sample_document).to_json())
    assert data["doc_id"] == "doc-1"
    assert data["importRequest"] is False
    assert data["description"] == {"participantInn": "7700000000"}
    assert data["products"][0]["tnved_code"] == "6401100000"
    assert "import_request" not in data


def test_document_json_omits_unset_fields():
    data = json.loads(DocumentSchema.from_domain(Document(doc_id="x")).to_json())
    assert data == {"doc_id": "x"}


def test_document_schema_accepts_api_json(sample_document):
    payload = json.loads(DocumentSchema.from_domain(sample_document).to_json())
    assert DocumentSchema.model_validate(payload).to_domain() == sample_document


def test_document_schema_accepts_field_names():
    doc = DocumentSchema.model_validate({"import_request": True, "description": {"participant_inn": "1"}}).to_domain()
    assert doc.import_request is True
    assert doc.description is not None
    assert doc.description.participant_inn == "1"
    assert doc.products == ()


def test_create_document_request_defaults():
    body = CreateDocumentRequest(product_document="e30=", signature="sig").model_dump(mode="json")
    assert body == {
        "document_format": "MANUAL",
        "product_document": "e30=",
        "signature": "sig",
        "type": "LP_INTRODUCE_GOODS",
    }
