from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Description:
    participant_inn: Optional[str] = None


@dataclass(frozen=True)
class Product:
    certificate_document: Optional[str] = None
    certificate_document_date: Optional[str] = None
    certificate_document_number: Optional[str] = None
    owner_inn: Optional[str] = None
    producer_inn: Optional[str] = None
    production_date: Optional[str] = None  # yyyy-MM-dd
    tnved_code: Optional[str] = None  # 10-digit commodity code
    uit_code: Optional[str] = None  # required unless uitu_code is set
    uitu_code: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """An LP_INTRODUCE_GOODS document (goods produced in the RF)."""

    description: Optional[Description] = None
    doc_id: Optional[str] = None
    doc_status: Optional[str] = None
    doc_type: Optional[str] = None
    import_request: Optional[bool] = None
    owner_inn: Optional[str] = None
    participant_inn: Optional[str] = None
    producer_inn: Optional[str] = None
    production_date: Optional[str] = None
    production_type: Optional[str] = None
    products: tuple[Product, ...] = field(default_factory=tuple)
    reg_date: Optional[str] = None
    reg_number: Optional[str] = None


@dataclass(frozen=True)
class SubmissionResult:
    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
