from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.domain.enums import DocumentFormat, DocumentType
from ..core.domain.models import Description, Document, Product


class DescriptionSchema(BaseModel):
	"""Nested 'description' object of a document"""
	model_config = ConfigDict(populate_by_name=True)

	participant_inn: Optional[str] = Field(default=None, alias="participantInn")


class ProductSchema(BaseModel):
	"""One entry of the 'products' array"""
	certificate_document: Optional[str] = None
	certificate_document_date: Optional[str] = None
	certificate_document_number: Optional[str] = None
	owner_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[str] = None
	tnved_code: Optional[str] = None
	uit_code: Optional[str] = None
	uitu_code: Optional[str] = None


class DocumentSchema(BaseModel):
	"""LP_INTRODUCE_GOODS document body, as the API expects it in JSON"""
	model_config = ConfigDict(populate_by_name=True)

	description: Optional[DescriptionSchema] = None
	doc_id: Optional[str] = None
	doc_status: Optional[str] = None
	doc_type: Optional[str] = None
	import_request: Optional[bool] = Field(default=None, alias="importRequest")
	owner_inn: Optional[str] = None
	participant_inn: Optional[str] = None
	producer_inn: Optional[str] = None
	production_date: Optional[str] = None
	production_type: Optional[str] = None
	products: Optional[list[ProductSchema]] = None
	reg_date: Optional[str] = None
	reg_number: Optional[str] = None

	@classmethod
	def from_domain(cls, doc: Document) -> DocumentSchema:
		description = None
		if doc.description is not None:
			description = DescriptionSchema(participant_inn=doc.description.participant_inn)
		products = None
		if doc.products:
			products = [ProductSchema(**vars(p)) for p in doc.products]
		return cls(
			description=description,
			doc_id=doc.doc_id,
			doc_status=doc.doc_status,
			doc_type=doc.doc_type,
			import_request=doc.import_request,
			owner_inn=doc.owner_inn,
			participant_inn=doc.participant_inn,
			producer_inn=doc.producer_inn,
			production_date=doc.production_date,
			production_type=doc.production_type,
			products=products,
			reg_date=doc.reg_date,
			reg_number=doc.reg_number,
		)

	def to_domain(self) -> Document:
		description = None
		if self.description is not None:
			description = Description(participant_inn=self.description.participant_inn)
		return Document(
			description=description,
			doc_id=self.doc_id,
			doc_status=self.doc_status,
			doc_type=self.doc_type,
			import_request=self.import_request,
			owner_inn=self.owner_inn,
			participant_inn=self.participant_inn,
			producer_inn=self.producer_inn,
			production_date=self.production_date,
			production_type=self.production_type,
			products=tuple(Product(**p.model_dump()) for p in (self.products or [])),
			reg_date=self.reg_date,
			reg_number=self.reg_number,
		)

	def to_json(self) -> str:
		return self.model_dump_json(by_alias=True, exclude_none=True)


class CreateDocumentRequest(BaseModel):
	"""Envelope for /api/v3/lk/documents/create"""
	document_format: DocumentFormat = DocumentFormat.MANUAL
	product_document: str  # base64 of the document JSON
	signature: str  # detached signature, base64
	type: DocumentType = DocumentType.LP_INTRODUCE_GOODS
