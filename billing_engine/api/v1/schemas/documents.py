"""Request schemas for the document calculation endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from billing_engine.domain.models.document import Client, Document, IssuerProfile


class DocumentRequest(BaseModel):
    """A stored invoice/quotation, optionally with the issuer it belongs to."""

    document: Document
    issuer: IssuerProfile | None = Field(
        default=None,
        description="Issuer profile; the configured default issuer is used when omitted",
    )


class DashboardRequest(BaseModel):
    invoices: list[dict[str, Any]] = Field(default_factory=list)
    leads: list[dict[str, Any]] = Field(default_factory=list)


class PlaceOfSupplyRequest(BaseModel):
    client: Client


class ShareMessageRequest(DocumentRequest):
    kind: Literal["invoice", "quotation"] = "invoice"
