# billing_engine/domain/services/share_message.py
"""Message text sent alongside a shared invoice or quotation PDF."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from billing_engine.config.settings import DEFAULT_EMAIL_TEMPLATE
from billing_engine.domain.models.document import Document, IssuerProfile, Quotation
from billing_engine.domain.services.currency import format_currency
from billing_engine.domain.services.document_totals import as_document, document_total
from billing_engine.domain.services.jurisdiction import as_issuer


def document_kind(document: Document) -> str:
    return "quotation" if isinstance(document, Quotation) else "invoice"


def render_share_message(
    document: Document | Mapping[str, Any] | None,
    issuer: IssuerProfile | Mapping[str, Any] | None,
    kind: str | None = None,
) -> str:
    """
    Fill the issuer's template. Placeholders: {type}, {number}, {amount},
    {companyName}; each occurrence is replaced.

    ``kind`` defaults to "quotation" for Quotation models, "invoice" otherwise.
    """
    doc = as_document(document)
    profile = as_issuer(issuer)
    template = profile.email_template or DEFAULT_EMAIL_TEMPLATE
    return (
        template
        .replace("{type}", kind or document_kind(doc))
        .replace("{number}", doc.number)
        .replace("{amount}", format_currency(document_total(doc)))
        .replace("{companyName}", profile.company_name)
    )
