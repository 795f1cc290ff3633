# billing_engine/api/v1/routes/documents.py
"""
Document calculation endpoints: totals, round-off suggestions, amount in
words, currency display and the share message. Editor preview, list views
and the print/share templates all read their figures from here.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from billing_engine.api.deps import get_default_issuer
from billing_engine.api.v1.envelope import ok
from billing_engine.api.v1.schemas.documents import DocumentRequest, ShareMessageRequest
from billing_engine.domain.models.document import IssuerProfile
from billing_engine.domain.services.amount_words import amount_to_words, total_in_words
from billing_engine.domain.services.currency import format_currency
from billing_engine.domain.services.document_totals import (
    compute_document_totals,
    line_breakdowns,
    suggest_round_off,
)
from billing_engine.domain.services.share_message import render_share_message

logger = logging.getLogger("api.v1.documents")

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.post("/totals", response_model=dict)
async def document_totals(
    body: DocumentRequest,
    default_issuer: IssuerProfile = Depends(get_default_issuer),
):
    """Full breakdown for one document, ready for display or print."""
    issuer = body.issuer or default_issuer
    totals = compute_document_totals(body.document, issuer)
    lines = line_breakdowns(body.document, totals.is_interstate)

    return ok({
        "totals": totals.to_dict(),
        "lines": [line.to_dict() for line in lines],
        "final_total_formatted": format_currency(totals.final_total),
        "amount_in_words": total_in_words(totals),
    })


@router.post("/round-off", response_model=dict)
async def round_off_suggestion(
    body: DocumentRequest,
    default_issuer: IssuerProfile = Depends(get_default_issuer),
):
    """Candidate round-off deltas; nothing is applied to the document."""
    suggestion = suggest_round_off(body.document, body.issuer or default_issuer)
    return ok(suggestion.to_dict())


@router.post("/share-message", response_model=dict)
async def share_message(
    body: ShareMessageRequest,
    default_issuer: IssuerProfile = Depends(get_default_issuer),
):
    """Text to send with the shared PDF, from the issuer's template."""
    message = render_share_message(body.document, body.issuer or default_issuer, kind=body.kind)
    return ok({"message": message})


@router.get("/amount-in-words", response_model=dict)
async def words(amount: int = Query(..., ge=0)):
    return ok({"amount": amount, "words": amount_to_words(amount)})


@router.get("/format-currency", response_model=dict)
async def currency(amount: Decimal = Query(...)):
    return ok({"amount": amount, "formatted": format_currency(amount)})
