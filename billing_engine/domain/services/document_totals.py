# billing_engine/domain/services/document_totals.py
"""
Document totals: the one place invoice and quotation figures are computed.

    final_total = items_grand_total - discount_amount + charges_total + round_off

The discount is always taken off the pre-tax taxable subtotal. ``round_off``
is whatever signed delta the user stored; ``round_up_delta`` and
``round_down_delta`` only suggest a value and never touch the document.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, localcontext
from typing import Any

from billing_engine.domain.models.document import (
    MONEY_CONTEXT,
    DiscountType,
    Document,
    IssuerProfile,
    to_decimal,
)
from billing_engine.domain.models.totals import DocumentTotals, LineTaxBreakdown, RoundOffSuggestion
from billing_engine.domain.services.jurisdiction import as_issuer, resolve_interstate
from billing_engine.domain.services.line_tax import HUNDRED, calculate_line

logger = logging.getLogger("document_totals")

ZERO = Decimal("0")


def as_document(document: Document | Mapping[str, Any] | None) -> Document:
    """Accept a model or a stored dict; absent fields become zero / empty."""
    if isinstance(document, Document):
        return document
    if not isinstance(document, Mapping):
        return Document()
    return Document.model_validate(document)


def line_breakdowns(document: Document | Mapping[str, Any] | None, is_interstate: bool) -> list[LineTaxBreakdown]:
    doc = as_document(document)
    return [calculate_line(item, is_interstate) for item in doc.items]


def discount_amount(document: Document, taxable_subtotal: Decimal) -> Decimal:
    if not document.discount_value:
        return ZERO
    if document.discount_type == DiscountType.PERCENTAGE:
        return taxable_subtotal * document.discount_value / HUNDRED
    return document.discount_value


def aggregate(document: Document | Mapping[str, Any] | None, is_interstate: bool) -> DocumentTotals:
    """Fold every line plus discount, charges and round-off into the document totals."""
    doc = as_document(document)

    with localcontext(MONEY_CONTEXT):
        taxable = cgst = sgst = igst = items_total = ZERO
        for line in line_breakdowns(doc, is_interstate):
            taxable += line.taxable_value
            cgst += line.cgst
            sgst += line.sgst
            igst += line.igst
            items_total += line.line_total

        discount = discount_amount(doc, taxable)
        charges = sum((c.amount for c in doc.additional_charges), ZERO)
        pre_round = items_total - discount + charges
        final = pre_round + doc.round_off

    totals = DocumentTotals(
        is_interstate=is_interstate,
        taxable_subtotal=taxable,
        cgst_total=cgst,
        sgst_total=sgst,
        igst_total=igst,
        items_grand_total=items_total,
        discount_amount=discount,
        charges_total=charges,
        pre_round_total=pre_round,
        round_off=doc.round_off,
        final_total=final,
    )
    logger.debug(
        "Totals for %r: %d items, taxable=%s final=%s",
        doc.number, len(doc.items), taxable, final,
    )
    return totals


def compute_document_totals(
    document: Document | Mapping[str, Any] | None,
    issuer: IssuerProfile | Mapping[str, Any] | None,
) -> DocumentTotals:
    """Resolve the tax jurisdiction for the document and aggregate it."""
    doc = as_document(document)
    return aggregate(doc, resolve_interstate(doc.place_of_supply, as_issuer(issuer)))


def document_total(document: Document | Mapping[str, Any] | None) -> Decimal:
    """
    Final payable amount only, for list and dashboard views.

    Moving tax between CGST/SGST and IGST never changes the total, so the
    issuer's state is not needed here.
    """
    return aggregate(document, is_interstate=False).final_total


# ---------------------------------------------------------------------------
# Round-off helpers
# ---------------------------------------------------------------------------

def round_up_delta(pre_round_total: Any) -> Decimal:
    """Delta that lifts the total to the next whole rupee."""
    value = to_decimal(pre_round_total)
    with localcontext(MONEY_CONTEXT):
        return value.to_integral_value(rounding=ROUND_CEILING) - value


def round_down_delta(pre_round_total: Any) -> Decimal:
    """Delta that drops the total to the previous whole rupee."""
    value = to_decimal(pre_round_total)
    with localcontext(MONEY_CONTEXT):
        return value.to_integral_value(rounding=ROUND_FLOOR) - value


def suggest_round_off(
    document: Document | Mapping[str, Any] | None,
    issuer: IssuerProfile | Mapping[str, Any] | None,
) -> RoundOffSuggestion:
    totals = compute_document_totals(document, issuer)
    return RoundOffSuggestion(
        pre_round_total=totals.pre_round_total,
        round_up=round_up_delta(totals.pre_round_total),
        round_down=round_down_delta(totals.pre_round_total),
    )
