# billing_engine/domain/services/dashboard.py
"""
Dashboard aggregates over many documents.

Works with Invoice / Lead models or the plain dicts the storage layer hands
back. Every invoice amount comes from ``document_total`` so the dashboard
can never disagree with the invoice itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Any

from billing_engine.domain.models.document import MONEY_CONTEXT, Invoice, InvoiceStatus, Lead, LeadStatus
from billing_engine.domain.services.document_totals import document_total

logger = logging.getLogger("dashboard")

ZERO = Decimal("0")

_OUTSTANDING = {InvoiceStatus.SENT, InvoiceStatus.OVERDUE, InvoiceStatus.DRAFT}


@dataclass
class DashboardSummary:
    total_revenue: Decimal = ZERO
    outstanding: Decimal = ZERO
    lead_value: Decimal = ZERO
    invoice_count: int = 0
    invoices_by_status: dict[str, int] = field(default_factory=dict)
    leads_by_status: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "total_revenue": self.total_revenue,
            "outstanding": self.outstanding,
            "lead_value": self.lead_value,
            "invoice_count": self.invoice_count,
            "invoices_by_status": dict(self.invoices_by_status),
            "leads_by_status": dict(self.leads_by_status),
        }


def _as_invoice(inv: Any) -> Invoice:
    if isinstance(inv, Invoice):
        return inv
    return Invoice.model_validate(inv if isinstance(inv, Mapping) else {})


def _as_lead(lead: Any) -> Lead:
    if isinstance(lead, Lead):
        return lead
    return Lead.model_validate(lead if isinstance(lead, Mapping) else {})


def summarize_dashboard(
    invoices: Iterable[Any] = (),
    leads: Iterable[Any] = (),
) -> DashboardSummary:
    """Paid revenue, outstanding receivables and pipeline value."""
    summary = DashboardSummary(
        invoices_by_status={s.value: 0 for s in InvoiceStatus},
        leads_by_status={s.value: 0 for s in LeadStatus},
    )

    with localcontext(MONEY_CONTEXT):
        for raw in invoices:
            inv = _as_invoice(raw)
            summary.invoice_count += 1
            summary.invoices_by_status[inv.status.value] += 1

            if inv.status == InvoiceStatus.PAID:
                summary.total_revenue += document_total(inv)
            elif inv.status in _OUTSTANDING:
                summary.outstanding += document_total(inv)

        for raw in leads:
            lead = _as_lead(raw)
            summary.lead_value += lead.value
            summary.leads_by_status[lead.status.value] += 1

    logger.debug(
        "Dashboard: %d invoices, revenue=%s outstanding=%s",
        summary.invoice_count, summary.total_revenue, summary.outstanding,
    )
    return summary
