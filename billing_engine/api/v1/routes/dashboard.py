# billing_engine/api/v1/routes/dashboard.py

from __future__ import annotations

import logging

from fastapi import APIRouter

from billing_engine.api.v1.envelope import ok
from billing_engine.api.v1.schemas.documents import DashboardRequest
from billing_engine.domain.services.currency import format_currency
from billing_engine.domain.services.dashboard import summarize_dashboard

logger = logging.getLogger("api.v1.dashboard")

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.post("/summary", response_model=dict)
async def dashboard_summary(body: DashboardRequest):
    """Revenue, outstanding and pipeline totals across the supplied documents."""
    summary = summarize_dashboard(body.invoices, body.leads)
    data = summary.to_dict()
    data["formatted"] = {
        "total_revenue": format_currency(summary.total_revenue),
        "outstanding": format_currency(summary.outstanding),
        "lead_value": format_currency(summary.lead_value),
    }
    return ok(data)
