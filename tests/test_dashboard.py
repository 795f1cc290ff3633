"""Tests for dashboard aggregates."""

from decimal import Decimal

from billing_engine.domain.models.document import Invoice, Lead
from billing_engine.domain.services.dashboard import summarize_dashboard


def _invoice(status: str, qty=225, rate=100, **extra) -> dict:
    data = {
        "status": status,
        "placeOfSupply": "Maharashtra (27)",
        "items": [{"qty": qty, "rate": rate, "taxRate": 5}],
    }
    data.update(extra)
    return data


class TestSummarizeDashboard:

    def test_empty(self):
        summary = summarize_dashboard([], [])
        assert summary.total_revenue == 0
        assert summary.outstanding == 0
        assert summary.lead_value == 0
        assert summary.invoice_count == 0
        assert summary.invoices_by_status["Paid"] == 0

    def test_revenue_counts_paid_only(self):
        summary = summarize_dashboard([_invoice("Paid"), _invoice("Paid", roundOff=-25)])
        assert summary.total_revenue == Decimal("47225")
        assert summary.outstanding == 0

    def test_outstanding_includes_draft_sent_overdue(self):
        invoices = [_invoice("Draft"), _invoice("Sent"), _invoice("Overdue"), _invoice("Paid")]
        summary = summarize_dashboard(invoices)
        assert summary.outstanding == Decimal("70875")
        assert summary.total_revenue == Decimal("23625")
        assert summary.invoices_by_status == {"Draft": 1, "Sent": 1, "Paid": 1, "Overdue": 1}

    def test_discounts_and_charges_respected(self):
        inv = _invoice(
            "Paid",
            discountType="percentage",
            discountValue=10,
            additionalCharges=[{"label": "Courier", "amount": 125}],
        )
        assert summarize_dashboard([inv]).total_revenue == Decimal("21500")

    def test_models_and_dicts_mixed(self):
        invoices = [Invoice.model_validate(_invoice("Paid")), _invoice("Paid")]
        assert summarize_dashboard(invoices).total_revenue == Decimal("47250")

    def test_leads(self):
        leads = [
            {"name": "A", "company": "Acme", "value": 50000, "status": "New"},
            Lead(name="B", value="12500.50", status="Proposal"),
            {"name": "C", "value": None, "status": "Won"},
        ]
        summary = summarize_dashboard([], leads)
        assert summary.lead_value == Decimal("62500.50")
        assert summary.leads_by_status["New"] == 1
        assert summary.leads_by_status["Proposal"] == 1
        assert summary.leads_by_status["Won"] == 1
        assert summary.leads_by_status["Lost"] == 0

    def test_to_dict(self):
        data = summarize_dashboard([_invoice("Sent")]).to_dict()
        assert data["outstanding"] == Decimal("23625")
        assert data["invoice_count"] == 1
