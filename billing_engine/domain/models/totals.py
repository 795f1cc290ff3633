# billing_engine/domain/models/totals.py
"""Computed document figures. Recreated on every read, never stored."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal, localcontext

from billing_engine.domain.models.document import MONEY_CONTEXT

ZERO = Decimal("0")


@dataclass(frozen=True)
class LineTaxBreakdown:
    """Tax split for a single line item."""
    taxable_value: Decimal = ZERO
    cgst: Decimal = ZERO
    sgst: Decimal = ZERO
    igst: Decimal = ZERO
    total_tax: Decimal = ZERO
    line_total: Decimal = ZERO

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DocumentTotals:
    """Authoritative figures for a whole invoice or quotation."""
    is_interstate: bool = False
    taxable_subtotal: Decimal = ZERO
    cgst_total: Decimal = ZERO
    sgst_total: Decimal = ZERO
    igst_total: Decimal = ZERO
    # Taxable value plus tax, summed over items
    items_grand_total: Decimal = ZERO
    discount_amount: Decimal = ZERO
    charges_total: Decimal = ZERO
    pre_round_total: Decimal = ZERO
    round_off: Decimal = ZERO
    final_total: Decimal = ZERO

    @property
    def tax_total(self) -> Decimal:
        with localcontext(MONEY_CONTEXT):
            return self.cgst_total + self.sgst_total + self.igst_total

    def to_dict(self) -> dict:
        data = asdict(self)
        data["tax_total"] = self.tax_total
        return data


@dataclass(frozen=True)
class RoundOffSuggestion:
    """Candidate round-off deltas; the caller decides which one to store."""
    pre_round_total: Decimal = ZERO
    round_up: Decimal = ZERO
    round_down: Decimal = ZERO

    def to_dict(self) -> dict:
        return asdict(self)
