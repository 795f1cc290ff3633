# billing_engine/domain/services/line_tax.py

from __future__ import annotations

from decimal import Decimal, localcontext

from billing_engine.domain.models.document import MONEY_CONTEXT, LineItem
from billing_engine.domain.models.totals import LineTaxBreakdown

ZERO = Decimal("0")
HUNDRED = Decimal("100")
TWO = Decimal("2")


def calculate_line(item: LineItem, is_interstate: bool) -> LineTaxBreakdown:
    """
    Taxable value and tax split for one line.

    Interstate lines carry the whole tax as IGST; intrastate lines split it
    into equal CGST and SGST halves. No rounding happens here, and negative
    quantities or rates pass straight through.
    """
    with localcontext(MONEY_CONTEXT):
        taxable = item.quantity * item.unit_rate
        total_tax = taxable * item.tax_rate_percent / HUNDRED

        if is_interstate:
            igst, cgst, sgst = total_tax, ZERO, ZERO
        else:
            half = total_tax / TWO
            igst, cgst, sgst = ZERO, half, half

        line_total = taxable + total_tax

    return LineTaxBreakdown(
        taxable_value=taxable,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        total_tax=total_tax,
        line_total=line_total,
    )
