# billing_engine/domain/services/currency.py

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any

from billing_engine.domain.models.document import MONEY_CONTEXT, to_decimal

CURRENCY_SYMBOL = "₹"
_PAISE = Decimal("0.01")


def group_indian(digits: str) -> str:
    """Group an integer digit string as 1,23,45,678 (three, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: Any) -> str:
    """
    Display form only, e.g. 100300 -> "₹1,00,300.00". Never feeds back into totals.

    Amounts that round to zero keep their sign ("-₹0.00"), an overflowed
    total shows as "₹∞" and an undefined one as "₹NaN".
    """
    if isinstance(amount, Decimal) and not amount.is_finite():
        if amount.is_nan():
            return f"{CURRENCY_SYMBOL}NaN"
        return f"{'-' if amount.is_signed() else ''}{CURRENCY_SYMBOL}∞"

    value = to_decimal(amount)
    # Precision grows with the amount so paise can always be kept.
    ctx = Context(prec=max(MONEY_CONTEXT.prec, value.adjusted() + 3), traps=[])
    value = value.quantize(_PAISE, rounding=ROUND_HALF_UP, context=ctx)
    sign = "-" if value.is_signed() else ""
    whole, paise = f"{value.copy_abs():f}".split(".")
    return f"{sign}{CURRENCY_SYMBOL}{group_indian(whole)}.{paise}"
