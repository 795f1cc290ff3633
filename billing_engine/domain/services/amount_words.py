# billing_engine/domain/services/amount_words.py
"""
Amount in words for printed documents, in Indian digit grouping.

The amount is zero-padded to nine digits and read as fixed-width groups:

    crore (2) | lakh (2) | thousand (2) | hundred (1) | remainder (2)

e.g. 123456789 -> "twelve crore thirty four lakh fifty six thousand seven
hundred and eighty nine rupees only". Anything longer than nine digits
returns the ``OVERFLOW`` sentinel.
"""

from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, Decimal, localcontext
from typing import Any

from billing_engine.domain.models.document import MONEY_CONTEXT, to_decimal
from billing_engine.domain.models.totals import DocumentTotals

logger = logging.getLogger("amount_words")

OVERFLOW = "overflow"
MAX_DIGITS = 9

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

# (start, end, scale word) slices of the nine-digit string
_GROUPS = (
    (0, 2, "crore"),
    (2, 4, "lakh"),
    (4, 6, "thousand"),
    (6, 7, "hundred"),
)


def _two_digit_words(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, units = divmod(n, 10)
    if units == 0:
        return _TENS[tens]
    return f"{_TENS[tens]} {_ONES[units]}"


def amount_to_words(amount: Any) -> str:
    """Render a non-negative whole amount of at most nine digits."""
    value = to_decimal(amount)
    if value < 0 or value != value.to_integral_value():
        return ""

    # Digit count from the exponent; huge amounts are never expanded to a string.
    if value and value.adjusted() + 1 > MAX_DIGITS:
        logger.warning("Amount with %d digits exceeds %d", value.adjusted() + 1, MAX_DIGITS)
        return OVERFLOW

    digits = str(int(value))

    padded = digits.zfill(MAX_DIGITS)
    words: list[str] = []
    for start, end, scale in _GROUPS:
        n = int(padded[start:end])
        if n:
            words.append(f"{_two_digit_words(n)} {scale}")

    remainder = int(padded[7:])
    if remainder:
        if words:
            words.append("and")
        words.append(_two_digit_words(remainder))

    return f"{' '.join(words) or 'zero'} rupees only"


def round_to_rupee(amount: Any) -> Decimal:
    """Nearest whole rupee, halves rounded up."""
    with localcontext(MONEY_CONTEXT):
        return (to_decimal(amount) + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)


def total_in_words(totals: DocumentTotals) -> str:
    final = totals.final_total
    if final.is_nan():
        return ""
    if final.is_infinite():
        return "" if final.is_signed() else OVERFLOW
    return amount_to_words(round_to_rupee(final))
