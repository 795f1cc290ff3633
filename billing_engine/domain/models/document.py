# billing_engine/domain/models/document.py
"""
Billing documents as the surrounding application stores them.

Stored documents use camelCase keys (``placeOfSupply``, ``roundOff``,
``taxRate`` ...). Every model accepts those keys as well as the snake_case
field names, ignores keys the engine has no use for, and coerces missing or
unparseable numbers to zero so a half-filled document still validates.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Context, Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger("documents")

ZERO = Decimal("0")

# Money arithmetic never traps: overflow yields Infinity and undefined
# results (Infinity - Infinity) yield NaN.
MONEY_CONTEXT = Context(prec=60, traps=[])


def to_decimal(val: Any) -> Decimal:
    """Safely convert a value to Decimal; absent or garbage values become zero."""
    if val is None or val == "" or isinstance(val, bool):
        return ZERO
    if isinstance(val, Decimal):
        result = val
    elif isinstance(val, int):
        result = Decimal(val)
    else:
        try:
            result = Decimal(str(val).strip().replace(",", ""))
        except (InvalidOperation, ValueError):
            logger.warning("Unparseable amount %r treated as 0", val)
            return ZERO
    if not result.is_finite():
        logger.warning("Non-finite amount %r treated as 0", val)
        return ZERO
    return result


def to_text(val: Any) -> str:
    if val is None:
        return ""
    return str(val)


def _as_list(val: Any) -> list:
    """Keep only structured entries; anything else collapses to an empty list."""
    if not isinstance(val, (list, tuple)):
        return []
    return [v for v in val if isinstance(v, (Mapping, BaseModel))]


def _lift_address(data: Any) -> Any:
    """Pull ``address.state`` / ``address.stateCode`` up to the top level."""
    if not isinstance(data, Mapping):
        return data
    address = data.get("address")
    if not isinstance(address, Mapping):
        return data
    lifted = dict(data)
    lifted.setdefault("state", address.get("state"))
    lifted.setdefault("stateCode", address.get("stateCode", address.get("state_code")))
    return lifted


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class InvoiceStatus(str, Enum):
    DRAFT = "Draft"
    SENT = "Sent"
    PAID = "Paid"
    OVERDUE = "Overdue"


class QuotationStatus(str, Enum):
    DRAFT = "Draft"
    SENT = "Sent"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class LeadStatus(str, Enum):
    NEW = "New"
    CONTACTED = "Contacted"
    PROPOSAL = "Proposal"
    WON = "Won"
    LOST = "Lost"


class _Lenient(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LineItem(_Lenient):
    description: str = ""
    hsn_code: str = Field(default="", validation_alias=AliasChoices("hsn_code", "hsnCode", "hsn"))
    quantity: Decimal = Field(default=ZERO, validation_alias=AliasChoices("quantity", "qty"))
    unit_rate: Decimal = Field(default=ZERO, validation_alias=AliasChoices("unit_rate", "unitRate", "rate"))
    tax_rate_percent: Decimal = Field(
        default=ZERO,
        validation_alias=AliasChoices("tax_rate_percent", "taxRatePercent", "taxRate"),
    )

    @field_validator("quantity", "unit_rate", "tax_rate_percent", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @field_validator("description", "hsn_code", mode="before")
    @classmethod
    def coerce_texts(cls, v: Any) -> str:
        return to_text(v)


class AdditionalCharge(_Lenient):
    label: str = ""
    amount: Decimal = ZERO

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @field_validator("label", mode="before")
    @classmethod
    def coerce_texts(cls, v: Any) -> str:
        return to_text(v)


class Document(_Lenient):
    """Fields shared by invoices and quotations."""

    number: str = ""
    items: list[LineItem] = Field(default_factory=list)
    place_of_supply: str = Field(default="", validation_alias=AliasChoices("place_of_supply", "placeOfSupply"))
    discount_type: DiscountType = Field(
        default=DiscountType.FIXED,
        validation_alias=AliasChoices("discount_type", "discountType"),
    )
    discount_value: Decimal = Field(default=ZERO, validation_alias=AliasChoices("discount_value", "discountValue"))
    additional_charges: list[AdditionalCharge] = Field(
        default_factory=list,
        validation_alias=AliasChoices("additional_charges", "additionalCharges"),
    )
    round_off: Decimal = Field(default=ZERO, validation_alias=AliasChoices("round_off", "roundOff"))

    @field_validator("discount_value", "round_off", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @field_validator("number", "place_of_supply", mode="before")
    @classmethod
    def coerce_texts(cls, v: Any) -> str:
        return to_text(v)

    @field_validator("items", "additional_charges", mode="before")
    @classmethod
    def coerce_lists(cls, v: Any) -> list:
        return _as_list(v)

    @field_validator("discount_type", mode="before")
    @classmethod
    def coerce_discount_type(cls, v: Any) -> DiscountType:
        # Only an explicit "percentage" is a percentage; anything else is a flat amount.
        if isinstance(v, DiscountType):
            return v
        if str(v).strip().lower() == DiscountType.PERCENTAGE.value:
            return DiscountType.PERCENTAGE
        return DiscountType.FIXED


class Invoice(Document):
    status: InvoiceStatus = InvoiceStatus.DRAFT
    date: str = ""
    due_date: str = Field(default="", validation_alias=AliasChoices("due_date", "dueDate"))

    @field_validator("date", "due_date", mode="before")
    @classmethod
    def coerce_dates(cls, v: Any) -> str:
        return to_text(v)

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> InvoiceStatus:
        try:
            return InvoiceStatus(v)
        except ValueError:
            return InvoiceStatus.DRAFT


class Quotation(Document):
    status: QuotationStatus = QuotationStatus.DRAFT
    date: str = ""
    valid_until: str = Field(default="", validation_alias=AliasChoices("valid_until", "validUntil"))

    @field_validator("date", "valid_until", mode="before")
    @classmethod
    def coerce_dates(cls, v: Any) -> str:
        return to_text(v)

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> QuotationStatus:
        try:
            return QuotationStatus(v)
        except ValueError:
            return QuotationStatus.DRAFT


class IssuerProfile(_Lenient):
    """The issuing business. Accepts the stored profile shape with a nested ``address``."""

    company_name: str = Field(default="", validation_alias=AliasChoices("company_name", "companyName"))
    home_state: str = Field(default="", validation_alias=AliasChoices("home_state", "homeState", "state"))
    home_state_code: str = Field(
        default="",
        validation_alias=AliasChoices("home_state_code", "homeStateCode", "stateCode"),
    )
    email_template: str | None = Field(default=None, validation_alias=AliasChoices("email_template", "emailTemplate"))

    @field_validator("company_name", "home_state", "home_state_code", mode="before")
    @classmethod
    def coerce_texts(cls, v: Any) -> str:
        return to_text(v)

    @field_validator("email_template", mode="before")
    @classmethod
    def coerce_template(cls, v: Any) -> str | None:
        return None if v is None else to_text(v)

    @model_validator(mode="before")
    @classmethod
    def lift_address(cls, data: Any) -> Any:
        return _lift_address(data)


class Client(_Lenient):
    name: str = ""
    gstin: str = ""
    state: str = ""
    state_code: str = Field(default="", validation_alias=AliasChoices("state_code", "stateCode"))

    @field_validator("name", "gstin", "state", "state_code", mode="before")
    @classmethod
    def coerce_texts(cls, v: Any) -> str:
        return to_text(v)

    @model_validator(mode="before")
    @classmethod
    def lift_address(cls, data: Any) -> Any:
        return _lift_address(data)


class Lead(_Lenient):
    name: str = ""
    company: str = ""
    value: Decimal = ZERO
    status: LeadStatus = LeadStatus.NEW

    @field_validator("value", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Decimal:
        return to_decimal(v)

    @field_validator("status", mode="before")
    @classmethod
    def coerce_status(cls, v: Any) -> LeadStatus:
        try:
            return LeadStatus(v)
        except ValueError:
            return LeadStatus.NEW
