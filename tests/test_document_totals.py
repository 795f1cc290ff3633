"""Tests for document aggregation and round-off helpers."""

from decimal import Decimal

import pytest

from billing_engine.domain.models.document import Document, IssuerProfile
from billing_engine.domain.services.document_totals import (
    aggregate,
    compute_document_totals,
    document_total,
    round_down_delta,
    round_up_delta,
    suggest_round_off,
)


def _doc(**overrides) -> dict:
    data = {
        "number": "CD25001",
        "placeOfSupply": "Delhi (07)",
        "items": [{"qty": 225, "rate": 100, "taxRate": 5}],
    }
    data.update(overrides)
    return data


class TestEndToEnd:
    """Single 225 x 100 @ 5% line."""

    def test_intrastate_no_adjustments(self):
        totals = aggregate(_doc(), is_interstate=False)
        assert totals.taxable_subtotal == Decimal("22500")
        assert totals.cgst_total == Decimal("562.5")
        assert totals.sgst_total == Decimal("562.5")
        assert totals.igst_total == 0
        assert totals.final_total == Decimal("23625")

    def test_percentage_discount_on_taxable_subtotal(self):
        totals = aggregate(_doc(discountType="percentage", discountValue=10), is_interstate=False)
        assert totals.discount_amount == Decimal("2250")
        assert totals.final_total == Decimal("21375")

    def test_interstate_moves_tax_not_total(self):
        totals = aggregate(_doc(), is_interstate=True)
        assert totals.igst_total == Decimal("1125")
        assert totals.cgst_total == 0
        assert totals.sgst_total == 0
        assert totals.final_total == Decimal("23625")

    def test_resolves_jurisdiction_from_issuer(self, delhi_issuer):
        intra = compute_document_totals(_doc(), delhi_issuer)
        inter = compute_document_totals(_doc(placeOfSupply="Maharashtra (27)"), delhi_issuer)
        assert intra.is_interstate is False
        assert inter.is_interstate is True
        assert inter.igst_total == Decimal("1125")
        assert intra.final_total == inter.final_total


class TestAdjustments:

    def test_fixed_discount_used_as_is(self):
        totals = aggregate(_doc(discountType="fixed", discountValue="500.50"), is_interstate=False)
        assert totals.discount_amount == Decimal("500.50")
        assert totals.final_total == Decimal("23124.50")

    def test_missing_discount_type_is_flat_amount(self):
        totals = aggregate(_doc(discountValue=100), is_interstate=False)
        assert totals.discount_amount == Decimal("100")

    def test_zero_discount_value_ignores_type(self):
        totals = aggregate(_doc(discountType="percentage", discountValue=0), is_interstate=False)
        assert totals.discount_amount == 0

    def test_additional_charges_summed(self):
        charges = [
            {"label": "Shipping", "amount": 150},
            {"label": "Packing", "amount": "49.50"},
            {"label": "Blank"},
        ]
        totals = aggregate(_doc(additionalCharges=charges), is_interstate=False)
        assert totals.charges_total == Decimal("199.50")
        assert totals.final_total == Decimal("23824.50")

    def test_round_off_added_after_everything(self):
        totals = aggregate(_doc(roundOff="-0.25"), is_interstate=False)
        assert totals.pre_round_total == Decimal("23625")
        assert totals.round_off == Decimal("-0.25")
        assert totals.final_total == Decimal("23624.75")

    @pytest.mark.parametrize("discount", [0, 10])
    @pytest.mark.parametrize("charge", [0, "75.25"])
    @pytest.mark.parametrize("round_off", [0, "0.4", "-0.6"])
    def test_final_total_identity(self, discount, charge, round_off):
        doc = _doc(
            discountType="percentage",
            discountValue=discount,
            additionalCharges=[{"label": "Freight", "amount": charge}],
            roundOff=round_off,
            items=[
                {"qty": 3, "rate": "99.99", "taxRate": 18},
                {"qty": 1, "rate": 1200, "taxRate": 12},
            ],
        )
        totals = aggregate(doc, is_interstate=False)
        assert totals.final_total == (
            totals.items_grand_total
            - totals.discount_amount
            + totals.charges_total
            + totals.round_off
        )


class TestBestEffort:
    """Half-filled documents still produce totals."""

    def test_empty_document(self):
        totals = aggregate({}, is_interstate=False)
        assert totals.final_total == 0
        assert totals.taxable_subtotal == 0

    def test_none_document(self):
        assert aggregate(None, is_interstate=True).final_total == 0

    def test_null_fields_are_zero(self):
        doc = _doc(discountValue=None, roundOff=None, additionalCharges=None)
        totals = aggregate(doc, is_interstate=False)
        assert totals.final_total == Decimal("23625")

    def test_partially_filled_line(self):
        doc = _doc(items=[{"description": "Draft row", "qty": 2}, {"qty": "", "rate": "abc", "taxRate": 18}])
        totals = aggregate(doc, is_interstate=False)
        assert totals.final_total == 0

    def test_model_and_dict_agree(self):
        as_dict = _doc(discountType="percentage", discountValue=10)
        as_model = Document.model_validate(as_dict)
        assert aggregate(as_dict, False) == aggregate(as_model, False)


class TestIdempotence:

    def test_repeated_aggregation_identical(self, delhi_issuer):
        doc = Document.model_validate(_doc(discountType="percentage", discountValue="7.5", roundOff="0.13"))
        first = compute_document_totals(doc, delhi_issuer)
        second = compute_document_totals(doc, delhi_issuer)
        assert first == second
        assert str(first.final_total) == str(second.final_total)

    def test_document_not_mutated(self, delhi_issuer):
        doc = Document.model_validate(_doc(roundOff="0.5"))
        before = doc.model_dump()
        compute_document_totals(doc, delhi_issuer)
        suggest_round_off(doc, delhi_issuer)
        assert doc.model_dump() == before


class TestDocumentTotal:

    def test_matches_full_totals(self, delhi_issuer):
        doc = _doc(placeOfSupply="Maharashtra (27)", discountType="fixed", discountValue=25)
        assert document_total(doc) == compute_document_totals(doc, delhi_issuer).final_total

    def test_accepts_invoice_dict(self, stored_invoice):
        assert document_total(stored_invoice) == Decimal("23625")


class TestRoundOffHelpers:

    def test_round_up(self):
        assert round_up_delta(Decimal("23625.40")) == Decimal("0.60")

    def test_round_down(self):
        assert round_down_delta(Decimal("23625.40")) == Decimal("-0.40")

    def test_whole_number_needs_no_delta(self):
        assert round_up_delta(Decimal("100")) == 0
        assert round_down_delta(Decimal("100")) == 0

    def test_negative_totals(self):
        assert round_up_delta("-10.25") == Decimal("0.25")
        assert round_down_delta("-10.25") == Decimal("-0.75")

    def test_float_input(self):
        assert round_up_delta(10.25) == Decimal("0.75")

    def test_suggestion_lands_on_whole_rupee(self, delhi_issuer):
        doc = _doc(items=[{"qty": 3, "rate": "99.99", "taxRate": 18}])
        suggestion = suggest_round_off(doc, delhi_issuer)
        assert suggestion.pre_round_total == Decimal("353.9646")
        assert suggestion.round_up == Decimal("0.0354")
        assert suggestion.round_down == Decimal("-0.9646")

        rounded = aggregate(_doc(items=doc["items"], roundOff=suggestion.round_up), False)
        assert rounded.final_total == Decimal("354")


class TestExtremeAmounts:

    def test_overflowing_line_does_not_raise(self):
        totals = aggregate({"items": [{"qty": "1e600000", "rate": "1e600000", "taxRate": 18}]}, False)
        assert totals.taxable_subtotal.is_infinite()
        assert totals.final_total.is_infinite()
        assert totals.tax_total.is_infinite()

    def test_undefined_total_does_not_raise(self):
        doc = {
            "items": [{"qty": "1e600000", "rate": "1e600000", "taxRate": 18}],
            "discountType": "percentage",
            "discountValue": 10,
        }
        totals = aggregate(doc, False)
        assert totals.final_total.is_nan()
        suggestion = suggest_round_off(doc, None)
        assert suggestion.round_up == 0
        assert suggestion.round_down == 0

    def test_beyond_default_precision_stays_exact(self):
        totals = aggregate(_doc(items=[{"qty": "1e30", "rate": "0.01", "taxRate": 18}]), False)
        assert totals.taxable_subtotal == Decimal("1e28")
        assert totals.final_total == Decimal("1.18e28")


class TestIssuerAsStoredDict:

    def test_camel_case_issuer(self):
        totals = compute_document_totals(_doc(placeOfSupply="Maharashtra (27)"), {"homeStateCode": "07"})
        assert totals.is_interstate is True
        assert totals.igst_total == Decimal("1125")

    def test_nested_address_issuer(self):
        issuer = {"companyName": "Craft Daddy", "address": {"state": "Delhi", "stateCode": "07"}}
        assert compute_document_totals(_doc(), issuer).is_interstate is False
        assert suggest_round_off(_doc(), issuer).pre_round_total == Decimal("23625")

    def test_missing_issuer_is_intrastate(self):
        totals = compute_document_totals(_doc(placeOfSupply="Maharashtra (27)"), None)
        assert totals.is_interstate is False
        assert totals.final_total == Decimal("23625")
