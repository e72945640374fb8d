from decimal import Decimal

import pytest

from invoicemath.services.amounts import DiscountType, LineItem, compute, line_total
from invoicemath.services.exceptions import InvalidAmountError


def _retainer_items():
    return [
        LineItem("SEO retainer", 2, "500.00"),
        LineItem("Site audit", 1, "250.50"),
    ]


def test_worked_example_with_tax():
    amounts = compute(_retainer_items(), discount=0, tax_rate_percent=18)

    assert amounts.subtotal == Decimal("1250.50")
    assert amounts.discount_amount == Decimal("0.00")
    assert amounts.tax_amount == Decimal("225.09")
    assert amounts.total_amount == Decimal("1475.59")
    assert amounts.balance_due is None


def test_invoice_balance_due_and_overpayment_clamp():
    partly = compute(_retainer_items(), tax_rate_percent=18, amount_paid="475.59")
    assert partly.balance_due == Decimal("1000.00")

    overpaid = compute(_retainer_items(), tax_rate_percent=18, amount_paid=5000)
    assert overpaid.balance_due == Decimal("0.00")


def test_percentage_discount_reduces_taxable_base():
    amounts = compute(
        [LineItem("Campaign", 1, 1000)],
        discount=10,
        discount_type=DiscountType.PERCENTAGE,
        tax_rate_percent=18,
    )

    assert amounts.discount_amount == Decimal("100.00")
    assert amounts.taxable_base == Decimal("900.00")
    assert amounts.tax_amount == Decimal("162.00")
    assert amounts.total_amount == Decimal("1062.00")


def test_percentage_discount_over_hundred_is_full_discount():
    amounts = compute([LineItem("Campaign", 1, 1000)], discount=150, discount_type="PERCENTAGE", tax_rate_percent=18)

    assert amounts.discount_amount == Decimal("1000.00")
    assert amounts.total_amount == Decimal("0.00")


def test_fixed_discount_clamped_to_subtotal():
    amounts = compute([LineItem("Campaign", 1, 1000)], discount=5000, discount_type=DiscountType.FIXED, tax_rate_percent=5)

    assert amounts.discount_amount == amounts.subtotal
    assert amounts.taxable_base == Decimal("0.00")
    assert amounts.total_amount >= 0


def test_empty_document_is_all_zero():
    amounts = compute([], discount=10, discount_type="PERCENTAGE", tax_rate_percent=18, amount_paid=0)

    for value in amounts.as_dict().values():
        assert value == 0


def test_compute_is_idempotent():
    first = compute(_retainer_items(), discount=3, discount_type="PERCENTAGE", tax_rate_percent=18, amount_paid=10)
    second = compute(_retainer_items(), discount=3, discount_type="PERCENTAGE", tax_rate_percent=18, amount_paid=10)

    assert first == second
    assert str(first.total_amount) == str(second.total_amount)


def test_subtotal_rounds_once_not_per_line():
    items = [LineItem("Tiny", 1, "0.005"), LineItem("Tiny", 1, "0.005")]

    assert sum(line_total(item) for item in items) == Decimal("0.02")
    assert compute(items).subtotal == Decimal("0.01")


def test_float_inputs_do_not_leak_binary_noise():
    assert compute([LineItem("Hours", 3, 0.1)]).subtotal == Decimal("0.30")


def test_line_total_rounds_half_up():
    assert line_total(LineItem("Design", "1", "2.345")) == Decimal("2.35")


def test_taxable_base_plus_tax_equals_total():
    amounts = compute(
        [LineItem("Ads", "3", "333.335"), LineItem("Copy", "7", "12.49")],
        discount="7.5",
        discount_type="PERCENTAGE",
        tax_rate_percent="12.5",
    )

    assert amounts.taxable_base + amounts.tax_amount == amounts.total_amount


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"line_items": [LineItem("x", 0, 10)]}, "line_items[0].quantity"),
        ({"line_items": [LineItem("x", 1, 10), LineItem("y", -2, 10)]}, "line_items[1].quantity"),
        ({"line_items": [LineItem("x", 1, 10), LineItem("y", 1, -1)]}, "line_items[1].unit_price"),
        ({"line_items": [LineItem("x", "abc", 10)]}, "line_items[0].quantity"),
        ({"line_items": [LineItem("x", True, 10)]}, "line_items[0].quantity"),
        ({"line_items": [LineItem("x", 1, "NaN")]}, "line_items[0].unit_price"),
        ({"line_items": [], "tax_rate_percent": -1}, "tax_rate_percent"),
        ({"line_items": [], "discount": -5}, "discount"),
        ({"line_items": [], "discount_type": "BOGUS"}, "discount_type"),
        ({"line_items": [], "amount_paid": -1}, "amount_paid"),
    ],
)
def test_invalid_inputs_name_the_field(kwargs, field):
    with pytest.raises(InvalidAmountError) as excinfo:
        compute(**kwargs)

    assert excinfo.value.field == field


@pytest.mark.parametrize(
    "items, field",
    [
        ([LineItem("x", 1, "1e30")], "line_items[0].unit_price"),
        ([LineItem("x", "1E15", 1)], "line_items[0].quantity"),
        ([LineItem("x", "999999999999999", "999999999999999")], "line_items"),
    ],
)
def test_out_of_range_amounts_are_invalid(items, field):
    with pytest.raises(InvalidAmountError) as excinfo:
        compute(items)

    assert excinfo.value.field == field
    assert excinfo.value.message == "amount out of range"


def test_compute_writes_nothing_to_stdout(capsys):
    compute(_retainer_items(), tax_rate_percent=18, amount_paid=0)

    assert capsys.readouterr().out == ""
