from __future__ import annotations

from decimal import Decimal

import pytest

from invoicegen.core.currency import fmt_money, to_decimal
from invoicegen.data.models import Invoice, InvoiceFieldError, ProductLine, initial_invoice


@pytest.mark.parametrize(
    "qty, rate, expected",
    [
        ("2", "100.00", Decimal("200")),
        ("0", "15", Decimal("0")),
        ("3", "0", Decimal("0")),
        ("-2", "12.5", Decimal("-25")),
        ("-1.5", "-4", Decimal("6")),
        (3, 0.1, Decimal("0.3")),
        ("", "9", Decimal("0")),
        ("abc", "9", Decimal("0")),
    ],
)
def test_amount_is_quantity_times_rate(qty, rate, expected) -> None:
    line = ProductLine(description="x", quantity=qty, rate=rate)
    assert line.amount == expected
    assert line.amount == line.qty * line.unit_rate


def test_amount_follows_edits() -> None:
    inv = Invoice(product_lines=(ProductLine(quantity="2", rate="5"),))
    inv = inv.with_line_field(0, "rate", "7")
    assert inv.product_lines[0].amount == Decimal("14")


def test_totals() -> None:
    inv = initial_invoice()
    assert inv.sub_total == Decimal("200")
    assert inv.tax1 == Decimal("20")
    assert inv.tax2 == Decimal("0")
    assert inv.total == Decimal("220")


def test_updates_return_new_reference() -> None:
    inv = initial_invoice()
    edited = inv.with_field("client_name", "Acme")
    assert edited is not inv
    assert edited.client_name == "Acme"
    assert inv.client_name == ""

    added = inv.with_line_added()
    assert len(added.product_lines) == len(inv.product_lines) + 1
    removed = added.with_line_removed(0)
    assert removed.product_lines[0] == inv.product_lines[1]


def test_unknown_fields_raise() -> None:
    inv = Invoice()
    with pytest.raises(InvoiceFieldError):
        inv.with_field("nope", "x")
    with pytest.raises(InvoiceFieldError):
        inv.with_field("product_lines", ())
    with pytest.raises(InvoiceFieldError):
        inv.with_line_field(0, "amount", "1")
    with pytest.raises(IndexError):
        inv.with_line_field(0, "rate", "1")


def test_empty_invoice_has_empty_fields() -> None:
    inv = Invoice()
    assert inv.invoice_title == ""
    assert inv.product_lines == ()
    assert inv.total == Decimal("0")


def test_dict_roundtrip_uses_camel_case() -> None:
    inv = initial_invoice().with_field("company_gst", "GST-1")
    d = inv.to_dict()
    assert d["companyGST"] == "GST-1"
    assert d["invoiceTitle"] == "INV-12"
    assert d["productLines"][0] == {"description": "Brochure Design", "quantity": "2", "rate": "100.00"}
    assert Invoice.from_dict(d) == inv


def test_from_dict_ignores_unknown_and_missing() -> None:
    inv = Invoice.from_dict({"invoiceTitle": "X", "bogus": 1, "logoWidth": "120"})
    assert inv.invoice_title == "X"
    assert inv.logo_width == 120
    assert inv.notes == ""


def test_money_helpers() -> None:
    assert to_decimal("1,234.50") == Decimal("1234.50")
    assert to_decimal("nan") == Decimal("0")
    assert to_decimal(None) == Decimal("0")
    assert fmt_money(Decimal("220"), "$") == "$220.00"
    assert fmt_money(Decimal("-5"), "$") == "-$5.00"
    assert fmt_money("") == "0.00"
