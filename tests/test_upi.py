import pytest

from invoicemath.services.numbering import format_document_number
from invoicemath.services.upi import generate_upi_deeplink, generate_upi_qr_payload, invoice_payment_note


def test_deeplink_with_amount_and_invoice_note():
    link = generate_upi_deeplink(
        "acme@upi",
        "Acme Pvt Ltd",
        amount=1475.59,
        note=invoice_payment_note("INV-0001"),
    )

    assert link == (
        "upi://pay?pa=acme%40upi&pn=Acme%20Pvt%20Ltd&am=1475.59&cu=INR"
        "&tn=Payment%20for%20Invoice%20INV-0001"
    )


@pytest.mark.parametrize("amount", [None, 0])
def test_amount_omitted_when_not_positive(amount):
    link = generate_upi_deeplink("acme@upi", "Acme", amount=amount)

    assert "am=" not in link
    assert link.endswith("&cu=INR")


def test_qr_payload_matches_deeplink():
    kwargs = dict(upi_id="acme@upi", payee_name="Acme", amount="10", txn_ref="INV-0002")

    assert generate_upi_qr_payload(**kwargs) == generate_upi_deeplink(**kwargs)


def test_payment_note_requires_invoice_number():
    assert invoice_payment_note(None) is None


def test_document_numbers():
    assert format_document_number("INV", 1) == "INV-0001"
    assert format_document_number("PROP", 42) == "PROP-0042"
    assert format_document_number("INV", 12345) == "INV-12345"
    with pytest.raises(ValueError):
        format_document_number("INV", 0)
