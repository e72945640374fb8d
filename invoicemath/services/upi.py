"""UPI deep link generation service"""
from typing import Optional
from urllib.parse import quote

from .money import money2, non_negative


def invoice_payment_note(invoice_number: Optional[str]) -> Optional[str]:
    """Transaction note printed under the invoice QR code"""
    if not invoice_number:
        return None
    return f"Payment for Invoice {invoice_number}"


def generate_upi_deeplink(
    upi_id: str,
    payee_name: str,
    amount=None,
    currency: str = "INR",
    note: Optional[str] = None,
    txn_ref: Optional[str] = None,
) -> str:
    """Generate UPI deep link according to UPI specification"""

    parts = [f"upi://pay?pa={quote(upi_id)}"]
    parts.append(f"pn={quote(payee_name)}")

    # A zero amount leaves the field editable in the payer's app
    if amount is not None:
        value = money2(non_negative(amount, "amount"))
        if value > 0:
            parts.append(f"am={value}")

    parts.append(f"cu={currency}")

    if note:
        parts.append(f"tn={quote(note)}")

    if txn_ref:
        parts.append(f"tr={quote(txn_ref)}")

    return "&".join(parts)


def generate_upi_qr_payload(
    upi_id: str,
    payee_name: str,
    amount=None,
    currency: str = "INR",
    note: Optional[str] = None,
    txn_ref: Optional[str] = None,
) -> str:
    """Generate UPI QR payload (same as deep link for standard UPI)"""
    return generate_upi_deeplink(
        upi_id=upi_id,
        payee_name=payee_name,
        amount=amount,
        currency=currency,
        note=note,
        txn_ref=txn_ref,
    )
