import datetime
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .barcode import encode_virtual_barcode, format_barcode
from .sepa import build_sepa_payload


logger = logging.getLogger(__name__)

_FINNISH_DATE = re.compile(r"([0-9]{1,2})\.([0-9]{1,2})\.([0-9]{2}|[0-9]{4})")


@dataclass(frozen=True)
class PaymentCodes:
    """The payment identifiers printed on one invoice."""

    reference: str
    barcode: str
    barcode_display: str
    sepa_payload: str


def parse_finnish_date(value: str) -> datetime.date:
    """Parses a date written the Finnish way, day first.

    Accepts "15.12.2024", "1.1.2026" and two-digit years such as "1.1.26",
    which are read as 20YY.

    Args:
        value: The date string.

    Returns:
        The parsed date.

    Raises:
        ValueError: If `value` is not a valid D.M.YYYY or D.M.YY date.
    """
    match = _FINNISH_DATE.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"Not a Finnish date (D.M.YYYY): {value!r}")
    day, month, year = match.groups()
    full_year = 2000 + int(year) if len(year) == 2 else int(year)
    return datetime.date(full_year, int(month), int(day))


def build_payment_codes(
    *,
    iban: str,
    bic: str,
    amount: Union[Decimal, float, int, str],
    reference: str,
    due_date: Union[datetime.date, str],
    beneficiary_name: str,
) -> PaymentCodes:
    """Builds the virtual barcode and SEPA QR payload for an invoice.

    Args:
        iban: The invoicing company's IBAN.
        bic: The invoicing company's BIC.
        amount: Invoice total in euros.
        reference: The invoice's RF creditor reference.
        due_date: Due date, as a date/datetime or a Finnish date string.
        beneficiary_name: The invoicing company's name.

    Returns:
        A `PaymentCodes` bundle for the PDF renderer.
    """
    if isinstance(due_date, str):
        due_date = parse_finnish_date(due_date)

    barcode = encode_virtual_barcode(iban, amount, reference, due_date)
    sepa_payload = build_sepa_payload(iban, bic, amount, reference, beneficiary_name)
    logger.info(f"Built payment codes for reference {reference} due {due_date:%d.%m.%Y}")
    return PaymentCodes(
        reference=reference,
        barcode=barcode,
        barcode_display=format_barcode(barcode),
        sepa_payload=sepa_payload,
    )
