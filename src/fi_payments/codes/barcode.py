"""Finnish virtual barcode (virtuaaliviivakoodi), version 4.

The barcode is a 54-digit string that the payer copies into an online bank
to fill in the payment details. It is made of six fixed-width fields:

====================  =====  ==========================================
Field                 Width  Content
====================  =====  ==========================================
version               1      always "4" (RF reference payments)
account               16     IBAN digits, without the country code
amount                8      euro cents
reserved              3      always "000"
reference             20     RF reference digits, without "RF"
due_date              6      DDMMYY
====================  =====  ==========================================
"""

import datetime
import logging
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Dict, List, Tuple, Union

from .exceptions import BarcodeFieldError, BarcodeLengthError


logger = logging.getLogger(__name__)

BARCODE_LENGTH = 54
VERSION = "4"
RESERVED = "000"

FIELDS: List[Tuple[str, int]] = [
    ("version", 1),
    ("account", 16),
    ("amount", 8),
    ("reserved", 3),
    ("reference", 20),
    ("due_date", 6),
]

_NON_DIGITS = re.compile(r"[^0-9]")
_WHITESPACE = re.compile(r"\s+")


def encode_fixed_width(value: str, width: int, field: str) -> str:
    """Left-pads a digit string with zeros to a fixed width.

    Args:
        value: The digits to encode.
        width: The number of digits the field holds.
        field: Field name, used in the error.

    Returns:
        `value` padded to exactly `width` digits.

    Raises:
        BarcodeFieldError: If `value` is longer than `width`.
    """
    if len(value) > width:
        raise BarcodeFieldError(field, value, width)
    return value.rjust(width, "0")


def _encode_account(iban: str) -> str:
    return encode_fixed_width(_NON_DIGITS.sub("", iban), 16, "account")


def _encode_amount(amount: Union[Decimal, float, int, str]) -> str:
    try:
        cents = (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        if not cents.is_finite():
            raise InvalidOperation(f"{amount!r} is not finite")
    except InvalidOperation as e:
        raise BarcodeFieldError(
            "amount", str(amount), 8, f"Barcode amount is not a number, got {amount!r}"
        ) from e
    if cents < 0:
        raise BarcodeFieldError(
            "amount", str(cents), 8, f"Barcode amount cannot be negative, got {amount}"
        )
    return encode_fixed_width(str(int(cents)), 8, "amount")


def _encode_reference(reference: str) -> str:
    return encode_fixed_width(_NON_DIGITS.sub("", reference), 20, "reference")


def _encode_due_date(due_date: datetime.date) -> str:
    # Day first: DDMMYY, not YYMMDD.
    return due_date.strftime("%d%m%y")


def encode_virtual_barcode(
    iban: str,
    amount: Union[Decimal, float, int, str],
    reference: str,
    due_date: datetime.date,
) -> str:
    """Encodes the payment details of an invoice as a version 4 virtual barcode.

    Args:
        iban: The creditor's Finnish IBAN (e.g. "FI21 1234 5600 0007 85").
        amount: Payment amount in euros. Rounded half-up to cents.
        reference: The RF creditor reference (e.g. "RF74001").
        due_date: Payment due date.

    Returns:
        The 54-digit barcode.

    Raises:
        BarcodeFieldError: If a value does not fit its field, e.g. an amount
            of one million euros or more, or a reference with more than 20
            digits.
        BarcodeLengthError: If the encoded barcode is not 54 digits long.
    """
    fields: Dict[str, str] = {
        "version": VERSION,
        "account": _encode_account(iban),
        "amount": _encode_amount(amount),
        "reserved": RESERVED,
        "reference": _encode_reference(reference),
        "due_date": _encode_due_date(due_date),
    }
    barcode = "".join(fields.values())
    logger.debug(f"Virtual barcode fields: {fields}")

    if len(barcode) != BARCODE_LENGTH:
        logger.error(
            f"Virtual barcode generation error: got {len(barcode)} digits, fields {fields}"
        )
        raise BarcodeLengthError(len(barcode), fields)
    return barcode


def split_barcode(barcode: str) -> Dict[str, str]:
    """Slices a virtual barcode back into its named fields.

    Args:
        barcode: A 54-digit barcode. Whitespace is ignored.

    Returns:
        A mapping of field name to its digits, in barcode order.

    Raises:
        BarcodeLengthError: If the barcode is not 54 digits long.
    """
    barcode = _WHITESPACE.sub("", barcode)
    if len(barcode) != BARCODE_LENGTH:
        raise BarcodeLengthError(len(barcode))
    fields: Dict[str, str] = {}
    position = 0
    for name, width in FIELDS:
        fields[name] = barcode[position:position + width]
        position += width
    return fields


def format_barcode(barcode: str) -> str:
    """Formats a virtual barcode with spaces for display.

    The version digit stands alone, the rest is split into groups of five:
    "4 21123 45600 ...". Only for showing to people; banks expect the
    unformatted digits.

    Args:
        barcode: The barcode digits. Existing whitespace is ignored.

    Returns:
        The grouped barcode.
    """
    barcode = _WHITESPACE.sub("", barcode)
    if not barcode:
        return ""
    parts = [barcode[0]]
    parts.extend(barcode[i:i + 5] for i in range(1, len(barcode), 5))
    return " ".join(parts)
