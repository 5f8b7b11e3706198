"""Django validators for model and form fields that feed the payment codes."""

import re

from django.core.exceptions import ValidationError
import stdnum.bic
import stdnum.exceptions
import stdnum.iban

from .barcode import encode_fixed_width
from .exceptions import BarcodeFieldError
from .references import validate_reference


def validate_rf_reference(value: str) -> None:
    """Validates a stored RF creditor reference.

    Raises:
        ValidationError: If the check digits do not match.
    """
    if not validate_reference(value):
        raise ValidationError(
            f"{value} is not a valid RF creditor reference.", code="invalid_reference"
        )


def validate_payment_iban(value: str) -> None:
    """Validates an IBAN used for the virtual barcode and the SEPA payload.

    Checks the IBAN format and checksum with `stdnum`, and that its digits fit
    the 16-digit account field of the virtual barcode (Finnish IBANs do).

    Raises:
        ValidationError: If the IBAN is invalid or too long for the barcode.
    """
    try:
        normalized_iban = stdnum.iban.validate(value)
    except stdnum.exceptions.ValidationError as e:
        raise ValidationError(f"Invalid IBAN: {e.message}", code="invalid_iban") from e
    try:
        encode_fixed_width(re.sub(r"[^0-9]", "", normalized_iban), 16, "account")
    except BarcodeFieldError as e:
        raise ValidationError(
            f"IBAN {normalized_iban} has too many digits for a virtual barcode.",
            code="iban_too_long",
        ) from e


def validate_payment_bic(value: str) -> None:
    """Validates the BIC printed in the SEPA payload.

    Raises:
        ValidationError: If the BIC is malformed.
    """
    try:
        stdnum.bic.validate(value)
    except stdnum.exceptions.ValidationError as e:
        raise ValidationError(f"Invalid BIC: {e.message}", code="invalid_bic") from e


def validate_payment_text(value: str) -> None:
    """Rejects line breaks in free text copied into the SEPA payload."""
    if "\n" in value or "\r" in value:
        raise ValidationError(
            "Payment text must fit on a single line.", code="line_break"
        )
