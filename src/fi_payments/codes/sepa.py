import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from .exceptions import SepaFieldError


logger = logging.getLogger(__name__)

SERVICE_TAG = "BCD"
VERSION = "002"
CHARACTER_SET_UTF8 = "1"
IDENTIFICATION = "SCT"
CURRENCY = "EUR"


def _check_text(field: str, value: str) -> str:
    if "\n" in value or "\r" in value:
        raise SepaFieldError(field, "must not contain line breaks")
    return value


def _format_amount(amount: Union[Decimal, float, int, str]) -> str:
    try:
        value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        if not value.is_finite():
            raise InvalidOperation(f"{amount!r} is not finite")
    except InvalidOperation as e:
        raise SepaFieldError("amount", f"{amount!r} is not a number") from e
    return f"{CURRENCY}{value:.2f}"


def build_sepa_payload(
    iban: str,
    bic: str,
    amount: Union[Decimal, float, int, str],
    reference: str,
    beneficiary_name: str,
) -> str:
    """Builds the EPC QR code payload for a SEPA credit transfer.

    The payload is positional: eleven lines in a fixed order, where empty
    fields keep their line. Banking apps that scan the QR code fill in the
    payment from it.

    Args:
        iban: Beneficiary IBAN.
        bic: BIC of the beneficiary's bank. May be empty.
        amount: Payment amount in euros, printed with two decimals.
        reference: Structured creditor reference, including "RF".
        beneficiary_name: Name of the beneficiary (the invoicing company).

    Returns:
        The newline-separated payload, to be rendered as a QR code.

    Raises:
        SepaFieldError: If a text field contains a line break, or the amount
            is not a number.
    """
    lines = [
        SERVICE_TAG,
        VERSION,
        CHARACTER_SET_UTF8,
        IDENTIFICATION,
        _check_text("bic", bic),
        _check_text("beneficiary_name", beneficiary_name),
        _check_text("iban", iban),
        _format_amount(amount),
        "",  # purpose code
        _check_text("reference", reference),
        "",  # unstructured remittance, exclusive with the structured reference
    ]
    logger.debug(f"SEPA payload for {iban} with reference {reference}")
    return "\n".join(lines)
