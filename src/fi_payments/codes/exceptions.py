from typing import Dict, Optional


class PaymentCodeError(ValueError):
    """Base class for errors raised while building payment identifiers."""


class ReferenceSeedError(PaymentCodeError):
    """Raised when a reference seed has no digits and fallbacks are disabled."""

    def __init__(self, seed: str) -> None:
        self.seed = seed
        super().__init__(f"Reference seed {seed!r} contains no digits")


class ReferenceChecksumError(PaymentCodeError):
    """Raised when computed check digits fall outside 01-98.

    This cannot happen for a correct mod-97 implementation and signals a bug.
    """


class BarcodeFieldError(PaymentCodeError):
    """Raised when a value does not fit its fixed-width barcode field.

    Attributes:
        field: Name of the barcode field (e.g. "amount").
        value: The digit string that was rejected.
        width: The width of the field in digits.
    """

    def __init__(self, field: str, value: str, width: int, message: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        self.width = width
        if message is None:
            message = (
                f"Barcode field '{field}' holds {width} digits,"
                f" got {len(value)} ({value!r})"
            )
        super().__init__(message)


class BarcodeLengthError(PaymentCodeError):
    """Raised when an encoded virtual barcode is not exactly 54 digits long.

    Attributes:
        length: Length of the rejected barcode.
        fields: Field name to encoded value mapping, when known.
    """

    def __init__(self, length: int, fields: Optional[Dict[str, str]] = None) -> None:
        self.length = length
        self.fields = fields or {}
        message = f"Virtual barcode must be 54 digits, got {length}"
        if self.fields:
            widths = ", ".join(f"{name}={len(value)}" for name, value in self.fields.items())
            message = f"{message} ({widths})"
        super().__init__(message)


class SepaFieldError(PaymentCodeError):
    """Raised when a value would corrupt the positional SEPA payload."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"SEPA field '{field}': {message}")
