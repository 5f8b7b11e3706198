import datetime
import logging
import re
from typing import Any

from stdnum import iso11649

from .checksum import mod97
from .conf import SEED_FALLBACK_REJECT, get_setting
from .exceptions import ReferenceChecksumError, ReferenceSeedError


logger = logging.getLogger(__name__)

# ISO 11649 references are at most 25 characters: "RF", two check digits
# and up to 21 characters of base reference.
MAX_REFERENCE_LENGTH = 25

_REFERENCE_PATTERN = re.compile(r"RF[0-9]{3,}")
_WHITESPACE = re.compile(r"\s+")


def cleanup_reference(text: str) -> str:
    """Converts text to uppercase and removes all whitespace.

    References are often printed in groups of four ("RF74 001"), so the
    grouping is dropped before the reference is checked or re-formatted.

    Args:
        text: The reference as typed or printed.

    Returns:
        The reference in its compact, uppercase form.
    """
    return _WHITESPACE.sub("", text).upper()


def letter_to_number(text: str) -> str:
    """Converts letters in a string to their corresponding numerical values.

    Letters A-Z are converted to 10-35, respectively. Digits remain unchanged.
    Any other character is removed. This is the ISO 7064 Mod 97-10 mapping
    that turns the "RF" prefix into "2715".

    Args:
        text: The input string containing letters and/or digits.

    Returns:
        A string where letters are replaced by their two-digit numerical values
        and digits are preserved.
    """

    def convert_letter(char: str) -> str:
        if "A" <= char <= "Z":
            return str(ord(char) - ord("A") + 10)
        elif "0" <= char <= "9":
            return char
        else:
            return ""

    return "".join(convert_letter(char) for char in text.upper())


# "RF" followed by the "00" check digit placeholder, moved behind the base
# number before the mod-97 reduction.
RF_SUFFIX = letter_to_number("RF00")


def _now() -> datetime.datetime:
    # Must not read Django settings; they may be unconfigured.
    return datetime.datetime.now(datetime.timezone.utc)


def _fallback_base() -> str:
    digits = get_setting("REFERENCE_FALLBACK_DIGITS")
    millis = int(_now().timestamp() * 1000)
    return str(millis)[-digits:]


def calculate_check_digits(base: str) -> str:
    """Calculates the two ISO 11649 check digits for a numeric base reference.

    Args:
        base: The digits of the reference, without the "RF" prefix.

    Returns:
        The check digits as a two-character, zero-padded string.

    Raises:
        ReferenceChecksumError: If the result is not in the range 01-98.
    """
    check = 98 - mod97(f"{base}{RF_SUFFIX}")
    if not 1 <= check <= 98:
        raise ReferenceChecksumError(f"Check digits {check} out of range for base {base!r}")
    return f"{check:02d}"


def generate_reference(seed: str) -> str:
    """Generates a structured RF creditor reference from an invoice number.

    Only the digits of `seed` are used as the base reference, so "INV-001"
    becomes "RF74001". When the seed has no digits at all, the behaviour
    depends on ``FI_PAYMENTS['REFERENCE_SEED_FALLBACK']``: either the tail of
    the current timestamp is used as base, or the seed is rejected.

    Args:
        seed: The invoice number or any other identifier.

    Returns:
        A string formatted as "RFxx[base]", where 'xx' are the two Mod 97-10
        check digits.

    Raises:
        ReferenceSeedError: If the seed has no digits and the fallback policy
            is "reject".
    """
    base = "".join(char for char in seed if "0" <= char <= "9")
    if not base:
        if get_setting("REFERENCE_SEED_FALLBACK") == SEED_FALLBACK_REJECT:
            raise ReferenceSeedError(seed)
        base = _fallback_base()
        logger.warning(
            f"Reference seed {seed!r} has no digits, using timestamp base {base}"
        )

    reference = f"RF{calculate_check_digits(base)}{base}"
    if len(reference) > MAX_REFERENCE_LENGTH:
        logger.warning(
            f"Reference {reference} exceeds {MAX_REFERENCE_LENGTH} characters"
        )
    return reference


def validate_reference(reference: Any) -> bool:
    """Checks whether a string is a valid numeric RF creditor reference.

    Whitespace is ignored and letters are compared case-insensitively. Only
    "RF" followed by the check digits and a numeric base is accepted.

    Args:
        reference: The reference to check.

    Returns:
        True if the check digits match the base, False for anything else.
    """
    if not isinstance(reference, str):
        return False
    cleaned = cleanup_reference(reference)
    if not _REFERENCE_PATTERN.fullmatch(cleaned):
        return False
    return cleaned[2:4] == calculate_check_digits(cleaned[4:])


def format_reference(reference: str) -> str:
    """Formats a creditor reference in groups of four for printing.

    Args:
        reference: The reference, in compact or grouped form.

    Returns:
        The reference split into blocks of four characters, e.g. "RF74 001".
    """
    return iso11649.format(cleanup_reference(reference))
