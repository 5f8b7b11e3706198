def mod97(digits: str) -> int:
    """Computes a decimal digit string modulo 97.

    The remainder is accumulated one digit at a time, left to right, so the
    input can be arbitrarily long (ISO 7064 MOD 97-10 style).

    Args:
        digits: A string made only of the characters 0-9. Callers are expected
            to strip everything else beforehand.

    Returns:
        The value of `digits` modulo 97, in the range 0-96.

    Raises:
        ValueError: If `digits` contains a non-digit character.
    """
    remainder = 0
    for char in digits:
        if not "0" <= char <= "9":
            raise ValueError(f"Non-digit character {char!r} in {digits!r}")
        remainder = (remainder * 10 + int(char)) % 97
    return remainder
