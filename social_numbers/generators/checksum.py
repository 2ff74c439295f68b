"""
Checksum calculation for social numbers.

The checksum is a weighted positional sum: the first digit carries a weight
equal to the length of the digit string and each following digit one less,
so the last digit has weight 1.
"""


def compute_checksum(digits: str, modulus: int) -> int:
    """
    Compute the checksum value appended to a social number.

    The result is ``modulus - (weighted_sum % modulus)``. When the weighted
    sum is an exact multiple of the modulus the result is the modulus itself,
    so a modulus of 11 can yield the two-character values "10" and "11".

    Args:
        digits: Decimal digits preceding the checksum
        modulus: Jurisdiction-specific modulus

    Returns:
        Checksum value in [1, modulus]
    """
    weight = len(digits)
    total = 0
    for char in digits:
        total += weight * int(char)
        weight -= 1

    rest = total % modulus
    return modulus - rest


def checksum_matches(identifier: str, modulus: int) -> bool:
    """
    Check whether an identifier ends with a checksum consistent with its prefix.

    The checksum may render as one character or as many characters as the
    modulus, so both splits are tried.

    Args:
        identifier: Full social number including the checksum
        modulus: Jurisdiction-specific modulus

    Returns:
        True if some split reproduces the trailing checksum
    """
    if not identifier.isdigit():
        return False

    for width in sorted({1, len(str(modulus))}):
        if len(identifier) <= width:
            continue
        prefix, suffix = identifier[:-width], identifier[-width:]
        if suffix.startswith("0"):
            continue
        if compute_checksum(prefix, modulus) == int(suffix):
            return True
    return False
