"""
Copyright (c) 2020, The Inception developers
See LICENSE for details

Conversions between difficulty targets and their compact representation.
"""

MaxUint256 = (1 << 256) - 1


def compactToBig(compact):
    """
    compactToBig converts a compact representation of a whole number N to an
    unsigned 32-bit number. The representation is similar to IEEE754 floating
    point numbers.

    Like IEEE754 floating point, there are three basic components: the sign,
    the exponent, and the mantissa. They are broken out as follows:

        * the most significant 8 bits represent the unsigned base 256 exponent
        * bit 23 (the 24th bit) represents the sign bit
        * the least significant 23 bits represent the mantissa

        -------------------------------------------------
        |   Exponent     |    Sign    |    Mantissa     |
        -------------------------------------------------
        | 8 bits [31-24] | 1 bit [23] | 23 bits [22-00] |
        -------------------------------------------------

    The formula to calculate N is:
        N = (-1^sign) * mantissa * 256^(exponent-3)

    Args:
        compact (int): The compact (32-bit) representation.

    Returns:
        int: The number N.
    """
    mantissa = compact & 0x007FFFFF
    isNegative = compact & 0x00800000 != 0
    exponent = compact >> 24

    if exponent <= 3:
        n = mantissa >> (8 * (3 - exponent))
    else:
        n = mantissa << (8 * (exponent - 3))

    return -n if isNegative else n


def bigToCompact(n):
    """
    bigToCompact converts a whole number N to a compact representation using
    an unsigned 32-bit number. The compact representation only provides 23 bits
    of precision, so values larger than (2^23 - 1) only encode the most
    significant digits of the number. See compactToBig for details.

    Args:
        n (int): The number to encode.

    Returns:
        int: The compact representation.
    """
    if n == 0:
        return 0

    isNegative = n < 0
    if isNegative:
        n = -n

    exponent = (n.bit_length() + 7) // 8
    if exponent <= 3:
        mantissa = n << (8 * (3 - exponent))
    else:
        mantissa = n >> (8 * (exponent - 3))

    # The sign bit of the mantissa is set, so move the mantissa down a byte
    # and bump the exponent.
    if mantissa & 0x00800000:
        mantissa >>= 8
        exponent += 1

    compact = exponent << 24 | mantissa
    if isNegative:
        compact |= 0x00800000
    return compact
