"""Signed-digit radix expansions of scalars for fixed-window multiplication."""

from __future__ import annotations

from ristrettox.scalar import Scalar

_RADIX_2W_CAPACITY = 43


def _check_width(w: int) -> None:
    if not 6 <= w <= 8:
        raise ValueError(f"radix width must be 6, 7 or 8, got {w}")


def to_radix_16(scalar: Scalar) -> list[int]:
    """Write the scalar in radix 16 with signed digits.

    Returns 64 digits ``a_i`` with ``value == sum(a_i * 16**i)``, where
    ``-8 <= a_i < 8`` for the first 63 digits and ``-8 <= a_63 <= 8``.
    """
    value = scalar.value
    if value >> 255:
        raise ValueError("radix-16 expansion requires a scalar below 2**255")

    digits: list[int] = []
    carry = 0
    for i in range(63):
        coef = ((value >> (4 * i)) & 15) + carry
        carry = (coef + 8) >> 4
        digits.append(coef - (carry << 4))
    # The top digit is not recentred; it grows by at most one.
    digits.append(((value >> 252) & 15) + carry)
    return digits


def to_radix_2w_size_hint(w: int) -> int:
    """Return how many leading digits of ``to_radix_2w(scalar, w)`` can be nonzero."""
    _check_width(w)
    count = (256 + w - 1) // w
    # With w = 8 the terminal carry is kept in an extra digit.
    return count + 1 if w == 8 else count


def to_radix_2w(scalar: Scalar, w: int) -> list[int]:
    """Write the scalar in radix ``2**w`` for ``w`` in 6, 7 or 8.

    Returns 43 digits; those past ``to_radix_2w_size_hint(w)`` are zero.
    Each digit lies in ``[-2**w/2, 2**w/2)`` except the last significant
    one, which may equal ``2**w/2``.
    """
    _check_width(w)
    value = scalar.value
    radix = 1 << w
    window_mask = radix - 1
    count = (256 + w - 1) // w

    digits = [0] * _RADIX_2W_CAPACITY
    carry = 0
    for i in range(count):
        coef = carry + ((value >> (i * w)) & window_mask)
        carry = (coef + radix // 2) >> w
        digits[i] = coef - (carry << w)

    if w == 8:
        digits[count] += carry
    else:
        digits[count - 1] += carry << w
    return digits