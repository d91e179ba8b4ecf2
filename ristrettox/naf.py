"""Width-w non-adjacent form of scalars."""

from __future__ import annotations

from ristrettox.scalar import Scalar

_DIGITS = 256


def non_adjacent_form(scalar: Scalar, w: int) -> list[int]:
    """Return the 256 signed digits of the width-``w`` NAF of ``scalar``.

    Each nonzero digit is odd with absolute value below ``2**(w-1)``, at
    most one of any ``w`` consecutive digits is nonzero, and
    ``sum(d * 2**i)`` equals the scalar's representative. ``w`` must lie
    between 2 and 8 inclusive.
    """
    if not 2 <= w <= 8:
        raise ValueError(f"NAF width must be between 2 and 8, got {w}")

    value = scalar.value
    width = 1 << w
    window_mask = width - 1

    naf = [0] * _DIGITS
    pos = 0
    carry = 0
    while pos < _DIGITS:
        window = carry + ((value >> pos) & window_mask)

        if window & 1 == 0:
            # An even window keeps the carry: with carry 1 the low bit was set.
            pos += 1
            continue

        if window < width // 2:
            carry = 0
            naf[pos] = window
        else:
            carry = 1
            naf[pos] = window - width

        pos += w

    return naf