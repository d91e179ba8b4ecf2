"""Hashing to the Ristretto group through the Ristretto-flavoured Elligator map."""

from __future__ import annotations

import hashlib
import secrets
from typing import Protocol

from ristrettox.field import SQRT_M1, FieldElement
from ristrettox.ristretto import EDWARDS_D, RistrettoPoint

_ONE = FieldElement.one()

ONE_MINUS_EDWARDS_D_SQUARED = _ONE - EDWARDS_D.square()
"""The constant 1 - d**2."""

EDWARDS_D_MINUS_ONE_SQUARED = (EDWARDS_D - _ONE).square()
"""The constant (d - 1)**2."""


def _sqrt_ad_minus_one() -> FieldElement:
    is_square, root = FieldElement.sqrt_ratio_i(-EDWARDS_D - _ONE, _ONE)
    if not is_square:
        raise ArithmeticError("a*d - 1 must be a square")
    # The fixed representative is the one with its low bit set.
    return -root


SQRT_AD_MINUS_ONE = _sqrt_ad_minus_one()
"""A square root of a*d - 1 with a = -1."""

_WIDE = 64


class _RandomSource(Protocol):
    def randbytes(self, n: int) -> bytes: ...


class _Digest(Protocol):
    digest_size: int

    def digest(self) -> bytes: ...


def elligator_ristretto_flavor(r_0: FieldElement) -> RistrettoPoint:
    """Map a field element to a Ristretto point."""
    r = SQRT_M1 * r_0.square()
    n_s = (r + _ONE) * ONE_MINUS_EDWARDS_D_SQUARED
    c = FieldElement.minus_one()
    d = (c - EDWARDS_D * r) * (r + EDWARDS_D)

    ns_d_is_square, s = FieldElement.sqrt_ratio_i(n_s, d)
    s_prime = s * r_0
    s_prime = s_prime.negate_if(not s_prime.is_negative())

    if not ns_d_is_square:
        s = s_prime
        c = r

    n_t = c * (r - _ONE) * EDWARDS_D_MINUS_ONE_SQUARED - d
    s_sq = s.square()

    # The completed point (X : Z, Y : T) converted to extended coordinates.
    cx = (s + s) * d
    cz = n_t * SQRT_AD_MINUS_ONE
    cy = _ONE - s_sq
    ct = _ONE + s_sq
    return RistrettoPoint(cx * ct, cy * cz, cz * ct, cx * cy)


def from_uniform_bytes(data: bytes) -> RistrettoPoint:
    """Map 64 bytes to a point by applying Elligator to each half and adding.

    Uniformly random input gives a uniformly distributed point.
    """
    data = bytes(data)
    if len(data) != _WIDE:
        raise ValueError(f"expected {_WIDE} bytes, got {len(data)}")
    first = elligator_ristretto_flavor(FieldElement.from_bytes(data[:32]))
    second = elligator_ristretto_flavor(FieldElement.from_bytes(data[32:]))
    return first + second


def random_point(rng: _RandomSource | None = None) -> RistrettoPoint:
    """Return a uniformly random point.

    ``rng`` is any object with a ``randbytes`` method; when omitted, the
    operating system's secure source is used.
    """
    source = rng if rng is not None else secrets.SystemRandom()
    return from_uniform_bytes(source.randbytes(_WIDE))


def point_from_hash(digest: _Digest) -> RistrettoPoint:
    """Map the output of a 64-byte hash object to a point.

    Any other output size raises ValueError.
    """
    if digest.digest_size != _WIDE:
        raise ValueError(f"the hash must produce {_WIDE} bytes, not {digest.digest_size}")
    return from_uniform_bytes(digest.digest())


def hash_to_point(data: bytes) -> RistrettoPoint:
    """Hash a byte string with SHA-512 and map the result to a point."""
    return point_from_hash(hashlib.sha512(bytes(data)))