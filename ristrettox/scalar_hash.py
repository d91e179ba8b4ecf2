"""Scalars drawn from random bytes or from 64-byte hash outputs."""

from __future__ import annotations

import hashlib
import secrets
from typing import Protocol

from ristrettox.scalar import Scalar

_WIDE = 64


class _RandomSource(Protocol):
    def randbytes(self, n: int) -> bytes: ...


class _Digest(Protocol):
    digest_size: int

    def digest(self) -> bytes: ...


def random_scalar(rng: _RandomSource | None = None) -> Scalar:
    """Return a scalar chosen uniformly from Z / L.

    ``rng`` is any object with a ``randbytes`` method; when omitted, the
    operating system's secure source is used.
    """
    source = rng if rng is not None else secrets.SystemRandom()
    return Scalar.from_bytes_mod_order_wide(source.randbytes(_WIDE))


def scalar_from_hash(digest: _Digest) -> Scalar:
    """Reduce the output of a 64-byte hash object modulo L.

    The hash object must produce 64 bytes, such as ``hashlib.sha512()``;
    any other output size raises ValueError.
    """
    if digest.digest_size != _WIDE:
        raise ValueError(f"the hash must produce {_WIDE} bytes, not {digest.digest_size}")
    return Scalar.from_bytes_mod_order_wide(digest.digest())


def hash_to_scalar(data: bytes) -> Scalar:
    """Hash a byte string with SHA-512 and reduce the result modulo L."""
    return scalar_from_hash(hashlib.sha512(bytes(data)))