"""Integers modulo the prime order of the Ristretto group."""

from __future__ import annotations

from dataclasses import dataclass

L = 2**252 + 27742317777372353535851937790883648493
"""The prime order of the Ristretto group and of the Ed25519 basepoint."""

_MASK_255 = (1 << 255) - 1


def _check_length(data: bytes, expected: int) -> bytes:
    data = bytes(data)
    if len(data) != expected:
        raise ValueError(f"expected {expected} bytes, got {len(data)}")
    return data


@dataclass(frozen=True, slots=True)
class Scalar:
    """An integer below 2**255 representing an element of Z / L.

    Arithmetic always yields reduced results; only ``from_bits`` can build
    an unreduced representative.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MASK_255:
            raise ValueError("a scalar must lie in the range [0, 2**255)")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes_mod_order(cls, data: bytes) -> Scalar:
        """Reduce a 256-bit little-endian integer modulo L."""
        return cls(int.from_bytes(_check_length(data, 32), "little") % L)

    @classmethod
    def from_bytes_mod_order_wide(cls, data: bytes) -> Scalar:
        """Reduce a 512-bit little-endian integer modulo L."""
        return cls(int.from_bytes(_check_length(data, 64), "little") % L)

    @classmethod
    def from_canonical_bytes(cls, data: bytes) -> Scalar | None:
        """Decode a canonical encoding, or return None if it is not canonical."""
        data = _check_length(data, 32)
        if data[31] >> 7:
            return None
        candidate = cls.from_bits(data)
        return candidate if candidate.is_canonical() else None

    @classmethod
    def from_bits(cls, data: bytes) -> Scalar:
        """Take the low 255 bits of a 256-bit integer, without reduction."""
        return cls(int.from_bytes(_check_length(data, 32), "little") & _MASK_255)

    @classmethod
    def from_int(cls, value: int) -> Scalar:
        """Build a scalar from an unsigned integer below 2**128."""
        if not 0 <= value < 1 << 128:
            raise ValueError("from_int accepts integers in the range [0, 2**128)")
        return cls(value)

    @classmethod
    def zero(cls) -> Scalar:
        return cls(0)

    @classmethod
    def one(cls) -> Scalar:
        return cls(1)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Return the 32-byte little-endian encoding of the representative."""
        return self.value.to_bytes(32, "little")

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __getitem__(self, index: int) -> int:
        return self.to_bytes()[index]

    def bits(self) -> list[int]:
        """Return the 256 bits of the representative, least significant first."""
        return [(self.value >> i) & 1 for i in range(256)]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value + other.value) % L)

    def __sub__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value - other.value) % L)

    def __mul__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.value * other.value) % L)

    def __neg__(self) -> Scalar:
        return Scalar(-self.value % L)

    def invert(self) -> Scalar:
        """Return the multiplicative inverse; the scalar must be nonzero."""
        return Scalar(pow(self.value, L - 2, L))

    def reduce(self) -> Scalar:
        """Return the canonical representative modulo L."""
        return Scalar(self.value % L)

    def is_canonical(self) -> bool:
        return self.value < L

    @staticmethod
    def conditional_select(a: Scalar, b: Scalar, choice: bool) -> Scalar:
        """Return b when choice is true, otherwise a."""
        return b if choice else a

    def __repr__(self) -> str:
        return f"Scalar({self.value:#x})"