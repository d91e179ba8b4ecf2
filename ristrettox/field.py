"""Arithmetic in the prime field of order p = 2**255 - 19."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

P = 2**255 - 19
"""The field modulus."""

_MASK_255 = (1 << 255) - 1


@dataclass(frozen=True, slots=True)
class FieldElement:
    """An element of Z / (2**255 - 19), held as its canonical representative."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value % P)

    # ------------------------------------------------------------------
    # Construction and encoding
    # ------------------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Decode 32 little-endian bytes, ignoring the top bit and reducing mod p."""
        if len(data) != 32:
            raise ValueError(f"field element encoding must be 32 bytes, got {len(data)}")
        return cls(int.from_bytes(bytes(data), "little") & _MASK_255)

    def to_bytes(self) -> bytes:
        """Return the canonical 32-byte little-endian encoding."""
        return self.value.to_bytes(32, "little")

    @classmethod
    def zero(cls) -> FieldElement:
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        return cls(1)

    @classmethod
    def minus_one(cls) -> FieldElement:
        return cls(P - 1)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_negative(self) -> bool:
        """True when the low bit of the canonical encoding is set."""
        return bool(self.value & 1)

    def is_zero(self) -> bool:
        return self.value == 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value + other.value)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value - other.value)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value * other.value)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self.value)

    def square(self) -> FieldElement:
        return FieldElement(self.value * self.value)

    def square2(self) -> FieldElement:
        """Return 2 * self**2."""
        return FieldElement(2 * self.value * self.value)

    def pow2k(self, k: int) -> FieldElement:
        """Square this element k times, k >= 1."""
        if k < 1:
            raise ValueError("pow2k requires k >= 1")
        return FieldElement(pow(self.value, 1 << k, P))

    def invert(self) -> FieldElement:
        """Return self**(p-2): the inverse, or zero when self is zero."""
        return FieldElement(pow(self.value, P - 2, P))

    def pow_p58(self) -> FieldElement:
        """Raise to the power (p-5)/8 = 2**252 - 3."""
        return FieldElement(pow(self.value, (P - 5) // 8, P))

    def negate_if(self, choice: bool) -> FieldElement:
        """Return -self when choice is true, otherwise self."""
        return -self if choice else self

    @staticmethod
    def conditional_select(a: FieldElement, b: FieldElement, choice: bool) -> FieldElement:
        """Return b when choice is true, otherwise a."""
        return b if choice else a

    @staticmethod
    def batch_invert(inputs: Iterable[FieldElement]) -> list[FieldElement]:
        """Invert every element with a single field inversion.

        All inputs must be nonzero; a zero input raises ValueError.
        """
        elements = list(inputs)
        prefixes = []
        acc = FieldElement.one()
        for element in elements:
            prefixes.append(acc)
            acc = acc * element
        if acc.is_zero():
            raise ValueError("batch_invert requires all inputs to be nonzero")
        acc = acc.invert()
        result = [FieldElement.zero()] * len(elements)
        for index in reversed(range(len(elements))):
            result[index] = acc * prefixes[index]
            acc = acc * elements[index]
        return result

    @staticmethod
    def sqrt_ratio_i(u: FieldElement, v: FieldElement) -> tuple[bool, FieldElement]:
        """Compute the nonnegative sqrt(u/v) or sqrt(i*u/v).

        Returns:
        - (True, +sqrt(u/v)) if v is nonzero and u/v is square;
        - (True, zero) if u is zero;
        - (False, zero) if v is zero and u is nonzero;
        - (False, +sqrt(i*u/v)) if u/v is nonsquare.
        """
        v3 = v.square() * v
        v7 = v3.square() * v
        r = (u * v3) * (u * v7).pow_p58()
        check = v * r.square()

        correct_sign_sqrt = check == u
        flipped_sign_sqrt = check == -u
        flipped_sign_sqrt_i = check == (-u) * SQRT_M1

        if flipped_sign_sqrt or flipped_sign_sqrt_i:
            r = SQRT_M1 * r
        r = r.negate_if(r.is_negative())

        return correct_sign_sqrt or flipped_sign_sqrt, r

    def invsqrt(self) -> tuple[bool, FieldElement]:
        """Attempt to compute the nonnegative sqrt(1/self)."""
        return FieldElement.sqrt_ratio_i(FieldElement.one(), self)

    def __repr__(self) -> str:
        return f"FieldElement({self.value:#x})"


SQRT_M1 = FieldElement(pow(2, (P - 1) // 4, P))
"""The nonnegative square root of -1 in the field."""