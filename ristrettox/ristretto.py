"""The Ristretto prime-order group built on the Edwards form of Curve25519."""

from __future__ import annotations

from dataclasses import dataclass

from ristrettox.field import SQRT_M1, FieldElement
from ristrettox.scalar import Scalar

EDWARDS_D = -FieldElement(121665) * FieldElement(121666).invert()
"""The Edwards curve constant d = -121665/121666."""

EDWARDS_D2 = EDWARDS_D + EDWARDS_D

INVSQRT_A_MINUS_D = (-FieldElement.one() - EDWARDS_D).invsqrt()[1]
"""The nonnegative value of 1/sqrt(a - d) with a = -1."""


@dataclass(frozen=True, slots=True)
class CompressedRistretto:
    """A Ristretto point in its canonical 32-byte wire format."""

    data: bytes = bytes(32)

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != 32:
            raise ValueError(f"a compressed point must be 32 bytes, got {len(data)}")
        object.__setattr__(self, "data", data)

    @classmethod
    def from_slice(cls, data: bytes) -> CompressedRistretto:
        """Build from a byte string, which must be exactly 32 bytes long."""
        return cls(bytes(data))

    @classmethod
    def identity(cls) -> CompressedRistretto:
        return cls(bytes(32))

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def decompress(self) -> RistrettoPoint | None:
        """Return the encoded point, or None if this is not a canonical encoding."""
        s = FieldElement.from_bytes(self.data)
        if s.to_bytes() != self.data or s.is_negative():
            return None

        one = FieldElement.one()
        ss = s.square()
        u1 = one - ss
        u2 = one + ss
        u2_sqr = u2.square()

        v = (-EDWARDS_D) * u1.square() - u2_sqr
        ok, inv = (v * u2_sqr).invsqrt()

        den_x = inv * u2
        den_y = inv * (den_x * v)

        x = (s + s) * den_x
        x = x.negate_if(x.is_negative())
        y = u1 * den_y
        t = x * y

        if not ok or t.is_negative() or y.is_zero():
            return None
        return RistrettoPoint(x, y, one, t)

    def __repr__(self) -> str:
        return f"CompressedRistretto({self.data.hex()})"


@dataclass(frozen=True, slots=True, eq=False)
class RistrettoPoint:
    """An element of the Ristretto group, held as an extended Edwards representative."""

    x: FieldElement
    y: FieldElement
    z: FieldElement
    t: FieldElement

    @classmethod
    def identity(cls) -> RistrettoPoint:
        return cls(FieldElement.zero(), FieldElement.one(), FieldElement.one(), FieldElement.zero())

    @classmethod
    def basepoint(cls) -> RistrettoPoint:
        """The Ristretto basepoint, represented by the Ed25519 basepoint."""
        return RISTRETTO_BASEPOINT_POINT

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def compress(self) -> CompressedRistretto:
        x, y, z, t = self.x, self.y, self.z, self.t

        u1 = (z + y) * (z - y)
        u2 = x * y
        # The argument is always square, so the flag is ignored.
        _, invsqrt = (u1 * u2.square()).invsqrt()
        i1 = invsqrt * u1
        i2 = invsqrt * u2
        z_inv = i1 * (i2 * t)
        den_inv = i2

        ix = x * SQRT_M1
        iy = y * SQRT_M1
        enchanted_denominator = i1 * INVSQRT_A_MINUS_D

        if (t * z_inv).is_negative():
            x, y, den_inv = iy, ix, enchanted_denominator

        y = y.negate_if((x * z_inv).is_negative())

        s = den_inv * (z - y)
        s = s.negate_if(s.is_negative())
        return CompressedRistretto(s.to_bytes())

    def coset4(self) -> tuple[RistrettoPoint, ...]:
        """Return the four Edwards representatives self + E[4] of this element."""
        return (self,) + tuple(_edwards_add(self, torsion) for torsion in _FOUR_TORSION)

    # ------------------------------------------------------------------
    # Group operations
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> RistrettoPoint:
        if not isinstance(other, RistrettoPoint):
            return NotImplemented
        return _edwards_add(self, other)

    def __sub__(self, other: object) -> RistrettoPoint:
        if not isinstance(other, RistrettoPoint):
            return NotImplemented
        return _edwards_add(self, -other)

    def __neg__(self) -> RistrettoPoint:
        return RistrettoPoint(-self.x, self.y, self.z, -self.t)

    def __mul__(self, other: object) -> RistrettoPoint:
        if not isinstance(other, Scalar):
            return NotImplemented
        acc = RistrettoPoint.identity()
        for bit in bin(other.value)[2:]:
            acc = _edwards_add(acc, acc)
            if bit == "1":
                acc = _edwards_add(acc, self)
        return acc

    __rmul__ = __mul__

    @staticmethod
    def conditional_select(a: RistrettoPoint, b: RistrettoPoint, choice: bool) -> RistrettoPoint:
        """Return b when choice is true, otherwise a."""
        return b if choice else a

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RistrettoPoint):
            return NotImplemented
        return (self.x * other.y == self.y * other.x) or (self.x * other.x == self.y * other.y)

    def __hash__(self) -> int:
        return hash(self.compress().data)

    def __repr__(self) -> str:
        return f"RistrettoPoint({self.compress().data.hex()})"


def _edwards_add(p: RistrettoPoint, q: RistrettoPoint) -> RistrettoPoint:
    """Complete addition in extended coordinates on -x^2 + y^2 = 1 + d x^2 y^2."""
    a = (p.y - p.x) * (q.y - q.x)
    b = (p.y + p.x) * (q.y + q.x)
    c = p.t * EDWARDS_D2 * q.t
    d = p.z * q.z
    d = d + d
    e = b - a
    f = d - c
    g = d + c
    h = b + a
    return RistrettoPoint(e * f, g * h, f * g, e * h)


def _affine(x: FieldElement, y: FieldElement) -> RistrettoPoint:
    return RistrettoPoint(x, y, FieldElement.one(), x * y)


def _make_basepoint() -> RistrettoPoint:
    y = FieldElement(4) * FieldElement(5).invert()
    yy = y.square()
    _, x = FieldElement.sqrt_ratio_i(yy - FieldElement.one(), EDWARDS_D * yy + FieldElement.one())
    return _affine(x, y)


RISTRETTO_BASEPOINT_POINT = _make_basepoint()
"""The Ristretto basepoint."""

_NEGATIVE_I = SQRT_M1 if SQRT_M1.is_negative() else -SQRT_M1
_FOUR_TORSION = (
    _affine(_NEGATIVE_I, FieldElement.zero()),
    _affine(FieldElement.zero(), FieldElement.minus_one()),
    _affine(-_NEGATIVE_I, FieldElement.zero()),
)