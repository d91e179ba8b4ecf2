"""Precomputed multiples of a Ristretto point for fast fixed-base multiplication."""

from __future__ import annotations

from ristrettox.radix import to_radix_16
from ristrettox.ristretto import RistrettoPoint
from ristrettox.scalar import Scalar

_ROWS = 64
_COLUMNS = 8


class RistrettoBasepointTable:
    """Holds ``j * 16**i * B`` for ``1 <= j <= 8`` and ``0 <= i < 64``.

    Multiplication by a scalar uses its signed radix-16 expansion, needing
    one table lookup and one addition per digit and no doublings.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: list[list[RistrettoPoint]]) -> None:
        self._rows = rows

    @classmethod
    def create(cls, basepoint: RistrettoPoint) -> RistrettoBasepointTable:
        """Build the table of multiples of ``basepoint``."""
        if not isinstance(basepoint, RistrettoPoint):
            raise TypeError("a basepoint table is built from a RistrettoPoint")
        rows: list[list[RistrettoPoint]] = []
        base = basepoint
        for _ in range(_ROWS):
            row = [base]
            for _ in range(_COLUMNS - 1):
                row.append(row[-1] + base)
            rows.append(row)
            # 16 * base = 2 * (8 * base)
            base = row[-1] + row[-1]
        return cls(rows)

    def basepoint(self) -> RistrettoPoint:
        """Return the point the table was built from."""
        return self._rows[0][0]

    def mul(self, scalar: Scalar) -> RistrettoPoint:
        """Return ``scalar * B``."""
        if not isinstance(scalar, Scalar):
            raise TypeError("a basepoint table is multiplied by a Scalar")
        acc = RistrettoPoint.identity()
        for row, digit in zip(self._rows, to_radix_16(scalar)):
            if digit > 0:
                acc = acc + row[digit - 1]
            elif digit < 0:
                acc = acc - row[-digit - 1]
        return acc

    def __mul__(self, other: object) -> RistrettoPoint:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"RistrettoBasepointTable({self.basepoint()!r})"