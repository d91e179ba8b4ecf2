"""Batch encoding of doubled Ristretto points and sums of points."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable

from ristrettox.field import SQRT_M1, FieldElement
from ristrettox.ristretto import (
    EDWARDS_D,
    INVSQRT_A_MINUS_D,
    CompressedRistretto,
    RistrettoPoint,
)


@dataclass(frozen=True, slots=True)
class _BatchCompressState:
    e: FieldElement
    f: FieldElement
    g: FieldElement
    h: FieldElement
    eg: FieldElement
    fh: FieldElement

    @classmethod
    def from_point(cls, point: RistrettoPoint) -> _BatchCompressState:
        xx = point.x.square()
        yy = point.y.square()
        zz = point.z.square()
        dtt = point.t.square() * EDWARDS_D

        e = point.x * (point.y + point.y)
        f = zz + dtt
        g = yy + xx
        h = zz - dtt
        return cls(e, f, g, h, e * g, f * h)

    def efgh(self) -> FieldElement:
        return self.eg * self.fh

    def encode(self, inv: FieldElement) -> CompressedRistretto:
        z_inv = self.eg * inv
        t_inv = self.fh * inv

        e, g, h = self.e, self.g, self.h
        magic = INVSQRT_A_MINUS_D
        if (self.eg * z_inv).is_negative():
            e, g, h = self.g, -self.e, self.f * SQRT_M1
            magic = SQRT_M1

        g = g.negate_if((h * e * z_inv).is_negative())

        s = (h - g) * (magic * (g * t_inv))
        s = s.negate_if(s.is_negative())
        return CompressedRistretto(s.to_bytes())


def double_and_compress_batch(points: Iterable[RistrettoPoint]) -> list[CompressedRistretto]:
    """Return the encodings of [2]P for every point P, with one field inversion.

    Points whose double is the identity have no batch encoding and make the
    batch inversion fail with ValueError.
    """
    states = [_BatchCompressState.from_point(point) for point in points]
    inverses = FieldElement.batch_invert(state.efgh() for state in states)
    return [state.encode(inv) for state, inv in zip(states, inverses)]


def ristretto_sum(points: Iterable[RistrettoPoint]) -> RistrettoPoint:
    """Return the sum of the points; the identity when there are none."""
    return reduce(lambda acc, item: acc + item, points, RistrettoPoint.identity())