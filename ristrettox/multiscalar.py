"""Multiscalar multiplication on the Ristretto group."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ristrettox.naf import non_adjacent_form
from ristrettox.ristretto import RistrettoPoint
from ristrettox.scalar import Scalar

_DYNAMIC_NAF_WIDTH = 5
_STATIC_NAF_WIDTH = 8


def _odd_multiples(point: RistrettoPoint, count: int) -> list[RistrettoPoint]:
    """Return [P, 3P, 5P, ...] with ``count`` entries."""
    double = point + point
    table = [point]
    for _ in range(count - 1):
        table.append(table[-1] + double)
    return table


def _check_lengths(scalars: Sequence[Scalar], points: Sequence[object]) -> None:
    if len(scalars) != len(points):
        raise ValueError(
            f"got {len(scalars)} scalars but {len(points)} points; the counts must match"
        )


def _vartime_straus(terms: list[tuple[list[int], list[RistrettoPoint]]]) -> RistrettoPoint:
    """Sum NAF-expanded scalars against tables of odd multiples."""
    top = max(
        (i for naf, _ in terms for i, digit in enumerate(naf) if digit),
        default=-1,
    )
    acc = RistrettoPoint.identity()
    for i in range(top, -1, -1):
        acc = acc + acc
        for naf, table in terms:
            digit = naf[i]
            if digit > 0:
                acc = acc + table[digit // 2]
            elif digit < 0:
                acc = acc - table[-digit // 2]
    return acc


def multiscalar_mul(
    scalars: Iterable[Scalar], points: Iterable[RistrettoPoint]
) -> RistrettoPoint:
    """Return c_1 P_1 + ... + c_n P_n with a fixed 4-bit window schedule.

    The two iterables must have the same length.
    """
    scalars = list(scalars)
    points = list(points)
    _check_lengths(scalars, points)

    tables = []
    for point in points:
        table = [RistrettoPoint.identity()]
        for _ in range(15):
            table.append(table[-1] + point)
        tables.append(table)

    acc = RistrettoPoint.identity()
    for window in range(63, -1, -1):
        for _ in range(4):
            acc = acc + acc
        for scalar, table in zip(scalars, tables):
            acc = acc + table[(scalar.value >> (4 * window)) & 15]
    return acc


def optional_multiscalar_mul(
    scalars: Iterable[Scalar], points: Iterable[Optional[RistrettoPoint]]
) -> Optional[RistrettoPoint]:
    """Return c_1 P_1 + ... + c_n P_n, or None if any point is None."""
    scalars = list(scalars)
    points = list(points)
    _check_lengths(scalars, points)
    if any(point is None for point in points):
        return None
    return _vartime_straus(
        [
            (non_adjacent_form(scalar, _DYNAMIC_NAF_WIDTH), _odd_multiples(point, 8))
            for scalar, point in zip(scalars, points)
        ]
    )


def vartime_multiscalar_mul(
    scalars: Iterable[Scalar], points: Iterable[RistrettoPoint]
) -> RistrettoPoint:
    """Return c_1 P_1 + ... + c_n P_n in variable time."""
    result = optional_multiscalar_mul(scalars, list(points))
    if result is None:
        raise ValueError("points must not be None")
    return result


def vartime_double_scalar_mul_basepoint(
    a: Scalar, point: RistrettoPoint, b: Scalar
) -> RistrettoPoint:
    """Return a*A + b*B in variable time, B being the Ristretto basepoint."""
    return vartime_multiscalar_mul([a, b], [point, RistrettoPoint.basepoint()])


class VartimeRistrettoPrecomputation:
    """Precomputed tables for variable-time multiscalar multiplication.

    The static points given at construction have tables of odd multiples
    built once; dynamic points are expanded at each call.
    """

    def __init__(self, static_points: Iterable[RistrettoPoint]) -> None:
        self._tables = [_odd_multiples(point, 64) for point in static_points]

    def __len__(self) -> int:
        return len(self._tables)

    def vartime_multiscalar_mul(self, static_scalars: Iterable[Scalar]) -> RistrettoPoint:
        """Return b_1 B_1 + ... + b_m B_m over the static points."""
        return self.vartime_mixed_multiscalar_mul(static_scalars, [], [])

    def vartime_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[Scalar],
        dynamic_scalars: Iterable[Scalar],
        dynamic_points: Iterable[RistrettoPoint],
    ) -> RistrettoPoint:
        """Return the sum over static and dynamic points; no point may be None."""
        result = self.optional_mixed_multiscalar_mul(
            static_scalars, dynamic_scalars, list(dynamic_points)
        )
        if result is None:
            raise ValueError("dynamic points must not be None")
        return result

    def optional_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[Scalar],
        dynamic_scalars: Iterable[Scalar],
        dynamic_points: Iterable[Optional[RistrettoPoint]],
    ) -> Optional[RistrettoPoint]:
        """Return a_1 A_1 + ... + a_n A_n + b_1 B_1 + ... + b_m B_m.

        Returns None if any dynamic point is None.
        """
        static_scalars = list(static_scalars)
        dynamic_scalars = list(dynamic_scalars)
        dynamic_points = list(dynamic_points)
        _check_lengths(static_scalars, self._tables)
        _check_lengths(dynamic_scalars, dynamic_points)
        if any(point is None for point in dynamic_points):
            return None

        terms = [
            (non_adjacent_form(scalar, _STATIC_NAF_WIDTH), table)
            for scalar, table in zip(static_scalars, self._tables)
        ]
        terms.extend(
            (non_adjacent_form(scalar, _DYNAMIC_NAF_WIDTH), _odd_multiples(point, 8))
            for scalar, point in zip(dynamic_scalars, dynamic_points)
        )
        return _vartime_straus(terms)