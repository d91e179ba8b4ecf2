"""Batch operations on scalars: batch inversion, sums and products."""

from __future__ import annotations

from functools import reduce
from typing import Iterable

from ristrettox.scalar import Scalar


def batch_invert(inputs: Iterable[Scalar]) -> tuple[list[Scalar], Scalar]:
    """Invert every scalar using a single modular inversion.

    Returns the list of inverses, in input order, and the product of all
    the inverses. Every input must be nonzero; a zero input raises
    ValueError. An empty input gives an empty list and the scalar one.
    """
    scalars = list(inputs)
    prefixes: list[Scalar] = []
    acc = Scalar.one()
    for scalar in scalars:
        prefixes.append(acc)
        acc = acc * scalar
    if acc == Scalar.zero():
        raise ValueError("batch_invert requires all inputs to be nonzero")

    acc = acc.invert()
    product_of_inverses = acc

    inverses: list[Scalar] = []
    for scalar, prefix in zip(reversed(scalars), reversed(prefixes)):
        inverses.append(acc * prefix)
        acc = acc * scalar
    inverses.reverse()
    return inverses, product_of_inverses


def scalar_sum(scalars: Iterable[Scalar]) -> Scalar:
    """Return the sum of the scalars modulo the group order; zero when empty."""
    return reduce(lambda acc, item: acc + item, scalars, Scalar.zero())


def scalar_product(scalars: Iterable[Scalar]) -> Scalar:
    """Return the product of the scalars modulo the group order; one when empty."""
    return reduce(lambda acc, item: acc * item, scalars, Scalar.one())