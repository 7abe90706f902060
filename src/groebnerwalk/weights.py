# src/groebnerwalk/weights.py

"""
Weight-vector arithmetic for the walk.

Weights are tuples of Python ints, so products and perturbations never wrap
around. Rational points on a segment are ``fractions.Fraction``; the canonical
integer weight of a ray is produced by :func:`normalize_bounding`.

``INT32_LIMIT`` is the largest entry a weight may have before the walk tries
to shrink it (see :func:`truncate_weight`); the bound mirrors the int32 weight
entries of classical computer-algebra ring orders.
"""

from __future__ import annotations

from fractions import Fraction
from functools import reduce
from math import gcd, lcm
from typing import List, NamedTuple, Sequence, Tuple

from sympy.polys.rings import PolyElement

from .algebra.ideal import Ideal
from .algebra.orders import matrix_rows
from .errors import DimensionMismatch

__all__ = [
    "INT32_LIMIT",
    "Weight",
    "Truncation",
    "dot",
    "normalize_bounding",
    "exceeds_limit",
    "truncate_weight",
    "total_degree",
    "max_total_degree",
    "perturbed_vector",
    "representation_vector",
]

INT32_LIMIT = 2**31 - 1

Weight = Tuple[int, ...]


class Truncation(NamedTuple):
    """Outcome of :func:`truncate_weight`."""
    weight: Weight
    preserved: bool


def dot(v: Sequence, w: Sequence):
    if len(v) != len(w):
        raise DimensionMismatch(f"cannot take dot product of lengths {len(v)} and {len(w)}")
    return sum(a * b for a, b in zip(v, w))


def normalize_bounding(w: Sequence) -> Weight:
    """
    Integer representative of the ray through ``w`` with no common factor.

    Accepts ints and Fractions. The all-zero vector is returned unchanged.

    >>> normalize_bounding([4, 2, 6])
    (2, 1, 3)
    >>> normalize_bounding([Fraction(1), Fraction(1, 2)])
    (2, 1)
    """
    fr = [Fraction(c) for c in w]
    den = reduce(lcm, (f.denominator for f in fr), 1)
    ints = [int(f * den) for f in fr]
    g = reduce(gcd, ints, 0) or 1
    return tuple(c // g for c in ints)


def exceeds_limit(w: Sequence[int], limit: int = INT32_LIMIT) -> bool:
    return any(abs(c) > limit for c in w)


def truncate_weight(
    G: Ideal,
    w: Sequence[int],
    initials: Sequence[PolyElement],
    *,
    factor: Fraction = Fraction(1, 10),
    limit: int = INT32_LIMIT,
) -> Truncation:
    """
    Shrink ``w`` below ``limit`` while it selects the same initial forms.

    Each round multiplies by ``factor``, rounds half-to-even and renormalizes.
    As soon as the initial forms of ``G`` at the shrunk weight differ from
    ``initials`` the last weight is returned with ``preserved=False``.
    """
    from .initials import initial_forms

    expected = [dict(p) for p in initials]
    w = tuple(w)
    while exceeds_limit(w, limit):
        w = normalize_bounding([round(c * factor) for c in w])
        if [dict(p) for p in initial_forms(G.ring, G.gens, w)] != expected:
            return Truncation(w, False)
    return Truncation(w, True)


def total_degree(p: PolyElement) -> int:
    return max((sum(m) for m in p.monoms()), default=0)


def max_total_degree(G: Ideal) -> int:
    return max((total_degree(g) for g in G.gens), default=0)


def perturbed_vector(G: Ideal, M, p: int) -> Weight:
    """
    The ``p``-perturbed weight of the order matrix ``M``.

    With ``m_i`` the largest absolute entry of row ``i`` and ``e`` one more
    than the maximal total degree of ``G`` times ``m_2 + ... + m_p``, the
    result is ``e^(p-1) M_1 + e^(p-2) M_2 + ... + M_p`` (normalized). Its
    initial forms refine those of ``M_1`` by the next ``p - 1`` rows.
    """
    rows = matrix_rows(M)
    if not 1 <= p <= len(rows):
        raise ValueError(f"perturbation degree must be in 1..{len(rows)}, got {p}")
    m: List[int] = []
    for row in rows[:p]:
        m.append(max([row[0]] + [abs(c) for c in row]))
    e = max_total_degree(G) * sum(m[1:p]) + 1
    w = [0] * len(rows[0])
    for i in range(p):
        scale = e ** (p - 1 - i)
        w = [a + scale * b for a, b in zip(w, rows[i])]
    return normalize_bounding(w)


def representation_vector(G: Ideal, T) -> Weight:
    """
    Tran's representation vector of the order ``T``.

    A single weight whose initial forms on ``G`` agree with the leading terms
    under ``T``; used when ``T``'s first row lies on several cones.
    """
    rows = matrix_rows(T)
    n = len(rows)
    M = max([0] + [c for row in rows for c in row])
    d0 = max_total_degree(G)
    d = M * (2 * d0**2 + (n + 1) * d0)
    w = [0] * len(rows[0])
    for i in range(n):
        scale = d ** (n - 1 - i)
        w = [a + scale * b for a, b in zip(w, rows[i])]
    return normalize_bounding(w)
