# src/groebnerwalk/cones.py

"""
Gröbner-cone geometry of a basis.

The cone of a reduced Gröbner basis ``G`` is cut out by the difference
vectors ``lead(g) - e`` (``e`` a non-leading exponent of ``g``): a weight ``w``
selects the same leading terms iff ``w·v > 0`` for all of them. Walking from
``cw`` to ``tw`` leaves the cone at the first ``t`` where some ``(cw + t(tw-cw))·v``
vanishes:

    t = cw·v / (cw·v - tw·v)      over all v with tw·v < 0.
"""

from __future__ import annotations

from fractions import Fraction
from typing import List, Optional, Sequence

from sympy.polys.rings import PolyElement

from .algebra.ideal import Ideal
from .algebra.orders import change_order, change_ring
from .initials import initial_forms
from .weights import Weight, dot, normalize_bounding

__all__ = [
    "difference_vectors",
    "difference_vectors_generic",
    "in_cone",
    "same_cone",
    "next_weight",
    "next_weight_fractal",
]


def _unique(vectors) -> List[Weight]:
    return list(dict.fromkeys(vectors))


def difference_vectors(G: Ideal) -> List[Weight]:
    """Deduplicated ``lead - tail`` exponent differences of ``G``'s generators."""
    out = []
    for g in G.gens:
        if not g:
            continue
        lead = g.LM
        for e in g.monoms():
            if e != lead:
                out.append(tuple(a - b for a, b in zip(lead, e)))
    return _unique(out)


def difference_vectors_generic(gens: Sequence[PolyElement], leads: Sequence[PolyElement]) -> List[Weight]:
    """Same as :func:`difference_vectors` with the leading exponent of ``gens[i]`` taken from ``leads[i]``."""
    out = []
    for g, lm in zip(gens, leads):
        if not lm:
            continue
        lead = lm.LM
        for e in g.monoms():
            if e != lead:
                out.append(tuple(a - b for a, b in zip(lead, e)))
    return _unique(out)


def in_cone(G: Ideal, T, *weights: Sequence[int]) -> bool:
    """
    True iff, under the order ``T``, every generator's leading exponent equals
    the leading exponent of its initial form at each of ``weights``.
    """
    R = change_order(G.ring, T)
    gens = [change_ring(g, R) for g in G.gens]
    for w in weights:
        for g, ing in zip(gens, initial_forms(R, gens, w)):
            if g and g.LM != ing.LM:
                return False
    return True


def same_cone(G: Ideal, T) -> bool:
    """True iff ``G`` has the same leading exponents under ``T`` as under its own order."""
    R = change_order(G.ring, T)
    for g in G.gens:
        if g and change_ring(g, R).LM != g.LM:
            return False
    return True


def _min_ratio(cw: Sequence[int], tw: Sequence[int], vectors) -> Fraction:
    tmin = Fraction(1)
    for v in vectors:
        tdotw = dot(tw, v)
        if tdotw < 0:
            cdotw = dot(cw, v)
            if cdotw == tdotw:
                continue
            t = Fraction(cdotw, cdotw - tdotw)
            if t < tmin:
                tmin = t
    return tmin


def next_weight(G: Ideal, cw: Sequence[int], tw: Sequence[int]) -> Weight:
    """
    The first point of the segment ``cw -> tw`` on the boundary of ``G``'s cone,
    as a normalized integer weight; ``tw`` (normalized) if no facet is hit.
    """
    t = _min_ratio(cw, tw, difference_vectors(G))
    return normalize_bounding([c + t * (d - c) for c, d in zip(cw, tw)])


def next_weight_fractal(G: Ideal, cw: Sequence[int], tw: Sequence[int]) -> Optional[Fraction]:
    """
    Interpolation parameter of the next facet on ``cw -> tw``.

    Returns ``None`` when there is nothing left to walk at this depth (the
    weights coincide or ``G`` has no difference vectors), ``Fraction(1)`` when
    the target is reached without crossing a facet.
    """
    if tuple(cw) == tuple(tw):
        return None
    vectors = difference_vectors(G)
    if not vectors:
        return None
    return _min_ratio(cw, tw, vectors)
