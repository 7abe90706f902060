# src/groebnerwalk/strategies/generic.py

"""
Generic Gröbner walk (Fukuda, Jensen, Lauritzen & Thomas).

Instead of weight vectors the walk moves between cones by facet normals. The
basis always lives in the ring of the target order; the leading terms of the
current cone are kept in a separate, position-aligned list.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from sympy.polys.rings import PolyElement

from ..algebra.ideal import Ideal
from ..algebra.orders import change_order, change_ring, leading_term, matrix_rows
from ..cones import difference_vectors_generic
from ..lifting import interreduce_generic, lift_generic
from ..weights import Weight, dot
from .base import WalkContext

__all__ = [
    "generic_walk",
    "generic_step",
    "next_gamma",
    "facet_initials",
    "bigger_than_zero",
    "less_than_zero",
    "less_facet",
    "is_parallel",
]


def _first_nonzero(M, v: Sequence[int]) -> int:
    for row in matrix_rows(M):
        d = dot(row, v)
        if d != 0:
            return d
    return 0


def bigger_than_zero(M, v: Sequence[int]) -> bool:
    """``v`` is positive under the order ``M`` (first non-zero row product > 0)."""
    return _first_nonzero(M, v) > 0


def less_than_zero(M, v: Sequence[int]) -> bool:
    return _first_nonzero(M, v) < 0


def less_facet(u: Sequence[int], v: Sequence[int], S, T) -> bool:
    """
    Facet order of the generic walk: ``u`` comes before ``v`` when, for the
    first pair of rows ``(T_i, S_j)`` where they differ,
    ``(T_i·u)(S_j·v) < (T_i·v)(S_j·u)``.
    """
    srows = matrix_rows(S)
    for trow in matrix_rows(T):
        tu, tv = dot(trow, u), dot(trow, v)
        for srow in srows:
            a = tu * dot(srow, v)
            b = tv * dot(srow, u)
            if a != b:
                return a < b
    return False


def is_parallel(u: Sequence[int], v: Sequence[int]) -> bool:
    """True iff ``u`` is a non-zero rational multiple of ``v``."""
    if len(u) != len(v) or not any(u) or not any(v):
        return False
    i = next(k for k, c in enumerate(v) if c != 0)
    # u == (u[i]/v[i]) * v, compared without division
    return all(a * v[i] == b * u[i] for a, b in zip(u, v))


def next_gamma(
    gens: Sequence[PolyElement],
    leads: Sequence[PolyElement],
    prev: Optional[Weight],
    S,
    T,
) -> Optional[Weight]:
    """
    The next facet normal to cross, or ``None`` when the target cone is reached.

    Candidates are difference vectors that are ``S``-positive and
    ``T``-negative; after the first step only those strictly after ``prev``
    remain. The ``less_facet``-minimal candidate is returned.
    """
    V = [v for v in difference_vectors_generic(gens, leads)
         if bigger_than_zero(S, v) and less_than_zero(T, v)]
    if prev is not None:
        V = [v for v in V if less_facet(prev, v, S, T)]
    if not V:
        return None
    best = V[0]
    for v in V[1:]:
        if less_facet(v, best, S, T):
            best = v
    return best


def facet_initials(gens: Sequence[PolyElement], leads: Sequence[PolyElement], v: Sequence[int]) -> List[PolyElement]:
    """Each generator's lead term plus the terms whose difference to it is parallel to ``v``."""
    out = []
    for g, lm in zip(gens, leads):
        lead = lm.LM
        terms = {}
        for e, c in g.items():
            if e == lead or is_parallel(tuple(a - b for a, b in zip(lead, e)), v):
                terms[e] = c
        out.append(g.ring.from_dict(terms))
    return out


def generic_step(gens, leads, v: Sequence[int], ctx: WalkContext):
    ring = gens[0].ring
    facet = facet_initials(gens, leads, v)
    H = ctx.engine.groebner_basis(Ideal(ring, facet), complete_reduction=True)
    H, leads = lift_generic(gens, leads, H)
    gens = interreduce_generic(H, leads)
    kept = [(g, lm) for g, lm in zip(gens, leads) if g]
    return [g for g, _ in kept], [lm for _, lm in kept]


def generic_walk(G: Ideal, ctx: WalkContext) -> Ideal:
    ctx.reporter.header("generic_walk", "Crossed Cones with facetNormal:")
    S, T = ctx.start, ctx.target
    Rn = change_order(G.ring, T)
    leads = [change_ring(leading_term(g), Rn) for g in G.gens if g]
    gens = [change_ring(g, Rn) for g in G.gens if g]

    v = next_gamma(gens, leads, None, S, T)
    while v is not None:
        gens, leads = generic_step(gens, leads, v, ctx)
        ctx.reporter.step(v, Ideal(Rn, gens))
        ctx.raise_counter()
        v = next_gamma(gens, leads, v, S, T)
    return Ideal(Rn, gens, is_gb=True)
