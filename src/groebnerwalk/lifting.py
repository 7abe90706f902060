# src/groebnerwalk/lifting.py

"""
Lifting a Gröbner basis of an initial ideal back to the ideal, and
interreduction.

If ``G`` is a Gröbner basis for the old order and ``H`` a Gröbner basis of the
initial ideal ``in_w(G)`` for the new order, then

    { h - NF_G(h) : h in H }

is a Gröbner basis of the original ideal for the new order
(Collart, Kalkbrener & Mall; Fukuda, Jensen, Lauritzen & Thomas).
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from sympy.polys.rings import PolyElement, PolyRing

from .algebra.engine import GroebnerEngine
from .algebra.ideal import Ideal
from .algebra.orders import change_ring, leading_term

__all__ = [
    "lift",
    "reduce_walk",
    "lift_generic",
    "interreduce",
    "interreduce_generic",
]


def lift(G: Ideal, H: Ideal, ring: PolyRing, engine: GroebnerEngine) -> Ideal:
    """
    Lift ``H`` (a basis of the initial ideal, in any ring on the same symbols)
    to a basis of ``G``'s ideal in ``ring``. The normal form is taken in
    ``G``'s own ring; the result is flagged as a Gröbner basis.
    """
    G = G.as_groebner()
    lifted = []
    for h in H.gens:
        nf = engine.normal_form(change_ring(h, G.ring), G)
        lifted.append(change_ring(h, ring) - change_ring(nf, ring))
    return Ideal(ring, lifted, is_gb=True)


def _divisor(monom, leads) -> Optional[int]:
    for i, (lm, _) in enumerate(leads):
        if lm is not None and all(a >= b for a, b in zip(monom, lm)):
            return i
    return None


def reduce_walk(p: PolyElement, gens: Sequence[PolyElement], leads: Sequence[PolyElement]) -> PolyElement:
    """
    Fully reduce ``p`` modulo ``gens`` where ``leads[i]`` is taken as the
    leading term of ``gens[i]`` regardless of the ring's order.
    """
    ring = p.ring
    domain = ring.domain
    heads = [(lm.LM, lm.LC) if lm else (None, None) for lm in leads]
    p = p.copy()
    while p:
        for monom, coeff in p.terms():
            i = _divisor(monom, heads)
            if i is not None:
                break
        else:
            return p
        lm, lc = heads[i]
        shift = tuple(a - b for a, b in zip(monom, lm))
        q = ring.from_dict({shift: domain.quo(coeff, lc)})
        p = p - q * change_ring(gens[i], ring)
    return p


def lift_generic(
    gens: Sequence[PolyElement],
    leads: Sequence[PolyElement],
    H: Ideal,
) -> Tuple[List[PolyElement], List[PolyElement]]:
    """
    Lift for the generic walk: ``(h - reduce_walk(h, gens, leads))`` for each
    ``h`` of ``H``, together with the new leading terms (those of ``H``).
    """
    lifted = [h - reduce_walk(h, gens, leads) for h in H.gens]
    return lifted, [leading_term(h) for h in H.gens]


def interreduce(G: Ideal, engine: GroebnerEngine) -> Ideal:
    """
    Replace every generator by its normal form modulo all the other
    (already processed) generators. Zero generators are dropped.
    """
    gens = list(G.gens)
    for i in range(len(gens)):
        others = G.with_gens(gens[:i] + gens[i + 1:], is_gb=True)
        gens[i] = engine.normal_form(gens[i], others)
    return G.with_gens([g for g in gens if g], is_gb=G.is_gb)


def interreduce_generic(gens: Sequence[PolyElement], leads: Sequence[PolyElement]) -> List[PolyElement]:
    """Positional variant of :func:`interreduce` using the prescribed leading terms."""
    gens = list(gens)
    for i in range(len(gens)):
        gens[i] = reduce_walk(gens[i], gens[:i] + gens[i + 1:], list(leads[:i]) + list(leads[i + 1:]))
    return gens
