# src/groebnerwalk/initials.py

from __future__ import annotations

from typing import List, Sequence

from sympy.polys.rings import PolyElement, PolyRing

from .weights import dot

__all__ = [
    "initial_forms",
    "is_monomial_ideal",
    "is_binomial_or_simpler",
    "in_several_cones",
]


def initial_forms(ring: PolyRing, gens: Sequence[PolyElement], w: Sequence[int]) -> List[PolyElement]:
    """
    Initial forms of ``gens`` w.r.t. the weight ``w``, built in ``ring``.

    Every term attaining the maximal weight is kept, so ties are never broken
    by the ring order. Output position ``i`` belongs to ``gens[i]``.
    """
    out: List[PolyElement] = []
    for g in gens:
        best = None
        terms = {}
        for monom, coeff in g.items():
            val = dot(w, monom)
            if best is None or val > best:
                best = val
                terms = {monom: coeff}
            elif val == best:
                terms[monom] = coeff
        out.append(ring.from_dict(terms) if terms else ring.zero)
    return out


def is_monomial_ideal(forms: Sequence[PolyElement]) -> bool:
    return all(len(f) <= 1 for f in forms)


def is_binomial_or_simpler(forms: Sequence[PolyElement]) -> bool:
    return all(len(f) <= 2 for f in forms)


def in_several_cones(forms: Sequence[PolyElement]) -> bool:
    """
    True if the weight behind ``forms`` lies on the boundary of several cones:
    some initial form has more than two terms, or more than one is a binomial.
    """
    binomials = 0
    for f in forms:
        if len(f) > 2:
            return True
        if len(f) == 2:
            binomials += 1
    return binomials > 1
