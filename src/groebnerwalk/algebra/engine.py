# src/groebnerwalk/algebra/engine.py

from __future__ import annotations

from sympy.polys.groebnertools import groebner as _sympy_groebner
from sympy.polys.rings import PolyElement

from ..errors import EngineFailure
from .ideal import Ideal

__all__ = ["GroebnerEngine", "SymPyEngine", "default_engine"]


class GroebnerEngine:
    """
    Basis and normal-form computations the walk relies on.

    Both calls are plain function calls; a failing call fails the walk.
    """

    def groebner_basis(self, ideal: Ideal, complete_reduction: bool = True) -> Ideal:  # pragma: no cover - abstract
        raise NotImplementedError

    def normal_form(self, p: PolyElement, basis: Ideal) -> PolyElement:  # pragma: no cover - abstract
        raise NotImplementedError


class SymPyEngine(GroebnerEngine):
    """
    Buchberger's algorithm and multivariate division from ``sympy.polys``.

    SymPy always returns the reduced (monic, interreduced) basis, so
    ``complete_reduction`` is satisfied either way.
    """

    def __init__(self, method: str = "buchberger") -> None:
        if method not in {"buchberger", "f5b"}:
            raise ValueError("method must be 'buchberger' or 'f5b'")
        self.method = method

    def groebner_basis(self, ideal: Ideal, complete_reduction: bool = True) -> Ideal:
        polys = [g for g in ideal.gens if g]
        if not polys:
            return ideal.with_gens((), is_gb=True)
        try:
            G = _sympy_groebner(polys, ideal.ring, method=self.method)
        except Exception as exc:
            raise EngineFailure(f"Gröbner basis computation failed: {exc}") from exc
        if not G:
            raise EngineFailure("engine returned an empty basis for a non-zero ideal")
        return Ideal(ideal.ring, [g.set_ring(ideal.ring) for g in G], is_gb=True)

    def normal_form(self, p: PolyElement, basis: Ideal) -> PolyElement:
        divisors = [g for g in basis.gens if g]
        if not p or not divisors:
            return p.copy()
        try:
            return p.rem(divisors)
        except Exception as exc:
            raise EngineFailure(f"normal form computation failed: {exc}") from exc


def default_engine() -> GroebnerEngine:
    return SymPyEngine()
