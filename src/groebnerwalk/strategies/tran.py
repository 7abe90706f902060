# src/groebnerwalk/strategies/tran.py

"""
Tran's degenerate-case walk.

Starts from a perturbed start weight when the start order's first row does
not pick monomial initial forms, and replaces the target weight by a
representation vector of ``T`` when it lies on the boundary of several cones.
Weights over the limit are truncated; if that changes the initial forms the
walk finishes with a direct computation in the target order.
"""

from __future__ import annotations

from ..algebra.ideal import Ideal
from ..algebra.orders import matrix_rows
from ..cones import next_weight, same_cone
from ..initials import in_several_cones, initial_forms, is_monomial_ideal
from ..weights import exceeds_limit, normalize_bounding, perturbed_vector, truncate_weight
from .base import WalkContext
from .standard import standard_step

__all__ = ["tran_walk"]


def tran_walk(G: Ideal, ctx: WalkContext) -> Ideal:
    ctx.reporter.header("tran_walk")
    S, T = ctx.start, ctx.target
    cfg = ctx.config

    currweight = normalize_bounding(matrix_rows(S)[0])
    tarweight = normalize_bounding(matrix_rows(T)[0])
    if not is_monomial_ideal(initial_forms(G.ring, G.gens, currweight)):
        currweight = perturbed_vector(G, S, G.nvars)
        ctx.reporter.note("perturbed start weight", currweight)

    converted_at = None
    while True:
        w = next_weight(G, currweight, tarweight)
        reached = w == tarweight

        if exceeds_limit(w, ctx.limit):
            forms = initial_forms(G.ring, G.gens, w)
            trunc = truncate_weight(G, w, forms, factor=cfg.truncation_factor, limit=ctx.limit)
            if not trunc.preserved:
                return ctx.target_fallback(G)
            w = trunc.weight

        if reached:
            if same_cone(G, T):
                return G
            if in_several_cones(initial_forms(G.ring, G.gens, w)):
                rep = normalize_bounding(cfg.representation(G, T))
                if rep != tarweight:
                    tarweight = rep
                    ctx.reporter.note("representation vector", tarweight)
                    continue
            if w == converted_at:
                # already converted at this weight without reaching T's cone
                return ctx.target_fallback(G)

        G = standard_step(G, w, T, ctx, check_limit=False)
        ctx.reporter.step(w, G)
        ctx.raise_counter()
        converted_at = currweight = w
