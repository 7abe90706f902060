# src/groebnerwalk/strategies/standard.py

"""
Standard walk (Cox, Little & O'Shea) and perturbed walk (Amrhein, Gloor &
Küchlin).

One step at weight ``w``: take the initial forms of ``G`` at ``w``, compute
their reduced basis in the order "``w`` first, then ``T``", lift it back to
the ideal and interreduce. The next ``w`` is the first facet of the new cone
on the segment towards the target weight.
"""

from __future__ import annotations

from typing import Sequence

from ..algebra.ideal import Ideal
from ..algebra.orders import add_weight_vector, change_order, change_ring, matrix_rows
from ..cones import next_weight, same_cone
from ..errors import WeightOverflow
from ..initials import initial_forms
from ..lifting import interreduce, lift
from ..weights import exceeds_limit, normalize_bounding, perturbed_vector, truncate_weight
from .base import WalkContext

__all__ = ["standard_walk", "walk_between", "standard_step", "perturbed_walk"]


def standard_walk(G: Ideal, ctx: WalkContext) -> Ideal:
    ctx.reporter.header("standard_walk")
    start = matrix_rows(ctx.start)[0]
    target = matrix_rows(ctx.target)[0]
    return walk_between(G, ctx.target, start, target, ctx)


def walk_between(G: Ideal, T, currweight: Sequence[int], tarweight: Sequence[int], ctx: WalkContext) -> Ideal:
    """Run standard steps from ``currweight`` until ``tarweight`` has been converted."""
    currweight = normalize_bounding(currweight)
    tarweight = normalize_bounding(tarweight)
    while True:
        G = standard_step(G, currweight, T, ctx)
        ctx.reporter.step(currweight, G)
        ctx.raise_counter()
        if currweight == tarweight:
            return G
        currweight = next_weight(G, currweight, tarweight)


def standard_step(G: Ideal, w: Sequence[int], T, ctx: WalkContext, *, check_limit: bool = True) -> Ideal:
    """
    Convert ``G`` across the cone boundary at ``w``.

    With ``check_limit`` a weight beyond the configured limit is truncated
    first; if no truncation keeps the initial forms, :class:`WeightOverflow`.
    """
    R = G.ring
    if check_limit and exceeds_limit(w, ctx.limit):
        Gw = initial_forms(R, G.gens, w)
        trunc = truncate_weight(G, w, Gw, factor=ctx.config.truncation_factor, limit=ctx.limit)
        if not trunc.preserved:
            raise WeightOverflow(w, ctx.limit)
        Rn = change_order(R, T, (trunc.weight,))
        Gw = [change_ring(g, Rn) for g in Gw]
    else:
        Rn = change_order(R, T, (w,))
        Gw = initial_forms(Rn, G.gens, w)

    H = ctx.engine.groebner_basis(Ideal(Rn, Gw), complete_reduction=True)
    H = lift(G, H, Rn, ctx.engine)
    return interreduce(H, ctx.engine)


def perturbed_walk(G: Ideal, ctx: WalkContext) -> Ideal:
    """
    Standard walk between ``p``-perturbed start and target weights. If the
    result is not yet in the cone of ``T`` the degree drops and the walk
    continues from the previous perturbed target.
    """
    ctx.reporter.header("pertubed_walk")
    T = ctx.target
    p = min(ctx.config.perturbation_degree, G.nvars)
    currweight = perturbed_vector(G, ctx.start, p)
    while True:
        tarweight = perturbed_vector(G, T, p)
        Tn = add_weight_vector(tarweight, T)
        G = walk_between(G, Tn, currweight, tarweight, ctx)
        if same_cone(G, T):
            return G
        p = max(p - 1, 1)
        currweight = tarweight
