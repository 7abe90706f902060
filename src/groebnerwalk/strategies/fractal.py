# src/groebnerwalk/strategies/fractal.py

"""
Fractal walk (Amrhein & Gloor) and its extensions.

At depth ``p`` the walk heads for the ``p``-perturbed target weight. Instead
of computing the basis of an initial ideal directly, the initial ideal is
walked recursively at depth ``p + 1``; only at depth ``n`` (or, with look
ahead, when the initial forms are at most binomials) the engine is asked.

Variants
--------
fractal
    Perturbs the target only.
fractal_start_order
    Also perturbs the start weight when its initial forms are not monomials.
fractal_lex
    Skips the top-level conversion at the target weight and recurses right
    away (meant for a lexicographic target).
fractal_look_ahead
    Converts binomial initial ideals at once.
fractal_combined
    All of the above.

Perturbed target and start weights live in the :class:`WalkContext`; a
re-perturbation at any depth is visible to every other depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import List, Sequence

from ..algebra.ideal import Ideal
from ..algebra.orders import change_order, change_ring, matrix_rows
from ..cones import in_cone, next_weight_fractal, same_cone
from ..initials import initial_forms, is_binomial_or_simpler, is_monomial_ideal
from ..lifting import interreduce, lift
from ..weights import Weight, exceeds_limit, normalize_bounding, perturbed_vector, truncate_weight
from .base import WalkContext

__all__ = [
    "FractalVariant",
    "FRACTAL",
    "FRACTAL_START_ORDER",
    "FRACTAL_LEX",
    "FRACTAL_LOOK_AHEAD",
    "FRACTAL_COMBINED",
    "fractal_walk",
]


@dataclass(frozen=True)
class FractalVariant:
    name: str
    perturb_start: bool = False
    skip_lex_step: bool = False
    look_ahead: bool = False


FRACTAL = FractalVariant("fractal_walk")
FRACTAL_START_ORDER = FractalVariant("fractal_walk_start_order", perturb_start=True)
FRACTAL_LEX = FractalVariant("fractal_walk_lex", skip_lex_step=True)
FRACTAL_LOOK_AHEAD = FractalVariant("fractal_walk_look_ahead", look_ahead=True)
FRACTAL_COMBINED = FractalVariant("fractal_walk_combined", perturb_start=True, skip_lex_step=True, look_ahead=True)


def _perturbed_weights(G: Ideal, M) -> List[Weight]:
    return [perturbed_vector(G, M, i) for i in range(1, G.nvars + 1)]


def _targets_in_cone(G: Ideal, ctx: WalkContext, p: int) -> bool:
    weights = [ctx.target_weights[p - 1]]
    if p > 1:
        weights.append(ctx.target_weights[p - 2])
    return in_cone(G, ctx.target, *weights)


def _reperturb(G: Ideal, ctx: WalkContext, p: int) -> bool:
    """Recompute the perturbed targets from ``G``; False if nothing changed."""
    old = ctx.target_weights
    ctx.target_weights = _perturbed_weights(G, ctx.target)
    ctx.reporter.depth(p, "not in cone", ctx.target_weights[p - 1])
    return ctx.target_weights != old


def fractal_walk(G: Ideal, ctx: WalkContext, variant: FractalVariant = FRACTAL) -> Ideal:
    ctx.reporter.header(variant.name)
    ctx.target_weights = _perturbed_weights(G, ctx.target)
    ctx.start_weights = []
    ctx.first_step_mode = False
    start = normalize_bounding(matrix_rows(ctx.start)[0])
    return _fractal_recursive(G, start, 1, ctx, variant)


def _fractal_recursive(G: Ideal, currweight: Sequence[int], p: int, ctx: WalkContext, variant: FractalVariant) -> Ideal:
    G = G.as_groebner()
    R = G.ring
    T = ctx.target
    n = G.nvars
    currweight = tuple(currweight)

    if variant.perturb_start and p == 1:
        if not is_monomial_ideal(initial_forms(R, G.gens, currweight)):
            ctx.start_weights = _perturbed_weights(G, ctx.start)
            ctx.first_step_mode = True
    if variant.perturb_start and ctx.first_step_mode:
        w = ctx.start_weights[p - 1]
    else:
        w = currweight

    converted_in_place = False
    while True:
        target = ctx.target_weights[p - 1]
        t = next_weight_fractal(G, w, target)

        if t is None:
            at_top = p == 1
            if _targets_in_cone(G, ctx, p) and (not at_top or same_cone(G, T)):
                ctx.reporter.depth(p, "in cone", target)
                return G
            if at_top and not converted_in_place and not same_cone(G, T):
                # start and target share the top weight: convert at w itself
                converted_in_place = True
                t = Fraction(0)
            elif not _reperturb(G, ctx, p):
                return ctx.target_fallback(G)
            else:
                continue

        if t == 1 and p != 1 and same_cone(G, T):
            ctx.reporter.depth(p, "in cone", currweight)
            if not _targets_in_cone(G, ctx, p):
                _reperturb(G, ctx, p)
            return G

        if variant.skip_lex_step and t == 1 and p == 1 and p < n:
            ctx.reporter.depth(p, "recursive call", target)
            return _fractal_recursive(G, w, p + 1, ctx, variant)

        w = normalize_bounding([a + t * (b - a) for a, b in zip(w, target)])
        Gw = initial_forms(R, G.gens, w)

        if exceeds_limit(w, ctx.limit):
            trunc = truncate_weight(G, w, Gw, factor=ctx.config.truncation_factor, limit=ctx.limit)
            if not trunc.preserved:
                G = ctx.target_fallback(G)
                if not _targets_in_cone(G, ctx, p):
                    _reperturb(G, ctx, p)
                return G
            w = trunc.weight

        Rn = change_order(R, T, (w,))
        if p == n or (variant.look_ahead and is_binomial_or_simpler(Gw)):
            H = ctx.engine.groebner_basis(Ideal(Rn, [change_ring(g, Rn) for g in Gw]), complete_reduction=True)
            ctx.reporter.depth(p, "conversion", w)
            ctx.raise_counter()
        else:
            ctx.reporter.depth(p, "recursive call", w)
            H = _fractal_recursive(Ideal(R, Gw), currweight, p + 1, ctx, variant)
            ctx.first_step_mode = False

        G = interreduce(lift(G, H, Rn, ctx.engine), ctx.engine)
        R = Rn
        currweight = w
