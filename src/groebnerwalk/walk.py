# src/groebnerwalk/walk.py

"""
Entry points of the Gröbner walk.

Computes a reduced Gröbner basis of an ideal w.r.t. a target monomial order by
converting a Gröbner basis w.r.t. a start order along the Gröbner fan
(Collart, Kalkbrener & Mall) instead of computing it from scratch.

Strategies
----------
standard
    Cox, Little & O'Shea.
generic
    Fukuda, Jensen, Lauritzen & Thomas.
pertubed (alias perturbed)
    Amrhein, Gloor & Küchlin, with ``perturbation_degree`` ``p``.
tran
    Tran.
fractal, fractal_start_order, fractal_lex, fractal_look_ahead, fractal_combined
    Amrhein & Gloor, plain and with extensions.

Examples
--------
>>> from sympy import QQ
>>> from groebnerwalk import polynomial_ring, groebnerwalk
>>> R, x, y = polynomial_ring("x,y", QQ, "degrevlex")
>>> G = groebnerwalk([y**2 - x, x**2 - y], "degrevlex", "lex")
>>> [g.LM for g in G.gens]
[(1, 0), (0, 4)]
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from sympy.polys.rings import PolyElement

from .algebra.engine import GroebnerEngine, default_engine
from .algebra.ideal import Ideal
from .algebra.orders import OrderSpec, change_order, change_ring, order_from_symbol, validate_order
from .config import WalkConfig
from .errors import UnknownStrategy
from .reporting import WalkReporter
from .strategies import STRATEGIES
from .strategies.base import WalkContext, WalkResult

__all__ = ["run_walk", "groebnerwalk"]

IdealLike = Union[Ideal, Sequence[PolyElement]]


def _as_ideal(ideal: IdealLike) -> Ideal:
    if isinstance(ideal, Ideal):
        I = ideal
    else:
        gens = list(ideal)
        if not gens:
            raise ValueError("cannot infer a ring from an empty list of generators; pass an Ideal")
        I = Ideal(gens[0].ring, gens)
    if not I.ring.domain.is_Field:
        R = I.ring.clone(domain=I.ring.domain.get_field())
        I = Ideal(R, [change_ring(g, R) for g in I.gens], is_gb=I.is_gb)
    return I


def _resolve(order: OrderSpec, nvars: int):
    if isinstance(order, str):
        return order_from_symbol(order, nvars)
    return validate_order(order, nvars)


def _finalize(G: Ideal, T) -> Ideal:
    """Monic, zero-free basis in the ring of ``T``, by decreasing leading monomial."""
    R = change_order(G.ring, T)
    gens = [change_ring(g, R).monic() for g in G.gens if g]
    gens.sort(key=lambda g: R.order(g.LM), reverse=True)
    return Ideal(R, gens, is_gb=True)


def run_walk(
    ideal: IdealLike,
    start_order: OrderSpec = "degrevlex",
    target_order: OrderSpec = "lex",
    strategy: str = "standard",
    perturbation_degree: int = 2,
    verbosity: int = 0,
    *,
    engine: Optional[GroebnerEngine] = None,
    config: Optional[WalkConfig] = None,
) -> WalkResult:
    """
    Convert a Gröbner basis from ``start_order`` to ``target_order``.

    Parameters
    ----------
    ideal : Ideal or sequence of PolyElement
        Generators of the ideal. With a named ``start_order`` any generating
        set is fine (the start basis is computed first); with an order matrix
        the generators must already be a Gröbner basis w.r.t. that matrix.
    start_order, target_order : str or integer matrix
        ``"lex"``, ``"deglex"``, ``"degrevlex"`` (and their aliases) or an
        ``n x n`` full-rank global order matrix.
    strategy : str, default="standard"
        Walk to run, see the module docstring.
    perturbation_degree : int, default=2
        Degree of the perturbed walk.
    verbosity : int, default=0
        0 silent, 1 crossed weights, 2 also intermediate bases.
    engine : GroebnerEngine, optional
        Basis / normal-form provider; :func:`default_engine` if omitted.
    config : WalkConfig, optional
        Full configuration; overrides ``strategy``, ``perturbation_degree`` and
        ``verbosity`` when given.

    Returns
    -------
    WalkResult
        The reduced basis (ring of the target order), the outcome, the number
        of converted cones and the walk trace.

    Raises
    ------
    InvalidOrder
        An order is unknown, not square, not of full rank or not global.
    UnknownStrategy
        ``strategy`` names no walk.
    WeightOverflow
        The standard walk met a weight it cannot truncate.
    EngineFailure
        The engine failed.
    """
    I = _as_ideal(ideal)
    n = I.nvars
    S = _resolve(start_order, n)
    T = _resolve(target_order, n)

    if config is None:
        name = strategy
        if name not in STRATEGIES:
            raise UnknownStrategy(f"unknown walk strategy {name!r}; choose from {sorted(STRATEGIES)}")
        config = WalkConfig(strategy=name, perturbation_degree=perturbation_degree, verbosity=verbosity)
    elif config.strategy not in STRATEGIES:
        raise UnknownStrategy(f"unknown walk strategy {config.strategy!r}")
    walk = STRATEGIES[config.strategy]
    engine = engine if engine is not None else default_engine()

    RS = change_order(I.ring, S)
    gens = [change_ring(g, RS) for g in I.gens if g]
    if isinstance(start_order, str):
        G = engine.groebner_basis(Ideal(RS, gens), complete_reduction=True)
    else:
        G = Ideal(RS, gens, is_gb=True)

    ctx = WalkContext(
        start=S,
        target=T,
        engine=engine,
        config=config,
        reporter=WalkReporter(config.verbosity),
    )
    ctx.reset_counter()
    Gb = walk(G, ctx)
    ctx.reporter.summary(ctx.steps)
    return ctx.result(_finalize(Gb, T), config.strategy)


def groebnerwalk(
    ideal: IdealLike,
    start_order: OrderSpec = "degrevlex",
    target_order: OrderSpec = "lex",
    strategy: str = "standard",
    perturbation_degree: int = 2,
    verbosity: int = 0,
    *,
    engine: Optional[GroebnerEngine] = None,
    config: Optional[WalkConfig] = None,
) -> Ideal:
    """Same as :func:`run_walk` but returns only the basis."""
    return run_walk(
        ideal,
        start_order,
        target_order,
        strategy,
        perturbation_degree,
        verbosity,
        engine=engine,
        config=config,
    ).basis
