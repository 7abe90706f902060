# src/groebnerwalk/config.py

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Optional

from .errors import UnknownStrategy
from .weights import INT32_LIMIT, representation_vector

"""
Configuration of a walk run.

:class:`WalkConfig` bundles the knobs that are not part of the mathematical
input (ideal and orders): which strategy to run, how strongly to perturb, how
chatty to be, and the overflow policy. Treat it as an immutable snapshot.

Examples
--------
>>> from groebnerwalk.config import WalkConfig
>>> cfg = WalkConfig(strategy="tran", verbosity=1)
>>> cfg.weight_limit
2147483647
"""

__all__ = [
    "WalkConfig",
    "STRATEGY_NAMES",
]

STRATEGY_NAMES = (
    "standard",
    "generic",
    "pertubed",
    "perturbed",
    "tran",
    "fractal",
    "fractal_start_order",
    "fractal_lex",
    "fractal_look_ahead",
    "fractal_combined",
)


@dataclass
class WalkConfig:
    """
    Knobs of a walk run.

    Parameters
    ----------
    strategy : str, default="standard"
        One of :data:`STRATEGY_NAMES`. ``"pertubed"`` and ``"perturbed"`` are
        the same walk.
    perturbation_degree : int, default=2
        Degree ``p`` of the perturbed walk. Clamped to the number of variables
        when the walk starts.
    verbosity : int, default=0
        0 silent, 1 crossed weights and depth events, 2 also the intermediate
        bases.
    weight_limit : int, default=2**31 - 1
        Largest weight entry used to build an order before truncating.
    truncation_factor : Fraction, default=1/10
        Scale applied per truncation round.
    representation : callable, optional
        ``(G, T) -> weight`` policy used by Tran's walk when the target weight
        lies on several cones. Defaults to
        :func:`~groebnerwalk.weights.representation_vector`.
    """

    strategy: str = "standard"
    perturbation_degree: int = 2
    verbosity: int = 0
    weight_limit: int = INT32_LIMIT
    truncation_factor: Fraction = Fraction(1, 10)
    representation: Optional[Callable] = None

    def __post_init__(self):
        if self.strategy not in STRATEGY_NAMES:
            raise UnknownStrategy(f"strategy must be one of {STRATEGY_NAMES}, got {self.strategy!r}")
        if self.perturbation_degree < 1:
            raise ValueError("perturbation_degree must be ≥ 1")
        if self.verbosity not in (0, 1, 2):
            raise ValueError("verbosity must be 0, 1 or 2")
        if self.weight_limit < 1:
            raise ValueError("weight_limit must be ≥ 1")
        self.truncation_factor = Fraction(self.truncation_factor)
        if not 0 < self.truncation_factor < 1:
            raise ValueError("truncation_factor must lie strictly between 0 and 1")
        if self.representation is None:
            self.representation = representation_vector
