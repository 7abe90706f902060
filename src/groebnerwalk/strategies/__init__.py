# src/groebnerwalk/strategies/__init__.py

from functools import partial
from typing import Callable, Dict

from .base import WalkContext, WalkOutcome, WalkResult
from .fractal import (
    FRACTAL,
    FRACTAL_COMBINED,
    FRACTAL_LEX,
    FRACTAL_LOOK_AHEAD,
    FRACTAL_START_ORDER,
    FractalVariant,
    fractal_walk,
)
from .generic import generic_walk, next_gamma
from .standard import perturbed_walk, standard_step, standard_walk
from .tran import tran_walk

# name -> (G, ctx) -> Ideal
STRATEGIES: Dict[str, Callable] = {
    "standard": standard_walk,
    "generic": generic_walk,
    "pertubed": perturbed_walk,
    "perturbed": perturbed_walk,
    "tran": tran_walk,
    "fractal": partial(fractal_walk, variant=FRACTAL),
    "fractal_start_order": partial(fractal_walk, variant=FRACTAL_START_ORDER),
    "fractal_lex": partial(fractal_walk, variant=FRACTAL_LEX),
    "fractal_look_ahead": partial(fractal_walk, variant=FRACTAL_LOOK_AHEAD),
    "fractal_combined": partial(fractal_walk, variant=FRACTAL_COMBINED),
}

__all__ = [
    "STRATEGIES",
    "WalkContext",
    "WalkOutcome",
    "WalkResult",
    "FractalVariant",
    "fractal_walk",
    "generic_walk",
    "next_gamma",
    "perturbed_walk",
    "standard_step",
    "standard_walk",
    "tran_walk",
]
