# src/groebnerwalk/strategies/base.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

import numpy as np

from ..algebra.engine import GroebnerEngine
from ..algebra.ideal import Ideal
from ..algebra.orders import change_order, change_ring
from ..config import WalkConfig
from ..reporting import WalkReporter, WalkTrace
from ..weights import Weight

__all__ = ["WalkOutcome", "WalkResult", "WalkContext"]


class WalkOutcome(Enum):
    COMPLETED = "completed"
    FALLBACK = "fallback"   # finished by a direct basis computation in the target order


@dataclass(frozen=True)
class WalkResult:
    basis: Ideal
    outcome: WalkOutcome
    steps: int
    strategy: str
    trace: WalkTrace

    @property
    def used_fallback(self) -> bool:
        return self.outcome is WalkOutcome.FALLBACK


@dataclass
class WalkContext:
    """
    Everything one top-level walk owns: the two order matrices, the engine,
    the reporter, the step counter and the fractal depth state. A new context
    is created per :func:`~groebnerwalk.walk.run_walk` call and threaded
    through every (recursive) strategy call.
    """

    start: np.ndarray
    target: np.ndarray
    engine: GroebnerEngine
    config: WalkConfig
    reporter: WalkReporter
    steps: int = 0
    outcome: WalkOutcome = WalkOutcome.COMPLETED
    target_weights: List[Weight] = field(default_factory=list)
    start_weights: List[Weight] = field(default_factory=list)
    first_step_mode: bool = False

    def raise_counter(self) -> None:
        self.steps += 1

    def reset_counter(self) -> int:
        steps, self.steps = self.steps, 0
        return steps

    def target_fallback(self, G: Ideal) -> Ideal:
        """Basis of ``G``'s ideal computed directly in the target order."""
        Rn = change_order(G.ring, self.target)
        self.outcome = WalkOutcome.FALLBACK
        self.reporter.note("fallback to a direct computation in the target order")
        return self.engine.groebner_basis(Ideal(Rn, [change_ring(g, Rn) for g in G.gens]))

    def result(self, basis: Ideal, strategy: str) -> WalkResult:
        return WalkResult(basis, self.outcome, self.steps, strategy, self.reporter.trace)

    @property
    def limit(self) -> int:
        return self.config.weight_limit
