# src/groebnerwalk/reporting.py

"""
Verbosity-gated walk diagnostics.

Everything printed goes through :class:`WalkReporter` with a ``[walk]``
prefix. Independently of the verbosity, every event is recorded in a
:class:`WalkTrace`, which can be inspected as a pandas DataFrame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .algebra.ideal import Ideal

__all__ = ["WalkTrace", "WalkReporter"]


@dataclass
class WalkTrace:
    """Append-only record of walk events."""
    events: List[Dict[str, Any]] = field(default_factory=list)

    def record(self, strategy: str, event: str, weight: Optional[Sequence[int]] = None, depth: int = 1) -> None:
        self.events.append({
            "strategy": strategy,
            "depth": depth,
            "event": event,
            "weight": tuple(weight) if weight is not None else None,
        })

    def weights(self, event: str = "step") -> List[tuple]:
        """Weights of all events of one kind, in walk order."""
        return [e["weight"] for e in self.events if e["event"] == event]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.events, columns=["strategy", "depth", "event", "weight"])

    def __len__(self) -> int:
        return len(self.events)


class WalkReporter:
    """Prints at most as much as ``verbosity`` allows; always traces."""

    def __init__(self, verbosity: int = 0, trace: Optional[WalkTrace] = None):
        self.verbosity = verbosity
        self.trace = trace if trace is not None else WalkTrace()
        self.strategy = ""

    def _print(self, msg: str) -> None:
        print(f"[walk] {msg}")

    def header(self, strategy: str, what: str = "Crossed Cones in:") -> None:
        self.strategy = strategy
        if self.verbosity >= 1:
            self._print(f"{strategy} results")
            self._print(what)

    def step(self, weight: Sequence[int], basis: Optional[Ideal] = None, depth: int = 1) -> None:
        """A cone was crossed at ``weight`` (or along the facet normal ``weight``)."""
        self.trace.record(self.strategy, "step", weight, depth)
        if self.verbosity >= 1:
            self._print(str(list(weight)))
            if self.verbosity == 2 and basis is not None:
                self._print(str(list(basis.gens)))

    def depth(self, depth: int, event: str, weight: Sequence[int]) -> None:
        """Fractal-walk event at ``depth`` (``in cone``, ``not in cone``, ``recursive call``, ``conversion``)."""
        self.trace.record(self.strategy, event, weight, depth)
        if self.verbosity >= 1:
            self._print(f"depth {depth}: {event} in {list(weight)}.")

    def note(self, event: str, weight: Optional[Sequence[int]] = None) -> None:
        self.trace.record(self.strategy, event, weight)
        if self.verbosity >= 1:
            self._print(event if weight is None else f"{event}: {list(weight)}")

    def summary(self, steps: int) -> None:
        if self.verbosity >= 1:
            self._print(f"Cones crossed: {steps}")
