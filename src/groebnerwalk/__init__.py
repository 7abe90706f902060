# src/groebnerwalk/__init__.py

"""
groebnerwalk: convert Gröbner bases between monomial orders with the
Gröbner walk.
"""

from .algebra import (
    GroebnerEngine,
    Ideal,
    MatrixOrder,
    SymPyEngine,
    change_order,
    change_ring,
    default_engine,
    order_from_symbol,
    polynomial_ring,
    validate_order,
)
from .config import STRATEGY_NAMES, WalkConfig
from .errors import (
    DimensionMismatch,
    EngineFailure,
    InvalidOrder,
    UnknownStrategy,
    WalkError,
    WeightOverflow,
)
from .reporting import WalkReporter, WalkTrace
from .strategies import STRATEGIES, WalkOutcome, WalkResult
from .walk import groebnerwalk, run_walk

__all__ = [
    "groebnerwalk",
    "run_walk",
    "WalkResult",
    "WalkOutcome",
    "WalkConfig",
    "STRATEGY_NAMES",
    "STRATEGIES",
    "WalkReporter",
    "WalkTrace",
    "Ideal",
    "GroebnerEngine",
    "SymPyEngine",
    "default_engine",
    "MatrixOrder",
    "order_from_symbol",
    "validate_order",
    "change_order",
    "change_ring",
    "polynomial_ring",
    "WalkError",
    "InvalidOrder",
    "DimensionMismatch",
    "UnknownStrategy",
    "WeightOverflow",
    "EngineFailure",
]

__version__ = "0.1.0"
