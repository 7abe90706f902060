from __future__ import annotations

from .ideal import Ideal
from .engine import GroebnerEngine, SymPyEngine, default_engine
from .orders import (
    MatrixOrder,
    order_from_symbol,
    matrix_rows,
    add_weight_vector,
    validate_order,
    change_order,
    change_ring,
    leading_term,
    new_ring,
    polynomial_ring,
)

__all__ = [
    "Ideal",
    "GroebnerEngine",
    "SymPyEngine",
    "default_engine",
    "MatrixOrder",
    "order_from_symbol",
    "matrix_rows",
    "add_weight_vector",
    "validate_order",
    "change_order",
    "change_ring",
    "leading_term",
    "new_ring",
    "polynomial_ring",
]
