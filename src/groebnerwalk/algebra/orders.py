# src/groebnerwalk/algebra/orders.py

"""
Matrix monomial orders on top of SymPy's sparse polynomial rings.

A monomial order is encoded by an integer matrix: monomials are compared by
the tuple of dot products with the rows, first row first. Walk orders prepend
one or more weight rows ("order by this weight first, then by the matrix").

SymPy accepts any callable :class:`~sympy.polys.orderings.MonomialOrder` as the
order of a :class:`~sympy.polys.rings.PolyRing`; :class:`MatrixOrder` is such
a callable and is hashable by its rows so that ring caching works.

Examples
--------
>>> from sympy import QQ
>>> R, x, y = polynomial_ring("x,y", QQ, "lex")
>>> (x + y**5).LM
(1, 0)
>>> order_from_symbol("degrevlex", 3).tolist()
[[1, 1, 1], [0, 0, -1], [0, -1, 0]]
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple, Union

import numpy as np
from sympy.polys.orderings import MonomialOrder
from sympy.polys.rings import PolyElement, PolyRing

from ..errors import InvalidOrder

__all__ = [
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

OrderSpec = Union[str, np.ndarray, Sequence[Sequence[int]]]

_LEX = {"lex", "lp"}
_DEGLEX = {"deglex", "degree-lex", "degree_lex", "grlex", "Dp"}
_DEGREVLEX = {"degrevlex", "degree-reverse-lex", "degree_reverse_lex", "grevlex", "dp"}


class MatrixOrder(MonomialOrder):
    """Order monomials by the tuple of dot products with ``rows``."""

    alias = "matrix"
    is_global = True

    def __init__(self, rows: Iterable[Iterable[int]]):
        self.rows: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(int(c) for c in row) for row in rows
        )

    def __call__(self, monomial):
        return tuple(sum(c * e for c, e in zip(row, monomial)) for row in self.rows)

    def __repr__(self) -> str:
        return f"MatrixOrder({[list(r) for r in self.rows]})"

    def __eq__(self, other) -> bool:
        return isinstance(other, MatrixOrder) and self.rows == other.rows

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.rows))


# ───────────────────────────── Order matrices ───────────────────────────── #

def order_from_symbol(name: str, nvars: int) -> np.ndarray:
    """
    Canonical matrix of a named order.

    ``lex`` is the identity; ``deglex`` is a ones row above the first
    ``n-1`` identity rows; ``degrevlex`` is a ones row above the first ``n-1``
    rows of the negative anti-diagonal matrix.
    """
    if nvars < 1:
        raise InvalidOrder("a polynomial ring needs at least one variable")
    ident = np.eye(nvars, dtype=np.int64)
    if name in _LEX:
        return ident
    ones = np.ones((1, nvars), dtype=np.int64)
    if name in _DEGLEX:
        return np.vstack([ones, ident[: nvars - 1, :]])
    if name in _DEGREVLEX:
        anti = -np.fliplr(ident)
        return np.vstack([ones, anti[: nvars - 1, :]])
    raise InvalidOrder(f"unknown monomial order {name!r}")


def matrix_rows(M) -> Tuple[Tuple[int, ...], ...]:
    """Rows of ``M`` as tuples of Python ints (no fixed-width overflow)."""
    return tuple(tuple(int(c) for c in row) for row in np.asarray(M, dtype=object))


def add_weight_vector(w: Sequence[int], M) -> np.ndarray:
    """Stack ``w`` on top of ``M``; the result has one more row than ``M``."""
    return np.vstack([np.asarray([list(w)], dtype=object), np.asarray(M, dtype=object)])


def _is_global(M: np.ndarray) -> bool:
    if np.any(M[0] < 0):
        return False
    for col in M.T:
        nonzero = col[col != 0]
        if nonzero.size == 0 or nonzero[0] < 0:
            return False
    return True


def validate_order(M, nvars: int) -> np.ndarray:
    """
    Return ``M`` as an integer array or raise :class:`InvalidOrder`.

    A valid order matrix is ``nvars x nvars``, of full rank and global: the
    first row is non-negative and every column starts (top-down) with a
    positive entry, which makes the matrix order a well-order.
    """
    try:
        arr = np.asarray(M, dtype=np.int64)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidOrder(f"order matrix is not an integer matrix: {exc}") from exc
    if arr.ndim != 2 or arr.shape != (nvars, nvars):
        raise InvalidOrder(
            "The matrices representing the monomial order have to be "
            f"{nvars}x{nvars}-matrices, got shape {arr.shape}"
        )
    if np.linalg.matrix_rank(arr) != nvars:
        raise InvalidOrder("The matrices representing the monomial order need full rank")
    if not _is_global(arr):
        raise InvalidOrder(
            "The first row of a monomial order matrix must be non-negative and "
            "every column must start with a positive entry"
        )
    return arr


# ───────────────────────────── Rings ───────────────────────────── #

def new_ring(symbols, domain, order: OrderSpec) -> PolyRing:
    """A SymPy ring over ``domain`` ordered by a named order or a matrix."""
    nvars = len(symbols.split(",")) if isinstance(symbols, str) else len(symbols)
    if isinstance(order, str):
        M = order_from_symbol(order, nvars)
    else:
        M = validate_order(order, nvars)
    return PolyRing(symbols, domain, MatrixOrder(matrix_rows(M)))


def polynomial_ring(symbols, domain, order: OrderSpec = "degrevlex"):
    """Like :func:`sympy.ring`: return ``(ring, *generators)``."""
    R = new_ring(symbols, domain, order)
    return (R,) + tuple(R.gens)


def change_order(ring: PolyRing, M, weights: Sequence[Sequence[int]] = ()) -> PolyRing:
    """
    Copy of ``ring`` ordered by ``weights`` first, then by the rows of ``M``.

    ``M`` may carry extra leading weight rows (an ``(n+1) x n`` matrix built by
    :func:`add_weight_vector`); its last ``n`` rows must have full rank.
    """
    n = ring.ngens
    rows = matrix_rows(M)
    if len(rows) < n or any(len(r) != n for r in rows):
        raise InvalidOrder(f"an order on {n} variables needs at least {n} rows of length {n}")
    if np.linalg.matrix_rank(np.asarray(rows[-n:], dtype=float)) != n:
        raise InvalidOrder("The matrices representing the monomial order need full rank")
    for w in weights:
        if len(w) != n:
            raise InvalidOrder(f"weight vector {list(w)} does not have {n} entries")
    order = MatrixOrder(tuple(tuple(int(c) for c in w) for w in weights) + rows)
    return PolyRing(ring.symbols, ring.domain, order)


def change_ring(p: PolyElement, ring: PolyRing) -> PolyElement:
    """Re-express ``p`` in ``ring``: same coefficients, same exponents."""
    if p.ring == ring:
        return p.copy()
    return ring.from_dict(dict(p))


def leading_term(p: PolyElement, ring: PolyRing = None) -> PolyElement:
    """The leading term of ``p`` (under its own ring's order) as a polynomial."""
    target = ring if ring is not None else p.ring
    if not p:
        return target.zero
    return target.from_dict({p.LM: p.LC})
