import numpy as np
import pytest
from sympy import QQ

from groebnerwalk.algebra import (
    MatrixOrder,
    add_weight_vector,
    change_order,
    change_ring,
    leading_term,
    matrix_rows,
    order_from_symbol,
    polynomial_ring,
    validate_order,
)
from groebnerwalk.errors import InvalidOrder


def test_named_order_matrices():
    assert order_from_symbol("lex", 3).tolist() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert order_from_symbol("deglex", 3).tolist() == [[1, 1, 1], [1, 0, 0], [0, 1, 0]]
    assert order_from_symbol("degrevlex", 3).tolist() == [[1, 1, 1], [0, 0, -1], [0, -1, 0]]


@pytest.mark.parametrize("alias,name", [
    ("lp", "lex"),
    ("Dp", "deglex"),
    ("grlex", "deglex"),
    ("dp", "degrevlex"),
    ("grevlex", "degrevlex"),
    ("degree-reverse-lex", "degrevlex"),
])
def test_order_aliases(alias, name):
    assert np.array_equal(order_from_symbol(alias, 4), order_from_symbol(name, 4))


def test_unknown_order_name():
    with pytest.raises(InvalidOrder):
        order_from_symbol("revlex", 2)


def test_named_orders_compare_like_sympy():
    R, x, y, z = polynomial_ring("x,y,z", QQ, "degrevlex")
    assert (x * z + y**2).LM == (0, 2, 0)
    R, x, y, z = polynomial_ring("x,y,z", QQ, "deglex")
    assert (x * z + y**2).LM == (1, 0, 1)
    R, x, y, z = polynomial_ring("x,y,z", QQ, "lex")
    assert (x + y**5).LM == (1, 0, 0)


# --- Validation ---

@pytest.mark.parametrize("name", ["lex", "deglex", "degrevlex"])
def test_named_orders_are_valid(name):
    M = order_from_symbol(name, 3)
    assert np.array_equal(validate_order(M, 3), M)


def test_validate_accepts_permuted_lex():
    validate_order([[0, 1], [1, 0]], 2)


@pytest.mark.parametrize("M", [
    [[1, 1]],                       # not square
    [[1, 0, 0], [0, 1, 0]],         # not square
    [[1, 1], [1, 1]],               # rank 1
    [[-1, 0], [0, 1]],              # negative first row
    [[1, 0], [0, -1]],              # column 2 starts negative
])
def test_validate_rejects(M):
    with pytest.raises(InvalidOrder):
        validate_order(M, 2)


def test_invalid_order_is_value_error():
    with pytest.raises(ValueError):
        validate_order([[1, 1], [1, 1]], 2)


# --- Rings ---

def test_matrix_order_hash_and_eq():
    a = MatrixOrder([[1, 0], [0, 1]])
    b = MatrixOrder(np.eye(2, dtype=int))
    assert a == b
    assert hash(a) == hash(b)
    assert a != MatrixOrder([[0, 1], [1, 0]])
    assert a((2, 3)) == (2, 3)


def test_change_order_reuses_equal_rings(ring_xy):
    R, x, y = ring_xy
    lex = order_from_symbol("lex", 2)
    assert change_order(R, lex) == change_order(R, lex)


def test_change_order_prepends_weights(ring_xy):
    R, x, y = ring_xy
    lex = order_from_symbol("lex", 2)
    Rn = change_order(R, lex, [(0, 1)])
    assert change_ring(x**5 + y, Rn).LM == (0, 1)
    assert change_ring(x**2 + y**2, change_order(R, lex, [(1, 2)])).LM == (0, 2)
    # tie on the weight is broken by lex
    assert change_ring(x**2 + y**2, change_order(R, lex, [(1, 1)])).LM == (2, 0)


def test_change_order_accepts_stacked_weight_matrix(ring_xy):
    R, x, y = ring_xy
    lex = order_from_symbol("lex", 2)
    Tn = add_weight_vector((3, 1), lex)
    assert matrix_rows(Tn) == ((3, 1), (1, 0), (0, 1))
    Rn = change_order(R, Tn)
    assert Rn.order.rows == ((3, 1), (1, 0), (0, 1))


def test_change_order_rejects_wrong_shape(ring_xy):
    R, x, y = ring_xy
    with pytest.raises(InvalidOrder):
        change_order(R, order_from_symbol("lex", 3))
    with pytest.raises(InvalidOrder):
        change_order(R, order_from_symbol("lex", 2), [(1, 2, 3)])


def test_change_ring_and_leading_term(ring_xy):
    R, x, y = ring_xy
    p = 3 * x**2 - y + 1
    Rl = change_order(R, order_from_symbol("lex", 2))
    q = change_ring(p, Rl)
    assert q.ring == Rl
    assert dict(q) == dict(p)
    assert leading_term(p) == 3 * x**2
    assert dict(leading_term(p, Rl)) == {(2, 0): 3}
    assert not leading_term(R.zero)
