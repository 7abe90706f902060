from fractions import Fraction

from groebnerwalk.algebra import Ideal, change_order, order_from_symbol
from groebnerwalk.cones import (
    difference_vectors,
    difference_vectors_generic,
    in_cone,
    next_weight,
    next_weight_fractal,
    same_cone,
)
from groebnerwalk.initials import (
    in_several_cones,
    initial_forms,
    is_binomial_or_simpler,
    is_monomial_ideal,
)
from groebnerwalk.weights import dot


def test_initial_forms_keep_ties(ring_xy, scenario):
    R, x, y = ring_xy
    forms = initial_forms(R, scenario.gens, (1, 1))
    assert forms == [y**2, x**2]
    forms = initial_forms(R, scenario.gens, (2, 1))
    assert forms == [y**2 - x, x**2]


def test_initial_forms_positional_and_zero(ring_xy):
    R, x, y = ring_xy
    forms = initial_forms(R, [R.zero, x + y], (1, 0))
    assert forms[0] == R.zero
    assert forms[1] == x


def test_structure_predicates(ring_xy):
    R, x, y = ring_xy
    assert is_monomial_ideal([x, y**2])
    assert not is_monomial_ideal([x + y])
    assert is_binomial_or_simpler([x + y, x])
    assert not is_binomial_or_simpler([x + y + 1])
    assert not in_several_cones([x + y, x])
    assert in_several_cones([x + y, y + 1])
    assert in_several_cones([x + y + 1])


def test_difference_vectors(ring_xy, scenario):
    R, x, y = ring_xy
    assert difference_vectors(scenario) == [(-1, 2), (2, -1)]
    # duplicates are dropped
    G = Ideal(R, [y**2 - x, y**2 - x + 0 * y, x**2 - y])
    assert difference_vectors(G) == [(-1, 2), (2, -1)]
    # leads prescribed from outside
    assert difference_vectors_generic([y**2 - x], [-x]) == [(1, -2)]


def test_same_cone_and_in_cone(scenario):
    lex = order_from_symbol("lex", 2)
    drl = order_from_symbol("degrevlex", 2)
    assert same_cone(scenario, drl)
    assert not same_cone(scenario, lex)
    assert in_cone(scenario, drl, (1, 1))
    assert not in_cone(scenario, lex, (1, 1))


def test_next_weight_standard_walk_scenario(scenario):
    assert next_weight(scenario, (1, 1), (1, 0)) == (2, 1)


def test_next_weight_reaches_target_without_facet(ring_xy):
    R, x, y = ring_xy
    Rl = change_order(R, order_from_symbol("lex", 2))
    G = Ideal(Rl, [Rl.from_dict({(1, 0): 1, (0, 2): -1}), Rl.from_dict({(0, 4): 1, (0, 1): -1})])
    assert next_weight(G, (2, 1), (1, 0)) == (1, 0)


def test_next_weight_lands_on_boundary(scenario):
    # the crossing point kills the dot product with some difference vector
    cw, tw = (1, 1), (1, 0)
    w = next_weight(scenario, cw, tw)
    assert any(dot(w, v) == 0 for v in difference_vectors(scenario))


def test_next_weight_fractal(scenario):
    assert next_weight_fractal(scenario, (1, 1), (1, 0)) == Fraction(1, 2)
    assert next_weight_fractal(scenario, (1, 0), (1, 0)) is None
    assert next_weight_fractal(scenario, (1, 1), (1, 1)) is None


def test_next_weight_fractal_monomial_basis(ring_xy):
    R, x, y = ring_xy
    G = Ideal(R, [x**2, y**3])
    assert next_weight_fractal(G, (1, 1), (1, 0)) is None
