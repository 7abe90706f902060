import pytest

from groebnerwalk.algebra import (
    Ideal,
    SymPyEngine,
    change_order,
    change_ring,
    order_from_symbol,
)
from groebnerwalk.initials import initial_forms
from groebnerwalk.lifting import (
    interreduce,
    interreduce_generic,
    lift,
    lift_generic,
    reduce_walk,
)


@pytest.fixture
def engine():
    return SymPyEngine()


def test_one_standard_step_by_hand(scenario, engine):
    lex = order_from_symbol("lex", 2)
    Rn = change_order(scenario.ring, lex, [(2, 1)])
    Gw = initial_forms(Rn, scenario.gens, (2, 1))
    H = engine.groebner_basis(Ideal(Rn, Gw))
    x, y = Rn.gens
    assert set(H.gens) == {x - y**2, y**4}

    G = interreduce(lift(scenario, H, Rn, engine), engine)
    assert G.is_gb
    assert G.ring == Rn
    assert set(G.gens) == {x - y**2, y**4 - y}


def test_interreduce_is_idempotent(cyclic_like, engine):
    G = engine.groebner_basis(cyclic_like)
    once = interreduce(G, engine)
    twice = interreduce(once, engine)
    assert once.gens == twice.gens
    assert set(once.gens) == set(G.gens)


def test_interreduce_drops_redundant_generators(ring_xy, engine):
    R, x, y = ring_xy
    G = Ideal(R, [x**2, x**2 * y, y**3], is_gb=True)
    out = interreduce(G, engine)
    assert {g.LM for g in out.gens} == {(2, 0), (0, 3)}
    assert out.is_gb


def test_reduce_walk_uses_prescribed_leads(ring_xy):
    R, x, y = ring_xy
    # take -x (not y^2) as the lead of y^2 - x: x reduces to y^2
    assert reduce_walk(x + 1, [y**2 - x], [-x]) == y**2 + 1
    # take y^2 as the lead: y^4 -> x y^2 -> x^2
    assert reduce_walk(y**4, [y**2 - x], [y**2]) == x**2
    # nothing divisible
    assert reduce_walk(x + 1, [y**2 - x], [y**2]) == x + 1


def test_lift_generic_scenario(scenario):
    lex = order_from_symbol("lex", 2)
    Rn = change_order(scenario.ring, lex)
    x, y = Rn.gens
    gens = [change_ring(g, Rn) for g in scenario.gens]
    leads = [y**2, x**2]
    H = Ideal(Rn, [x - y**2, y**4])

    lifted, new_leads = lift_generic(gens, leads, H)
    assert lifted == [x - y**2, y**4 - y]
    assert new_leads == [x, y**4]
    assert interreduce_generic(lifted, new_leads) == [x - y**2, y**4 - y]
