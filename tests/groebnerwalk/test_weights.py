from fractions import Fraction

import pytest

from groebnerwalk.algebra import order_from_symbol
from groebnerwalk.errors import DimensionMismatch
from groebnerwalk.initials import initial_forms
from groebnerwalk.weights import (
    INT32_LIMIT,
    dot,
    exceeds_limit,
    max_total_degree,
    normalize_bounding,
    perturbed_vector,
    representation_vector,
    total_degree,
    truncate_weight,
)


def test_dot_and_dimension_mismatch():
    assert dot((1, 2, 3), (4, 5, 6)) == 32
    assert dot((Fraction(1, 2), 1), (2, 3)) == 4
    with pytest.raises(DimensionMismatch):
        dot((1, 2), (1, 2, 3))


def test_normalize_bounding_examples():
    assert normalize_bounding([4, 2, 6]) == (2, 1, 3)
    assert normalize_bounding([Fraction(1), Fraction(1, 2)]) == (2, 1)
    assert normalize_bounding([0, 0]) == (0, 0)
    assert normalize_bounding([-2, 4]) == (-1, 2)


@pytest.mark.parametrize("w", [(3, 5), (12, 18, 6), (1, 0, 0), (-4, 6)])
def test_normalize_bounding_is_scale_invariant(w):
    base = normalize_bounding(w)
    for k in (2, 7, Fraction(3, 5)):
        assert normalize_bounding([k * c for c in w]) == base


def test_exceeds_limit():
    assert not exceeds_limit((INT32_LIMIT, 1))
    assert exceeds_limit((INT32_LIMIT + 1, 1))
    assert exceeds_limit((-(INT32_LIMIT + 1), 1))
    assert exceeds_limit((11, 1), limit=10)


def test_total_degree(ring_xy, scenario):
    R, x, y = ring_xy
    assert total_degree(x**3 * y + y) == 4
    assert total_degree(R.zero) == 0
    assert max_total_degree(scenario) == 2


def test_perturbed_vector_lex(scenario):
    lex = order_from_symbol("lex", 2)
    assert perturbed_vector(scenario, lex, 1) == (1, 0)
    # e = maxdeg * m_2 + 1 = 2 * 1 + 1
    assert perturbed_vector(scenario, lex, 2) == (3, 1)


def test_perturbed_vector_degrevlex(scenario):
    drl = order_from_symbol("degrevlex", 2)
    # rows (1, 1), (0, -1); m_2 = max(0, 1) = 1; e = 3
    assert perturbed_vector(scenario, drl, 2) == (3, 2)


def test_perturbed_vector_rejects_bad_degree(scenario):
    lex = order_from_symbol("lex", 2)
    with pytest.raises(ValueError):
        perturbed_vector(scenario, lex, 0)
    with pytest.raises(ValueError):
        perturbed_vector(scenario, lex, 3)


def test_representation_vector_selects_target_leads(scenario):
    lex = order_from_symbol("lex", 2)
    w = representation_vector(scenario, lex)
    # M = 1, d0 = 2, d = 1 * (8 + 6) = 14
    assert w == (14, 1)
    assert w == normalize_bounding(w)


# --- Truncation ---

def test_truncate_weight_keeps_small_weights(scenario):
    w = (2, 1)
    forms = initial_forms(scenario.ring, scenario.gens, w)
    trunc = truncate_weight(scenario, w, forms)
    assert trunc.weight == (2, 1)
    assert trunc.preserved


def test_truncate_weight_shrinks_when_cone_is_kept(scenario):
    # (1000, 1) and its one-round truncation (1, 0) pick the same initial forms
    w = (1000, 1)
    forms = initial_forms(scenario.ring, scenario.gens, w)
    trunc = truncate_weight(scenario, w, forms, limit=50)
    assert trunc.preserved
    assert not exceeds_limit(trunc.weight, 50)


def test_truncate_weight_reports_lost_cone(scenario):
    # (2001, 1000) picks -x from y^2 - x; one round gives (2, 1), where
    # the initial form of y^2 - x is the whole binomial
    w = (2001, 1000)
    forms = initial_forms(scenario.ring, scenario.gens, w)
    trunc = truncate_weight(scenario, w, forms, limit=1000)
    assert not trunc.preserved
