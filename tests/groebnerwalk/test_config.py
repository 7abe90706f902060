from fractions import Fraction

import pytest

from groebnerwalk import STRATEGIES, STRATEGY_NAMES, UnknownStrategy, WalkConfig, WalkReporter, WalkTrace
from groebnerwalk.weights import INT32_LIMIT, representation_vector


def test_defaults():
    cfg = WalkConfig()
    assert cfg.strategy == "standard"
    assert cfg.perturbation_degree == 2
    assert cfg.verbosity == 0
    assert cfg.weight_limit == INT32_LIMIT
    assert cfg.truncation_factor == Fraction(1, 10)
    assert cfg.representation is representation_vector


def test_every_name_has_a_strategy():
    assert set(STRATEGY_NAMES) == set(STRATEGIES)


def test_truncation_factor_is_coerced():
    assert WalkConfig(truncation_factor=0.5).truncation_factor == Fraction(1, 2)


@pytest.mark.parametrize("kwargs", [
    {"perturbation_degree": 0},
    {"verbosity": 3},
    {"weight_limit": 0},
    {"truncation_factor": 1},
    {"truncation_factor": 0},
])
def test_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        WalkConfig(**kwargs)


def test_rejects_unknown_strategy():
    with pytest.raises(UnknownStrategy):
        WalkConfig(strategy="fractalcombined")


# --- Reporter ---

def test_reporter_records_when_silent(capsys):
    rep = WalkReporter(verbosity=0)
    rep.header("tran_walk")
    rep.step((2, 1))
    rep.note("representation vector", (14, 1))
    assert capsys.readouterr().out == ""
    assert len(rep.trace) == 2
    assert rep.trace.weights() == [(2, 1)]
    assert rep.trace.weights("representation vector") == [(14, 1)]


def test_reporter_depth_lines(capsys):
    rep = WalkReporter(verbosity=1, trace=WalkTrace())
    rep.header("fractal_walk")
    rep.depth(2, "conversion", (3, 1))
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "[walk] depth 2: conversion in [3, 1]."
    assert rep.trace.events[-1] == {
        "strategy": "fractal_walk",
        "depth": 2,
        "event": "conversion",
        "weight": (3, 1),
    }
