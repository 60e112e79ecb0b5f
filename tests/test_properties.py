"""Property-based checks over random weight vectors."""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import HealthCheck, assume, example, given, settings
from hypothesis import strategies as st

from vosealias import AliasSampler, build_alias_table_from_weights

weightings = st.lists(st.floats(0.001, 5.0), min_size=1, max_size=100)
sparse_weightings = st.lists(
    st.one_of(st.just(0.0), st.floats(0.0, 1e6, allow_nan=False, allow_infinity=False)),
    min_size=1,
    max_size=200,
)


@example([1.0])
@example([0.0, 1.0])
@example([1.0, 1.0, 0.0])
@given(sparse_weightings)
@settings(max_examples=200, deadline=None)
def test_table_routes_normalized_mass(weights):
    w = np.asarray(weights, dtype=np.float64)
    assume(w.sum() > 0.0)
    t = build_alias_table_from_weights(weights)
    n = len(weights)
    assert t.prob.shape == (n,)
    assert t.alias.shape == (n,)
    assert np.all((t.prob >= 0.0) & (t.prob <= 1.0))
    assert np.all((t.alias >= 0) & (t.alias < n))
    assert np.allclose(t.implied_distribution(), w / w.sum(), atol=1e-9)


@given(weightings, st.integers(0, 2**63 - 1))
@settings(max_examples=50, deadline=None)
def test_seeded_samplers_agree(weights, seed):
    a = AliasSampler.from_weights_with_seed(weights, seed)
    b = AliasSampler.from_weights_with_seed(weights, seed)
    assert [a.next() for _ in range(200)] == [b.next() for _ in range(200)]
    draws = a.sample(2000)
    assert np.array_equal(draws, b.sample(2000))
    assert draws.min() >= 0
    assert draws.max() < len(weights)


@pytest.mark.slow
@given(weightings)
@settings(max_examples=20, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_empirical_frequencies_converge(weights):
    s = AliasSampler.from_weights(weights)
    ndraw = 1_000_000
    counts = np.bincount(s.sample(ndraw), minlength=len(weights))
    w = np.asarray(weights, dtype=np.float64)
    assert np.allclose(counts / float(ndraw), w / w.sum(), atol=0.01), f"seed={s.seed}"
