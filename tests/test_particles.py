import numpy as np
import pytest

from smc_kit.particles.particle_set import Particle, ParticleSet
from smc_kit.sampling.statistics import (
    effective_sample_size,
    evidence,
    max_relative_weight,
    mean_logweight,
    normalized_logweights,
    normalized_weights,
    radius_fractions,
    total_logweight,
)
from smc_kit.utils.errors import EmptyInputError
from smc_kit.utils.logspace import logsumexp

def make_set(logweights, xs=None):
    if xs is None:
        xs = np.arange(len(logweights), dtype=float)
    return ParticleSet([Particle(x, logweight=lw) for x, lw in zip(xs, logweights)])

def test_particle_set_basics():
    ps = make_set([0.0, -1.0, -2.0], xs=[0.5, 1.5, 2.5])

    assert len(ps) == 3
    assert np.allclose(ps.xs, [0.5, 1.5, 2.5])
    assert np.allclose(ps.logweights, [0.0, -1.0, -2.0])
    assert ps[1].x == 1.5
    assert [p.x for p in ps] == [0.5, 1.5, 2.5]
    assert ps.ancestor_indices.shape == (0,)
    assert ps.source is None
    assert np.all(ps.offspring_counts() == 0)

    with pytest.raises(EmptyInputError):
        ParticleSet([])

    with pytest.raises(ValueError):
        Particle(0.0, logweight=np.nan)

def test_weight_statistics():
    ps = make_set(np.log([1.0, 2.0, 3.0, 4.0]))

    assert np.isclose(total_logweight(ps), np.log(10.0))
    assert np.isclose(mean_logweight(ps), np.log(2.5))
    assert np.isclose(evidence(ps), 2.5)
    assert np.allclose(normalized_weights(ps), [0.1, 0.2, 0.3, 0.4])
    assert np.isclose(max_relative_weight(ps), 0.4)
    assert np.allclose(radius_fractions(ps), np.sqrt([0.25, 0.5, 0.75, 1.0]))

    # Does not mutate
    assert np.allclose(ps.logweights, np.log([1.0, 2.0, 3.0, 4.0]))

def test_normalized_logweights_sum_to_one():
    rng = np.random.default_rng(42)
    ps = make_set(rng.normal(0, 20, size=200))

    assert np.all(normalized_logweights(ps) <= 0)
    assert np.isclose(logsumexp(normalized_logweights(ps)), 0.0)
    assert np.isclose(normalized_weights(ps).sum(), 1.0)

def test_statistics_with_zero_weights():
    ps = make_set([0.0, -np.inf, 0.0])

    assert np.isclose(mean_logweight(ps), np.log(2.0 / 3.0))
    assert np.allclose(normalized_weights(ps), [0.5, 0.0, 0.5])

    collapsed = make_set([-np.inf, -np.inf])
    assert total_logweight(collapsed) == -np.inf
    assert mean_logweight(collapsed) == -np.inf

def test_statistics_empty_input():
    for stat in [total_logweight, mean_logweight, normalized_logweights, normalized_weights]:
        with pytest.raises(EmptyInputError):
            stat([])

def test_effective_sample_size():
    assert np.isclose(effective_sample_size(make_set(np.zeros(10))), 10.0)
    assert np.isclose(effective_sample_size(make_set([0.0, -np.inf, -np.inf])), 1.0)
