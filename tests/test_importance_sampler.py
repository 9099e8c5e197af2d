import numpy as np
import pytest

from smc_kit.distributions.mixture import Mixture
from smc_kit.distributions.normal import Normal
from smc_kit.distributions.temperature import Temperature
from smc_kit.particles.particle_set import ParticleSet
from smc_kit.sampling.importance import ImportanceSampler
from smc_kit.sampling.statistics import evidence
from smc_kit.utils.errors import UnsupportedOperationError

def test_propose():
    rng = np.random.default_rng(42)
    sampler = ImportanceSampler(rng=rng)
    proposal = Normal(1.0, 2.0)

    particles = sampler.propose(proposal, 100)

    assert isinstance(particles, ParticleSet)
    assert len(particles) == 100
    assert np.all(particles.logweights == 0.0)
    for p in particles:
        assert p.density is proposal
        assert np.isclose(p.logq, proposal.log_density(p.x))
        assert p.parent is None

    with pytest.raises(ValueError):
        sampler.propose(proposal, 0)

def test_reweight_matches_one_shot():
    proposal = Normal(1.0, 2.0)
    target = Temperature(Mixture([Normal(-2, 0.5), Normal(2, 0.5)], [5, 1]), 1.0)

    two_phase = ImportanceSampler(rng=np.random.default_rng(42)).propose(proposal, 50)
    returned = ImportanceSampler().reweight(two_phase, target)
    one_shot = ImportanceSampler(rng=np.random.default_rng(42)).propose_and_weight(proposal, target, 50)

    assert returned is two_phase
    assert np.allclose(two_phase.xs, one_shot.xs)
    assert np.allclose(two_phase.logweights, one_shot.logweights)
    for p in two_phase:
        assert p.density is target
        assert np.isclose(p.logweight, p.logp - p.logq)

def test_reweight_chains():
    sampler = ImportanceSampler(rng=np.random.default_rng(42))
    proposal = Normal(0.0, 3.0)
    mid = Normal(0.0, 2.0)
    target = Normal(0.5, 1.0)

    particles = sampler.propose(proposal, 30)
    sampler.reweight(particles, mid)
    sampler.reweight(particles, target)

    # Intermediate densities cancel
    for p in particles:
        assert np.isclose(p.logweight, target.log_density(p.x) - proposal.log_density(p.x))

def test_evidence_of_normalized_target():
    sampler = ImportanceSampler(rng=np.random.default_rng(42))
    particles = sampler.propose_and_weight(Normal(0.0, 2.0), Normal(0.5, 1.0), 5000)

    assert np.isclose(evidence(particles), 1.0, atol=0.1)

def test_cannot_propose_from_temperature():
    sampler = ImportanceSampler(rng=np.random.default_rng(42))
    target = Temperature(Normal(0.0, 1.0), 2.0)

    with pytest.raises(UnsupportedOperationError):
        sampler.propose(target, 10)
    with pytest.raises(UnsupportedOperationError):
        sampler.propose_and_weight(target, Normal(0.0, 1.0), 10)
