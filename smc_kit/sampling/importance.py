import numpy as np

from smc_kit.distributions.base import Distribution
from smc_kit.particles.particle_set import Particle, ParticleSet


class ImportanceSampler:
    """
    Importance sampling for univariate targets.

    Two modes are supported:
        - two-phase: propose() from q, later reweight() towards a target p,
        - one-shot: propose_and_weight() with logweight = log p(x) - log q(x).
    """
    def __init__(self, rng=None):
        self.rng = rng or np.random.default_rng()

    def propose(self, proposal: Distribution, n: int):
        """
        Draw n particles i.i.d. from the proposal with log-weight 0.

        Each particle remembers the proposal as its current density, so that
        a later reweight() computes the correct ratio.
        """
        if n < 1:
            raise ValueError("Number of particles n must be positive.")

        particles = []
        for _ in range(n):
            x = proposal.sample(self.rng)
            particles.append(Particle(
                x,
                logweight=0.0,
                logq=proposal.log_density(x),
                density=proposal,
            ))

        return ParticleSet(particles)

    def reweight(self, particles: ParticleSet, target: Distribution):
        """
        Move the weights of particles from their current density to target, in place.

        logweight += log target(x) - log current(x)

        Parameters
        ----------
        particles : ParticleSet
            Particles produced by propose() (or an earlier reweight()).
        target : Distribution
            New target density. May be unnormalized (e.g. Temperature).

        Returns
        -------
        particles : ParticleSet
            The same set, for chaining.
        """
        for p in particles:
            logp = target.log_density(p.x)
            p.logweight = p.logweight + logp - p.density.log_density(p.x)
            p.logp = logp
            p.density = target

        return particles

    def propose_and_weight(self, proposal: Distribution, target: Distribution, n: int):
        """
        Draw n particles from the proposal and weight them against target immediately.
        """
        if n < 1:
            raise ValueError("Number of particles n must be positive.")

        particles = []
        for _ in range(n):
            x = proposal.sample(self.rng)
            logq = proposal.log_density(x)
            logp = target.log_density(x)
            particles.append(Particle(
                x,
                logweight=logp - logq,
                logq=logq,
                logp=logp,
                density=target,
            ))

        return ParticleSet(particles)
