import numpy as np

from smc_kit.particles.particle_set import ParticleSet
from smc_kit.sampling.categorical import categorical
from smc_kit.sampling.statistics import mean_logweight, normalized_logweights, total_logweight
from smc_kit.utils.errors import EmptyInputError, InvalidDistributionError
from smc_kit.utils.logspace import logsumexp


def _check_resamplable(particles):
    if len(particles) == 0:
        raise EmptyInputError("Cannot resample an empty particle set.")
    if total_logweight(particles) == -np.inf:
        raise InvalidDistributionError("All particles have zero weight; the particle set has collapsed.")


def _spawn_generation(particles, indices, logweights):
    """
    Build the resampled generation and record each child on its parent.
    """
    children = [
        particles[i].spawn(logweight=lw, parent=int(i))
        for i, lw in zip(indices, logweights)
    ]
    return ParticleSet(children, ancestor_indices=indices, source=particles)


def _residual_indices(weights, rng):
    """
    Residual resampling indices for normalized weights.

    First deterministically copies floor(N * w_i) of each particle (in index
    order), then draws the remaining slots from the residuals N * w_i - floor(N * w_i).
    """
    N = len(weights)
    expected = N * np.asarray(weights, dtype=float)
    copies = np.floor(expected).astype(int)
    residuals = expected - copies

    indices = list(np.repeat(np.arange(N), copies)[:N])
    while len(indices) < N:
        indices.append(categorical(residuals, rng))

    return np.array(indices, dtype=int)


def multinomial_resample(particles, rng=None):
    """
    Multinomial resampling.

    Args:
        particles (ParticleSet): Weighted generation, size N.
        rng (np.random.Generator or None)

    Returns:
        resampled (ParticleSet): N particles drawn independently in proportion
            to weight, each with logweight equal to the evidence estimate log Z-hat.
    """
    if rng is None:
        rng = np.random.default_rng()

    _check_resamplable(particles)

    N = len(particles)
    avg_logwt = mean_logweight(particles)
    weights = np.exp(normalized_logweights(particles))

    # TODO: one cumsum + searchsorted over N uniforms would avoid the O(N^2) scan.
    indices = np.array([categorical(weights, rng) for _ in range(N)], dtype=int)

    return _spawn_generation(particles, indices, np.full(N, avg_logwt))


def residual_resample(particles, rng=None):
    """
    Residual resampling.

    Lower variance in the number of copies per particle than multinomial
    resampling, with the same expectation. Every output particle gets
    logweight log Z-hat.
    """
    if rng is None:
        rng = np.random.default_rng()

    _check_resamplable(particles)

    N = len(particles)
    avg_logwt = mean_logweight(particles)
    weights = np.exp(normalized_logweights(particles))

    indices = _residual_indices(weights, rng)

    return _spawn_generation(particles, indices, np.full(N, avg_logwt))


def residual_resample_importance(particles, priority_fn=None, rng=None):
    """
    Residual resampling from a priority distribution, with importance correction.

    The resampling distribution is built from priority_fn(logweight) instead of
    the weights themselves. Each output particle carries the correction for
    that choice:
        logweight = log Z-hat + (normalized_logweight - normalized_logpriority)
    so the resampled set still targets the same distribution.

    Parameters
    ----------
    particles : ParticleSet
        Weighted generation, size N.
    priority_fn : callable or None
        Maps a particle's log-weight to an unnormalized log-priority.
        None means the identity, which reduces to residual_resample().
    rng : np.random.Generator or None

    Returns
    -------
    resampled : ParticleSet
        N particles with importance-corrected log-weights.
    """
    if rng is None:
        rng = np.random.default_rng()
    if priority_fn is None:
        priority_fn = lambda logweight: logweight

    _check_resamplable(particles)

    avg_logwt = mean_logweight(particles)
    normalized_logwts = normalized_logweights(particles)

    logpriorities = np.array([priority_fn(p.logweight) for p in particles], dtype=float)
    if np.any(np.isnan(logpriorities)):
        raise InvalidDistributionError("priority_fn returned NaN.")

    logpriority_total = logsumexp(logpriorities)
    if logpriority_total == -np.inf:
        raise InvalidDistributionError("All particles have zero resampling priority.")

    normalized_logpriorities = logpriorities - logpriority_total

    # NaN where both are -inf; such particles have zero priority and are never drawn
    with np.errstate(invalid="ignore"):
        importance_logwts = normalized_logwts - normalized_logpriorities

    indices = _residual_indices(np.exp(normalized_logpriorities), rng)

    return _spawn_generation(particles, indices, avg_logwt + importance_logwts[indices])


RESAMPLERS = {
    "multinomial": multinomial_resample,
    "residual": residual_resample,
    "residual_importance": residual_resample_importance,
}


def get_resampler(name: str):
    """
    Look up a resampling function by name.
    """
    try:
        return RESAMPLERS[name]
    except KeyError:
        raise ValueError(f"Unknown resampler '{name}'. Choose one of {sorted(RESAMPLERS)}.") from None
