import numpy as np

from smc_kit.utils.errors import EmptyInputError
from smc_kit.utils.logspace import logsumexp


def _logweights(particles):
    logweights = np.array([p.logweight for p in particles], dtype=float)
    if logweights.size == 0:
        raise EmptyInputError("Weight statistics need at least one particle.")
    return logweights


def total_logweight(particles):
    """
    Log of the sum of the importance weights.
    """
    return logsumexp(_logweights(particles))


def mean_logweight(particles):
    """
    Log of the mean importance weight, i.e. the estimate log Z-hat of the
    target's normalizing constant. -inf if every weight is zero.
    """
    logweights = _logweights(particles)
    return logsumexp(logweights) - np.log(len(logweights))


def evidence(particles):
    """Z-hat = exp(log Z-hat)."""
    return float(np.exp(mean_logweight(particles)))


def normalized_logweights(particles):
    """
    Log-weights shifted so that their logsumexp is 0.

    Undefined (NaN) when the total weight is zero; resamplers check for that
    case before calling this.
    """
    logweights = _logweights(particles)
    return logweights - logsumexp(logweights)


def normalized_weights(particles):
    """
    Normalized weights, shape (N,), summing to 1.
    """
    return np.exp(normalized_logweights(particles))


def max_relative_weight(particles):
    """
    Largest normalized weight in the set.
    """
    return float(np.max(normalized_weights(particles)))


def radius_fractions(particles):
    """
    Per-particle radius relative to the heaviest particle, sqrt(w_i / max w).

    Drawing circles with these radii makes their area, not their radius,
    proportional to weight.
    """
    weights = normalized_weights(particles)
    return np.sqrt(weights / np.max(weights))


def effective_sample_size(particles):
    """
    ESS = 1 / sum(normalized_weights^2), between 1 and N.
    """
    weights = normalized_weights(particles)
    return float(1.0 / np.sum(weights ** 2))
