import numpy as np
from typing import List

from smc_kit.distributions.base import Distribution
from smc_kit.sampling.categorical import categorical
from smc_kit.utils.errors import InvalidDistributionError
from smc_kit.utils.logspace import logsumexp


class Mixture(Distribution):
    """
    Finite mixture of univariate distributions.

    Model definition:
        k ~ Categorical(w / sum(w))
        x | k ~ components[k]

    Weights need not be normalized, but must be non-negative and not all zero.
    """
    def __init__(self, components: List[Distribution], weights: List[float]):
        if len(components) == 0:
            raise InvalidDistributionError("A mixture needs at least one component.")
        if len(components) != len(weights):
            raise InvalidDistributionError("Parameters components and weights must have the same length.")

        weights = np.asarray(weights, dtype=float)
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise InvalidDistributionError("Mixture weights must be finite and non-negative.")
        if np.sum(weights) == 0:
            raise InvalidDistributionError("Mixture weights must not all be zero.")

        self.components = list(components)
        self.weights = weights

    @property
    def log_weights(self):
        """
        Log of the normalized mixture weights (-inf for zero-weight components).
        """
        with np.errstate(divide="ignore"):
            return np.log(self.weights / np.sum(self.weights))

    def sample(self, rng=None):
        if rng is None:
            rng = np.random.default_rng()

        k = categorical(self.weights, rng)
        return self.components[k].sample(rng)

    def log_density(self, x):
        """
        log p(x) = log sum_k w_k p_k(x), accumulated in log space.
        """
        return logsumexp(
            lw + component.log_density(x)
            for lw, component in zip(self.log_weights, self.components)
            if lw > -np.inf
        )

    def __repr__(self):
        return f"Mixture(components={self.components}, weights={self.weights.tolist()})"
