import numpy as np
from scipy.stats import norm

from smc_kit.distributions.base import Distribution


class Normal(Distribution):
    """
    Gaussian distribution N(mu, sigma^2).

    Sampling uses the Box-Muller transform on the injected generator, so a
    seeded generator reproduces the same draws.
    """
    def __init__(self, mu: float, sigma: float):
        if sigma <= 0:
            raise ValueError("Standard deviation sigma must be positive.")

        self.mu = mu
        self.sigma = sigma

    def sample(self, rng=None):
        if rng is None:
            rng = np.random.default_rng()

        u = 1.0 - rng.uniform()     # (0, 1], keeps log(u) finite
        v = rng.uniform()
        z = np.sqrt(-2.0 * np.log(u)) * np.cos(2.0 * np.pi * v)
        return float(self.mu + self.sigma * z)

    def log_density(self, x):
        return norm.logpdf(x, loc=self.mu, scale=self.sigma)

    def __repr__(self):
        return f"Normal(mu={self.mu}, sigma={self.sigma})"
