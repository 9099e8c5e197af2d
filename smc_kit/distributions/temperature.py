from smc_kit.distributions.base import Distribution
from smc_kit.utils.errors import UnsupportedOperationError


class Temperature(Distribution):
    """
    Tempered, unnormalized density:
        log p_T(x) = log p(x) / T

    Only usable as an importance sampling target. It has no sampler.
    """
    def __init__(self, base: Distribution, T: float):
        if T <= 0:
            raise ValueError("Temperature T must be positive.")

        self.base = base
        self.T = T

    def sample(self, rng=None):
        raise UnsupportedOperationError(
            "Temperature is an unnormalized target density and cannot be sampled."
        )

    def log_density(self, x):
        return self.base.log_density(x) / self.T

    def __repr__(self):
        return f"Temperature(base={self.base}, T={self.T})"
