import numpy as np

from smc_kit.utils.errors import InvalidDistributionError


def categorical(weights, rng=None):
    """
    Draw a single index with probability proportional to its weight.

    Inverse-CDF ("roulette wheel") sampling: builds the normalized CDF, draws
    u ~ Uniform(0, 1] and returns the smallest index i with cdf[i] >= u.

    Args:
        weights (array-like): Non-negative, finite, unnormalized weights.
        rng (np.random.Generator or None)

    Returns:
        index (int): Selected index. Zero-weight entries are never selected.

    Raises:
        InvalidDistributionError: if weights are empty, negative, non-finite
            or sum to zero.
    """
    if rng is None:
        rng = np.random.default_rng()

    weights = np.asarray(weights, dtype=float)

    if weights.ndim != 1 or weights.size == 0:
        raise InvalidDistributionError("Categorical weights must be a non-empty 1-D sequence.")
    if not np.all(np.isfinite(weights)):
        raise InvalidDistributionError("Categorical weights must be finite.")
    if np.any(weights < 0):
        raise InvalidDistributionError("Categorical weights must be non-negative.")

    total = np.sum(weights)
    if total == 0:
        raise InvalidDistributionError("Categorical weights sum to zero.")

    cdf = np.cumsum(weights / total)

    # 1 - U lies in (0, 1], so the first entry with cdf >= u has positive weight
    u = 1.0 - rng.uniform()
    idx = int(np.searchsorted(cdf, u, side="left"))

    # Rounding can leave cdf[-1] slightly below 1
    last_positive = int(np.flatnonzero(weights)[-1])
    return min(idx, last_positive)
