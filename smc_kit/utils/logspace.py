import numpy as np

from smc_kit.utils.errors import EmptyInputError


def logaddexp(a, b):
    """
    Compute log(exp(a) + exp(b)) without overflow.

    -inf is treated as the additive identity, so logaddexp(a, -inf) returns a
    exactly and never produces NaN.
    """
    if a == -np.inf:
        return b
    if b == -np.inf:
        return a
    return float(max(a, b) + np.log1p(np.exp(-abs(a - b))))


def logsumexp(values):
    """
    Left fold of logaddexp over values, starting from -inf.

    An empty sequence returns -inf.
    """
    total = -np.inf
    for v in values:
        total = logaddexp(total, v)
    return total


def logmeanexp(values):
    """Compute log(mean(exp(values)))."""
    values = list(values)
    if len(values) == 0:
        raise EmptyInputError("logmeanexp of an empty sequence is undefined.")
    return logsumexp(values) - np.log(len(values))
